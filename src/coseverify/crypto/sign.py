"""Signing helpers matching the registry's verification parameters.

These helpers are signer-side oriented but are reused in tests.
"""
from __future__ import annotations

from typing import Any, Union

from cryptography.hazmat.primitives.asymmetric import ec, padding, rsa

from ..errors import IncompatibleKey, UnsupportedAlgorithm
from .alg_registry import AlgorithmDescriptor, Scheme, resolve
from .provider import pss_padding


def sign_message(algorithm: Union[AlgorithmDescriptor, int, str], private_key: Any, data: bytes) -> bytes:
    alg = resolve(algorithm)
    if alg is None:
        raise UnsupportedAlgorithm(f"Unsupported algorithm {algorithm}")
    if isinstance(private_key, ec.EllipticCurvePrivateKey):
        public_key = private_key.public_key()
    elif isinstance(private_key, rsa.RSAPrivateKey):
        public_key = private_key.public_key()
    else:
        raise IncompatibleKey()
    if not alg.is_compatible_key(public_key):
        raise IncompatibleKey()
    if alg.scheme is Scheme.ECDSA:
        return private_key.sign(data, ec.ECDSA(alg.hash_function))
    if alg.scheme is Scheme.RSA_PKCS1V15:
        return private_key.sign(data, padding.PKCS1v15(), alg.hash_function)
    return private_key.sign(data, pss_padding(alg.hash_function), alg.hash_function)


__all__ = ["sign_message"]
