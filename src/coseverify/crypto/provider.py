"""Scheme-level signature verification on top of ``cryptography``.

verify_primitive returns False when the library reports InvalidSignature.
Other errors (wrong key object, non-bytes input, backend faults) propagate so
the caller can tell a mismatch apart from a fault.
"""
from __future__ import annotations

from typing import Any

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec, padding

from .alg_registry import Scheme


def pss_padding(hash_function: hashes.HashAlgorithm) -> padding.PSS:
    # MGF1 uses the digest hash; salt length equals the digest length
    return padding.PSS(mgf=padding.MGF1(hash_function), salt_length=padding.PSS.DIGEST_LENGTH)


def verify_primitive(
    scheme: Scheme,
    hash_function: hashes.HashAlgorithm,
    public_key: Any,
    signature: bytes,
    message: bytes,
) -> bool:
    try:
        if scheme is Scheme.ECDSA:
            public_key.verify(signature, message, ec.ECDSA(hash_function))
        elif scheme is Scheme.RSA_PKCS1V15:
            public_key.verify(signature, message, padding.PKCS1v15(), hash_function)
        elif scheme is Scheme.RSA_PSS:
            public_key.verify(signature, message, pss_padding(hash_function), hash_function)
        else:
            raise ValueError(f"unknown signature scheme: {scheme!r}")
    except InvalidSignature:
        return False
    return True


__all__ = ["verify_primitive", "pss_padding"]
