"""COSE algorithm registry for signature verification.

Supported algorithms (RFC 8152 / RFC 8812 identifiers):
  - ES256 (-7), ES384 (-35), ES512 (-36), ES256K (-47)   ECDSA
  - PS256 (-37), PS384 (-38), PS512 (-39)                 RSASSA-PSS
  - RS256 (-257), RS384 (-258), RS512 (-259), RS1 (-65535) RSASSA-PKCS1-v1_5

The registry is a closed, read-only table built at import time. It exposes:
  find(identifier) -> AlgorithmDescriptor | None
  resolve(identifier_or_descriptor) -> AlgorithmDescriptor | None
  key_kind_of(public_key) -> KeyKind | None

Lookups are exact: integers match the COSE id, strings match the canonical
name ("ES256", not "es256"). Anything else has no match.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec, rsa


class Scheme(str, Enum):
    ECDSA = "ecdsa"
    RSA_PKCS1V15 = "rsa-pkcs1v15"
    RSA_PSS = "rsa-pss"


class KeyKind(str, Enum):
    EC = "ec"
    RSA = "rsa"


_SCHEME_KEY_KIND = {
    Scheme.ECDSA: KeyKind.EC,
    Scheme.RSA_PKCS1V15: KeyKind.RSA,
    Scheme.RSA_PSS: KeyKind.RSA,
}


def key_kind_of(public_key: Any) -> Optional[KeyKind]:
    if isinstance(public_key, ec.EllipticCurvePublicKey):
        return KeyKind.EC
    if isinstance(public_key, rsa.RSAPublicKey):
        return KeyKind.RSA
    return None


@dataclass(frozen=True)
class AlgorithmDescriptor:
    id: int
    name: str
    scheme: Scheme
    hash_function: hashes.HashAlgorithm
    curve: Optional[str] = None  # cryptography curve name, ECDSA only

    @property
    def key_kind(self) -> KeyKind:
        return _SCHEME_KEY_KIND[self.scheme]

    def is_compatible_with(self, key_kind: Optional[KeyKind]) -> bool:
        return key_kind is self.key_kind

    def is_compatible_key(self, public_key: Any) -> bool:
        """True when ``public_key`` can be used with this algorithm.

        The key must belong to the algorithm's key family. ECDSA algorithms
        are bound to a single curve, so an EC key on another curve is
        incompatible too.
        """
        if not self.is_compatible_with(key_kind_of(public_key)):
            return False
        if self.curve is not None:
            return public_key.curve.name == self.curve
        return True

    def __str__(self) -> str:
        return self.name


_ALGORITHMS: Tuple[AlgorithmDescriptor, ...] = (
    AlgorithmDescriptor(-7, "ES256", Scheme.ECDSA, hashes.SHA256(), "secp256r1"),
    AlgorithmDescriptor(-35, "ES384", Scheme.ECDSA, hashes.SHA384(), "secp384r1"),
    AlgorithmDescriptor(-36, "ES512", Scheme.ECDSA, hashes.SHA512(), "secp521r1"),
    AlgorithmDescriptor(-47, "ES256K", Scheme.ECDSA, hashes.SHA256(), "secp256k1"),
    AlgorithmDescriptor(-37, "PS256", Scheme.RSA_PSS, hashes.SHA256()),
    AlgorithmDescriptor(-38, "PS384", Scheme.RSA_PSS, hashes.SHA384()),
    AlgorithmDescriptor(-39, "PS512", Scheme.RSA_PSS, hashes.SHA512()),
    AlgorithmDescriptor(-257, "RS256", Scheme.RSA_PKCS1V15, hashes.SHA256()),
    AlgorithmDescriptor(-258, "RS384", Scheme.RSA_PKCS1V15, hashes.SHA384()),
    AlgorithmDescriptor(-259, "RS512", Scheme.RSA_PKCS1V15, hashes.SHA512()),
    AlgorithmDescriptor(-65535, "RS1", Scheme.RSA_PKCS1V15, hashes.SHA1()),
)

_BY_ID: Dict[int, AlgorithmDescriptor] = {a.id: a for a in _ALGORITHMS}
_BY_NAME: Dict[str, AlgorithmDescriptor] = {a.name: a for a in _ALGORITHMS}


def find_by_id(alg_id: int) -> Optional[AlgorithmDescriptor]:
    return _BY_ID.get(alg_id)


def find_by_name(name: str) -> Optional[AlgorithmDescriptor]:
    return _BY_NAME.get(name)


def find(identifier: Union[int, str]) -> Optional[AlgorithmDescriptor]:
    # bool is an int subclass; True/False are never algorithm ids
    if isinstance(identifier, bool):
        return None
    if isinstance(identifier, int):
        return find_by_id(identifier)
    if isinstance(identifier, str):
        return find_by_name(identifier)
    return None


def resolve(algorithm: Union[AlgorithmDescriptor, int, str]) -> Optional[AlgorithmDescriptor]:
    if isinstance(algorithm, AlgorithmDescriptor):
        return algorithm
    return find(algorithm)


def all_algorithms() -> Tuple[AlgorithmDescriptor, ...]:
    return _ALGORITHMS


__all__ = [
    "Scheme",
    "KeyKind",
    "AlgorithmDescriptor",
    "key_kind_of",
    "find",
    "find_by_id",
    "find_by_name",
    "resolve",
    "all_algorithms",
]
