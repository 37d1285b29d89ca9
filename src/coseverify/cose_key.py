"""COSE_Key decoding (RFC 8152 sections 7 and 13).

Credential public keys arrive as CBOR maps with integer labels:
  EC2: {1: 2, 3: alg, -1: crv, -2: x, -3: y}
  RSA: {1: 3, 3: alg, -1: n, -2: e}

CoseKey turns such a map into a ``cryptography`` public key that
SignatureVerifier accepts, and exposes the declared ``alg`` (label 3).
"""
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

import cbor2
from cryptography.hazmat.primitives.asymmetric import ec, rsa

KTY = 1
ALG = 3
KTY_EC2 = 2
KTY_RSA = 3

_EC2_CURVES: Dict[int, ec.EllipticCurve] = {
    1: ec.SECP256R1(),
    2: ec.SECP384R1(),
    3: ec.SECP521R1(),
    8: ec.SECP256K1(),
}


def _int(value: Any) -> int:
    if not isinstance(value, (bytes, bytearray)) or not value:
        raise ValueError("COSE key coordinate must be a non-empty bstr")
    return int.from_bytes(value, "big")


def _uint_bytes(value: int, size: Optional[int] = None) -> bytes:
    size = size or max(1, (value.bit_length() + 7) // 8)
    return value.to_bytes(size, "big")


class CoseKey(dict):
    """A COSE formatted public key."""

    @classmethod
    def from_cbor(cls, data: bytes) -> "CoseKey":
        try:
            obj = cbor2.loads(data)
        except Exception as e:
            raise ValueError("invalid CBOR COSE_Key") from e
        if not isinstance(obj, dict):
            raise ValueError("COSE_Key must be a CBOR map")
        return cls(obj)

    @classmethod
    def from_public_key(cls, public_key: Any, alg: Optional[int] = None) -> "CoseKey":
        if isinstance(public_key, ec.EllipticCurvePublicKey):
            crv = next(
                (label for label, curve in _EC2_CURVES.items() if curve.name == public_key.curve.name),
                None,
            )
            if crv is None:
                raise ValueError(f"unsupported curve: {public_key.curve.name}")
            size = (public_key.curve.key_size + 7) // 8
            pn = public_key.public_numbers()
            key: Dict[int, Any] = {KTY: KTY_EC2, -1: crv, -2: _uint_bytes(pn.x, size), -3: _uint_bytes(pn.y, size)}
        elif isinstance(public_key, rsa.RSAPublicKey):
            pn = public_key.public_numbers()
            key = {KTY: KTY_RSA, -1: _uint_bytes(pn.n), -2: _uint_bytes(pn.e)}
        else:
            raise ValueError("only EC and RSA public keys can be encoded")
        if alg is not None:
            key[ALG] = alg
        return cls(key)

    @property
    def kty(self) -> Optional[int]:
        return self.get(KTY)

    @property
    def algorithm(self) -> Optional[int]:
        return self.get(ALG)

    def public_key(self):
        if self.kty == KTY_EC2:
            curve = _EC2_CURVES.get(self.get(-1))
            if curve is None:
                raise ValueError(f"unsupported COSE curve: {self.get(-1)!r}")
            return ec.EllipticCurvePublicNumbers(_int(self.get(-2)), _int(self.get(-3)), curve).public_key()
        if self.kty == KTY_RSA:
            return rsa.RSAPublicNumbers(_int(self.get(-2)), _int(self.get(-1))).public_key()
        raise ValueError(f"unsupported COSE key type: {self.kty!r}")

    def to_cbor(self) -> bytes:
        return cbor2.dumps(dict(self), canonical=True)


def parse_cose_key(data: Mapping[int, Any] | bytes) -> CoseKey:
    if isinstance(data, (bytes, bytearray)):
        return CoseKey.from_cbor(bytes(data))
    return CoseKey(data)


__all__ = ["CoseKey", "parse_cose_key"]
