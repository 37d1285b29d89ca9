from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec, rsa

import pytest

from coseverify.errors import IncompatibleKey, UnsupportedAlgorithm
from coseverify.obs.prom import REGISTRY, export_metrics
from coseverify.verifier import SignatureVerifier

SK = ec.generate_private_key(ec.SECP256R1())


def _count(name, labels):
    return REGISTRY.get_sample_value(name, labels) or 0.0


def test_verification_outcomes_are_counted():
    verifier = SignatureVerifier(-7, ["ES256"], SK.public_key())
    sig = SK.sign(b"data", ec.ECDSA(hashes.SHA256()))
    before = {r: _count("coseverify_verifications_total", {"alg": "ES256", "result": r}) for r in ("valid", "invalid", "fault")}
    assert verifier.verify(sig, b"data") is True
    assert verifier.verify(sig, b"other") is False
    assert verifier.verify(12345, b"data") is False
    for r in ("valid", "invalid", "fault"):
        assert _count("coseverify_verifications_total", {"alg": "ES256", "result": r}) == before[r] + 1


def test_rejections_are_counted():
    before_u = _count("coseverify_rejections_total", {"reason": "unsupported_algorithm"})
    before_i = _count("coseverify_rejections_total", {"reason": "incompatible_key"})
    with pytest.raises(UnsupportedAlgorithm):
        SignatureVerifier(-260, ["ES256"], SK.public_key())
    rsa_pub = rsa.generate_private_key(public_exponent=65537, key_size=2048).public_key()
    with pytest.raises(IncompatibleKey):
        SignatureVerifier(-7, ["ES256"], rsa_pub)
    assert _count("coseverify_rejections_total", {"reason": "unsupported_algorithm"}) == before_u + 1
    assert _count("coseverify_rejections_total", {"reason": "incompatible_key"}) == before_i + 1


def test_export_metrics():
    payload, content_type = export_metrics()
    assert b"coseverify_verifications_total" in payload
    assert content_type.startswith("text/plain")
