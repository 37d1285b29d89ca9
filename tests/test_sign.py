import pytest
from cryptography.hazmat.primitives.asymmetric import ec, ed25519, rsa

from coseverify.crypto.alg_registry import all_algorithms, Scheme
from coseverify.crypto.sign import sign_message
from coseverify.errors import IncompatibleKey, UnsupportedAlgorithm
from coseverify.verifier import SignatureVerifier

_CURVES = {
    "secp256r1": ec.SECP256R1(),
    "secp384r1": ec.SECP384R1(),
    "secp521r1": ec.SECP521R1(),
    "secp256k1": ec.SECP256K1(),
}
RSA_SK = rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.mark.parametrize("alg", all_algorithms(), ids=lambda a: a.name)
def test_sign_then_verify_every_algorithm(alg):
    sk = ec.generate_private_key(_CURVES[alg.curve]) if alg.scheme is Scheme.ECDSA else RSA_SK
    sig = sign_message(alg.id, sk, b"payload")
    verifier = SignatureVerifier(alg, [alg.name], sk.public_key())
    assert verifier.verify(sig, b"payload") is True
    assert verifier.verify(sig, b"payload!") is False


def test_sign_unknown_algorithm():
    with pytest.raises(UnsupportedAlgorithm, match="-260"):
        sign_message(-260, RSA_SK, b"x")


def test_sign_incompatible_key():
    with pytest.raises(IncompatibleKey):
        sign_message("ES256", RSA_SK, b"x")
    with pytest.raises(IncompatibleKey):
        sign_message("RS256", ed25519.Ed25519PrivateKey.generate(), b"x")
