from cryptography.hazmat.primitives import serialization


def load_public_key(data: bytes):
    """Load a SubjectPublicKeyInfo public key from PEM or DER bytes."""
    if isinstance(data, str):
        data = data.encode()
    if data.lstrip().startswith(b"-----BEGIN"):
        return serialization.load_pem_public_key(data)
    return serialization.load_der_public_key(data)
