# crypto/keys.py
"""RSA key pair generation and PEM loading using cryptography."""
import logging
from typing import NamedTuple
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

log = logging.getLogger(__name__)

MIN_KEY_SIZE = 2048
PUBLIC_EXPONENT = 65537

class KeyPair(NamedTuple):
    private_pem: str  # PKCS8, unencrypted
    public_pem: str  # SubjectPublicKeyInfo

def generate_key_pair(key_size: int = 2048, public_exponent: int = PUBLIC_EXPONENT) -> KeyPair:
    if key_size < MIN_KEY_SIZE:
        raise ValueError(f"RSA key size must be at least {MIN_KEY_SIZE} bits, got {key_size}")
    key = rsa.generate_private_key(public_exponent=public_exponent, key_size=key_size)
    private_pem = key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )
    public_pem = key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )
    log.debug("generated %d-bit RSA key pair", key_size)
    return KeyPair(private_pem.decode(), public_pem.decode())

def _check_size(key):
    if key.key_size < MIN_KEY_SIZE:
        raise ValueError(f"RSA key too small: {key.key_size} bits (minimum {MIN_KEY_SIZE})")

def load_private_key(private_pem: str) -> rsa.RSAPrivateKey:
    priv = serialization.load_pem_private_key(private_pem.encode(), password=None)
    if not isinstance(priv, rsa.RSAPrivateKey):
        raise TypeError(f"expected an RSA private key, got {type(priv).__name__}")
    _check_size(priv)
    return priv

def load_public_key(public_pem: str) -> rsa.RSAPublicKey:
    pub = serialization.load_pem_public_key(public_pem.encode())
    if not isinstance(pub, rsa.RSAPublicKey):
        raise TypeError(f"expected an RSA public key, got {type(pub).__name__}")
    _check_size(pub)
    return pub
