# crypto/sign.py
"""RSA-SHA256 (PKCS#1 v1.5) sign / verify helpers using cryptography."""
import logging
from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding
from rxsign.common.utils import b64, ub64
from rxsign.crypto.keys import load_private_key, load_public_key

log = logging.getLogger(__name__)

def sign_data(data: str, private_pem: str) -> str:
    """Sign the UTF-8 bytes of ``data`` and return the base64 signature."""
    priv = load_private_key(private_pem)
    sig = priv.sign(data.encode("utf-8"), padding.PKCS1v15(), hashes.SHA256())
    log.debug("signed %d bytes with %d-bit key", len(data.encode("utf-8")), priv.key_size)
    return b64(sig)

def verify_signature(data: str, signature: str, public_pem: str) -> bool:
    """Check a base64 signature over ``data``.

    A signature that does not match returns False. A malformed key or a
    signature that is not valid base64 raises.
    """
    pub = load_public_key(public_pem)
    sig = ub64(signature)
    try:
        pub.verify(sig, data.encode("utf-8"), padding.PKCS1v15(), hashes.SHA256())
        return True
    except InvalidSignature:
        log.debug("signature rejected")
        return False
