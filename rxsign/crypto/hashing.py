# crypto/hashing.py
"""Canonical SHA-256 digest of a prescription record."""
import hashlib, logging
from rxsign.common.prescription import Prescription
from rxsign.common.utils import b64, json_dumps

log = logging.getLogger(__name__)

def canonical_json(prescription: Prescription) -> str:
    # key order is the schema declaration order, never sorted
    return json_dumps(prescription.to_wire())

def generate_sha256_hash(prescription: Prescription) -> str:
    """SHA-256 over the UTF-8 canonical JSON, base64 encoded (44 chars)."""
    text = canonical_json(prescription)
    digest = b64(hashlib.sha256(text.encode("utf-8")).digest())
    log.debug("hashed %d bytes of canonical json -> %s", len(text.encode("utf-8")), digest)
    return digest
