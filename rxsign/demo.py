# rxsign/demo.py
"""Console demo: sign a prescription hash and verify it as the receiving partner."""
import argparse, logging, sys
from pathlib import Path
from typing import Optional
from pydantic import BaseModel, ConfigDict
from rich.console import Console
from rich.logging import RichHandler
from rxsign.common.config import LOG_LEVELS, load_settings
from rxsign.common.prescription import Prescription
from rxsign.common.sample import sample_prescription
from rxsign.crypto.hashing import canonical_json, generate_sha256_hash
from rxsign.crypto.keys import MIN_KEY_SIZE, KeyPair, generate_key_pair
from rxsign.crypto.sign import sign_data, verify_signature

log = logging.getLogger(__name__)

class VerificationReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    payload_hash: str
    partner_hash: str
    signature: str
    signature_valid: bool
    hashes_match: bool

    @property
    def ok(self) -> bool:
        return self.signature_valid and self.hashes_match

def run_demo(prescription: Prescription, key_pair: Optional[KeyPair] = None,
             console: Optional[Console] = None, show_keys: bool = True,
             key_size: int = 2048) -> VerificationReport:
    console = console or Console(highlight=False, soft_wrap=True)
    out = lambda *parts: console.print(*parts, markup=False, emoji=False)

    # 1. key pair
    if key_pair is None:
        key_pair = generate_key_pair(key_size)
    if show_keys:
        out("--- Generated Keys (for demonstration) ---")
        out("Private Key:\n", key_pair.private_pem)
        out("Public Key:\n", key_pair.public_pem)
        out("------------------------------------------\n")

    # 2. payload
    out("--- Prescription Payload ---")
    out(canonical_json(prescription))
    out("----------------------------\n")

    # 3. hash
    payload_hash = generate_sha256_hash(prescription)
    out("--- Payload Hash ---")
    out("SHA256 Hash (Base64):", payload_hash)
    out("--------------------\n")

    # 4. sign the hash
    signature = sign_data(payload_hash, key_pair.private_pem)
    out("--- Digital Signature ---")
    out("Signature (Base64):", signature)
    out("-------------------------\n")

    # 5. partner side: independent hash, verify against it
    out("--- Simulating Partner Verification ---")
    partner_hash = generate_sha256_hash(prescription)
    out("Partner's generated hash:", partner_hash)
    valid = verify_signature(partner_hash, signature, key_pair.public_pem)
    out("Is the signature valid?", "true" if valid else "false")

    report = VerificationReport(
        payload_hash=payload_hash,
        partner_hash=partner_hash,
        signature=signature,
        signature_valid=valid,
        hashes_match=payload_hash == partner_hash,
    )
    if report.ok:
        console.print("[green]✅ Success: The signature is valid and the hashes match![/]")
    else:
        console.print("[red]❌ Failure: The signature is invalid or the hashes do not match.[/]")
    out("-------------------------------------\n")
    log.debug("verification report: %s", report)
    return report

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="rxsign-demo", description=__doc__)
    p.add_argument("--key-size", type=int, default=None, help="RSA modulus length in bits")
    p.add_argument("--payload", type=Path, default=None, help="prescription JSON file (default: built-in sample)")
    p.add_argument("--hide-keys", action="store_true", help="do not print the generated PEM keys")
    p.add_argument("--no-strict-exit", action="store_true", help="exit 0 even when verification fails")
    p.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=None, help="logging level")
    return p

def setup_logging(level: str):
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    err = Console(stderr=True)
    try:
        settings = load_settings()
    except ValueError as e:
        err.print(f"Invalid configuration: {e}", style="red", markup=False)
        return 2
    setup_logging(args.log_level or settings.log_level)

    key_size = args.key_size if args.key_size is not None else settings.key_size
    if key_size < MIN_KEY_SIZE:
        err.print(f"[red]Key size must be at least {MIN_KEY_SIZE} bits, got {key_size}[/]")
        return 2

    if args.payload is None:
        prescription = sample_prescription()
    else:
        try:
            prescription = Prescription.from_json(args.payload.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            err.print(f"Cannot load payload {args.payload}: {e}", style="red", markup=False)
            return 2

    report = run_demo(
        prescription,
        show_keys=settings.show_keys and not args.hide_keys,
        key_size=key_size,
    )
    strict = settings.strict_exit and not args.no_strict_exit
    if not report.ok and strict:
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
