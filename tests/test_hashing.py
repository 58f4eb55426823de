"""Tests for the canonical prescription hasher."""
import base64
import hashlib
import json

import pytest

from rxsign.common.sample import SAMPLE_PAYLOAD
from rxsign.crypto.hashing import canonical_json, generate_sha256_hash


def _with_patient(prescription, **changes):
    return prescription.model_copy(update={"patient": prescription.patient.model_copy(update=changes)})


class TestCanonicalJson:

    def test_compact_and_in_literal_order(self, prescription):
        expected = json.dumps(SAMPLE_PAYLOAD, separators=(",", ":"), ensure_ascii=False)

        assert canonical_json(prescription) == expected

    def test_prefix(self, prescription):
        text = canonical_json(prescription)

        assert text.startswith('{"SchemaVersion":1,"Timestamp":"2025-07-15T12:00:05Z","Provider":{"Name":"Name","Version":"9.7.1"}')
        assert '"ControlledDrugs":false' in text
        assert '"Quantity":{"Value":21,"Unit":"tablet"}' in text

    def test_non_ascii_kept_verbatim(self, prescription):
        changed = _with_patient(prescription, surname="Jönes")

        assert '"Surname":"Jönes"' in canonical_json(changed)


class TestGenerateSha256Hash:

    def test_deterministic(self, prescription):
        assert generate_sha256_hash(prescription) == generate_sha256_hash(prescription)

    def test_encoding(self, prescription):
        digest = generate_sha256_hash(prescription)

        assert len(digest) == 44
        assert len(base64.b64decode(digest, validate=True)) == 32

    def test_matches_sha256_of_canonical_text(self, prescription):
        text = canonical_json(prescription)
        expected = base64.b64encode(hashlib.sha256(text.encode("utf-8")).digest()).decode()

        assert generate_sha256_hash(prescription) == expected

    @pytest.mark.parametrize("changes", [
        {"surname": "Smith"},
        {"date_of_birth": "1966-06-11"},
        {"nhs_number": "9434765919"},
        {"address4": " "},
    ])
    def test_patient_field_change_changes_digest(self, prescription, changes):
        assert generate_sha256_hash(_with_patient(prescription, **changes)) != generate_sha256_hash(prescription)

    def test_quantity_change_changes_digest(self, prescription):
        med = prescription.medication[0]
        changed_med = med.model_copy(update={"quantity": med.quantity.model_copy(update={"value": 28})})
        changed = prescription.model_copy(update={"medication": (changed_med,)})

        assert generate_sha256_hash(changed) != generate_sha256_hash(prescription)

    def test_flag_change_changes_digest(self, prescription):
        script = prescription.script.model_copy(update={"controlled_drugs": True})
        changed = prescription.model_copy(update={"script": script})

        assert generate_sha256_hash(changed) != generate_sha256_hash(prescription)

    def test_instruction_order_matters(self, prescription):
        reordered = prescription.model_copy(
            update={"patient_instructions": tuple(reversed(prescription.patient_instructions))}
        )

        assert generate_sha256_hash(reordered) != generate_sha256_hash(prescription)
