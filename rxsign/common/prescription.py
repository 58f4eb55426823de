# common/prescription.py
"""Prescription record schema.

Attributes are snake_case; the JSON (wire) names are PascalCase and are
emitted in field declaration order, which is the canonical order used for
hashing. Do not reorder fields.

Validation is strict: mistyped values ("1" for an int, 0 for a bool) are
rejected rather than coerced.
"""
from typing import Tuple
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_pascal

class WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
        strict=True,
    )

class Provider(WireModel):
    name: str
    version: str

class Script(WireModel):
    token: str
    order_id: str = Field(alias="OrderID")
    form_type: str
    controlled_drugs: bool
    prescribed: str
    expiry_date: str
    earliest_dispense: str
    urgency: str
    repeat_number: int
    repeat_count: int

class Prescriber(WireModel):
    provider_code: str
    spine_code: str
    gmc_code: str = Field(alias="GMCCode")
    name: str
    email: str

class Practice(WireModel):
    provider_code: str
    spine_code: str
    name: str
    address1: str
    address2: str
    address3: str
    address4: str
    post_code: str
    voice_phone: str
    email: str

class Delivery(WireModel):
    address1: str
    address2: str
    address3: str
    address4: str
    post_code: str

class Patient(WireModel):
    provider_code: str
    nhs_number: str = Field(alias="NHSNumber")
    chi_number: str = Field(alias="CHINumber")
    title: str
    suffix: str
    surname: str
    forenames: str
    address1: str
    address2: str
    address3: str
    address4: str
    post_code: str
    voice_phone: str
    mobile_phone: str
    email: str
    date_of_birth: str
    sex: str
    delivery: Delivery

class Quantity(WireModel):
    value: int
    unit: str

class Medication(WireModel):
    drug_code: str
    drug_name: str
    dosage: str
    cautions: str
    quantity: Quantity

class Prescription(WireModel):
    schema_version: int
    timestamp: str
    provider: Provider
    script: Script
    prescriber: Prescriber
    practice: Practice
    patient: Patient
    medication: Tuple[Medication, ...]
    patient_instructions: Tuple[str, ...]

    @classmethod
    def from_json(cls, text) -> "Prescription":
        """Parse and validate a wire-format JSON document."""
        return cls.model_validate_json(text)

    def to_wire(self) -> dict:
        """Plain JSON-compatible dict keyed by wire names, in canonical order."""
        return self.model_dump(mode="json", by_alias=True)
