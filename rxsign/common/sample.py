# common/sample.py
"""Fixed demo prescription."""
from .prescription import Prescription
from .utils import json_dumps

SAMPLE_PAYLOAD = {
    "SchemaVersion": 1,
    "Timestamp": "2025-07-15T12:00:05Z",
    "Provider": {
        "Name": "Name",
        "Version": "9.7.1",
    },
    "Script": {
        "Token": "7ACF6601-C955-4624-82E8-DEA2F829C967",
        "OrderID": "4017-29345",
        "FormType": "External",
        "ControlledDrugs": False,
        "Prescribed": "2025-07-15T09:00:00Z",
        "ExpiryDate": "2026-01-15",
        "EarliestDispense": "2025-07-15T09:00:00Z",
        "Urgency": "NextDay",
        "RepeatNumber": 1,
        "RepeatCount": 1,
    },
    "Prescriber": {
        "ProviderCode": "0001",
        "SpineCode": "",
        "GMCCode": "ewf",
        "Name": "Omefrrada",
        "Email": "oemailk",
    },
    "Practice": {
        "ProviderCode": "0001",
        "SpineCode": "",
        "Name": "cfffs",
        "Address1": "41fne",
        "Address2": "Marewfartoven",
        "Address3": "Alwevphewingew",
        "Address4": "Evvvr",
        "PostCode": "EvvE3 83U",
        "VoicePhone": "0322",
        "Email": "asomeamil",
    },
    "Patient": {
        "ProviderCode": "0001",
        "NHSNumber": "",
        "CHINumber": "",
        "Title": "Mrs",
        "Suffix": "",
        "Surname": "Jones",
        "Forenames": "Doris",
        "Address1": "5asat",
        "Address2": "asasen",
        "Address3": "Wigassaan",
        "Address4": "",
        "PostCode": "GDN53 2TZ",
        "VoicePhone": "0211942 937839",
        "MobilePhone": "0714292 4748320",
        "Email": "email",
        "DateOfBirth": "1966-06-10",
        "Sex": "Female",
        "Delivery": {
            "Address1": "19 Orchard Gardens",
            "Address2": "Eccleston",
            "Address3": "St Helens",
            "Address4": "Merseyside",
            "PostCode": "WA10 2DR",
        },
    },
    "Medication": [{
        "DrugCode": "323509004",
        "DrugName": "Amoxicillin 250mg capsules",
        "Dosage": "One to be taken three times a day",
        "Cautions": "Complete the course",
        "Quantity": {
            "Value": 21,
            "Unit": "tablet",
        },
    }],
    "PatientInstructions": [
        "Visit our website for all your private medication needs",
        "Ready and waiting 24 hours a day, 365 days a year",
    ],
}

def sample_prescription() -> Prescription:
    # strict mode takes arrays for tuple fields only from JSON input
    return Prescription.from_json(json_dumps(SAMPLE_PAYLOAD))
