"""Store registration wizard rules: step checks, weekly hours rows, document types."""
import uuid
from typing import Any, Optional

from app.models.store_document import DocumentType
from app.models.store_operating_hours import WEEK_DAYS, StoreOperatingHours
from app.schemas.store import DayHours, UploadedDocument

TOTAL_STEPS = 5

# Upload form keys -> document_type values
DOCUMENT_TYPE_MAP: dict[str, DocumentType] = {
    "PAN_IMAGE": DocumentType.PAN,
    "PAN": DocumentType.PAN,
    "GST_IMAGE": DocumentType.GST,
    "GST": DocumentType.GST,
    "AADHAR_FRONT": DocumentType.AADHAAR,
    "AADHAR_BACK": DocumentType.AADHAAR,
    "AADHAR": DocumentType.AADHAAR,
    "AADHAAR_FRONT": DocumentType.AADHAAR,
    "AADHAAR_BACK": DocumentType.AADHAAR,
    "AADHAAR": DocumentType.AADHAAR,
    "FSSAI_IMAGE": DocumentType.FSSAI,
    "FSSAI": DocumentType.FSSAI,
    "PHARMACIST_CERTIFICATE": DocumentType.PHARMACIST_CERTIFICATE,
    "PHARMACY_COUNCIL_REGISTRATION": DocumentType.PHARMACY_COUNCIL_REGISTRATION,
    "DRUG_LICENSE_IMAGE": DocumentType.DRUG_LICENSE,
    "DRUG_LICENSE": DocumentType.DRUG_LICENSE,
    "SHOP_ESTABLISHMENT_IMAGE": DocumentType.SHOP_ESTABLISHMENT,
    "SHOP_ESTABLISHMENT": DocumentType.SHOP_ESTABLISHMENT,
    "TRADE_LICENSE_IMAGE": DocumentType.TRADE_LICENSE,
    "TRADE_LICENSE": DocumentType.TRADE_LICENSE,
    "UDYAM_IMAGE": DocumentType.UDYAM,
    "UDYAM": DocumentType.UDYAM,
    "OTHER_IMAGE": DocumentType.OTHER,
    "OTHER": DocumentType.OTHER,
}

# (field, message) per wizard step; checked in order
_STEP_REQUIRED_FIELDS: dict[int, list[tuple[str, str]]] = {
    1: [
        ("store_name", "Store name is required"),
        ("cuisine_type", "Cuisine type is required"),
        ("full_address", "Full address is required"),
        ("city", "City is required"),
        ("state", "State is required"),
        ("postal_code", "Postal code is required"),
    ],
    2: [
        ("pan_number", "PAN number is required"),
        ("aadhar_number", "Aadhar number is required"),
    ],
    3: [
        ("bank_account_holder", "Account holder name is required"),
        ("bank_account_number", "Account number is required"),
        ("bank_ifsc", "IFSC code is required"),
        ("bank_name", "Bank name is required"),
    ],
    4: [
        ("opening_time", "Opening and closing times are required"),
        ("closing_time", "Opening and closing times are required"),
    ],
}


def map_document_type(key: str) -> str:
    mapped = DOCUMENT_TYPE_MAP.get(key)
    return mapped.value if mapped else key


def _filled(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, (list, tuple)):
        # cuisine_type arrives as [""] from an untouched form
        return bool(value) and _filled(value[0])
    return True


def validate_step(step: int, form: dict[str, Any]) -> Optional[str]:
    """Return the first error message for the step, or None when it can be left."""
    if step < 1 or step > TOTAL_STEPS:
        return f"Unknown step {step}"
    for field, message in _STEP_REQUIRED_FIELDS.get(step, []):
        if not _filled(form.get(field)):
            return message
    if step == 1:
        if not form.get("latitude") or not form.get("longitude"):
            return "Store location coordinates are required. Please confirm on the map."
        if form.get("has_confirmed_pin") is False:
            return "Please confirm your store location by adjusting the pin on the map before proceeding"
    return None


def build_operating_hours(store_pk: str, hours: dict[str, DayHours]) -> list[StoreOperatingHours]:
    """One row per weekday; a day is open only when both open and close are set."""
    rows = []
    for day in WEEK_DAYS:
        d = hours.get(day.value.lower()) or DayHours()
        opens = d.open or None
        closes = d.close or None
        rows.append(
            StoreOperatingHours(
                id=str(uuid.uuid4()),
                store_id=store_pk,
                day_of_week=day.value,
                is_open=bool(opens and closes),
                slot1_start=opens,
                slot1_end=closes,
                slot2_start=None,
                slot2_end=None,
                total_duration_minutes=None,
                is_24_hours=False,
                same_for_all_days=False,
            )
        )
    return rows


def document_rows(documents: list[UploadedDocument]) -> list[dict[str, Any]]:
    return [
        {
            "document_type": map_document_type(doc.type),
            "document_url": doc.url,
            "document_name": doc.name,
            "is_verified": False,
        }
        for doc in documents
    ]
