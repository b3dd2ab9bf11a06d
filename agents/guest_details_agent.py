# agents/guest_details_agent.py
from __future__ import annotations
import re
from dataclasses import fields
from typing import Any, Dict, List, Optional

from models.booking import ContactDetails, GuestDetails, TravelerDetails

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_RE = re.compile(r"^(?:\+\d{1,3})?(\d{10})$")
_PHONE_SEPARATORS = re.compile(r"[\s\-()]")

REQUIRED_GUEST_FIELDS = {
    "first_name": "First name is required",
    "last_name": "Last name is required",
    "email": "Email is required",
    "phone": "Phone number is required",
    "address": "Address is required",
    "city": "City is required",
    "zip_code": "ZIP code is required",
}
REQUIRED_TRAVELER_FIELDS = ("first_name", "last_name", "date_of_birth", "gender", "nationality")


def is_valid_email(value: str) -> bool:
    return bool(EMAIL_RE.match((value or "").strip()))


def is_valid_phone(value: str) -> bool:
    return bool(PHONE_RE.match(_PHONE_SEPARATORS.sub("", value or "")))


class GuestDetailsAgent:
    """
    Normalizes and validates the details form.
    Works with either a raw dict OR an already built GuestDetails.
    Validation never raises; it returns {field: message}, empty when valid.
    """

    def normalize(self, raw: Any) -> GuestDetails:
        if isinstance(raw, GuestDetails):
            values = {f.name: getattr(raw, f.name) for f in fields(GuestDetails)}
        elif isinstance(raw, dict):
            values = {f.name: raw.get(f.name, "") for f in fields(GuestDetails)}
        else:
            raise TypeError("GuestDetailsAgent.normalize expects GuestDetails or dict")
        return GuestDetails(**{k: str(v or "").strip() for k, v in values.items()})

    def normalize_traveler(self, raw: Any) -> TravelerDetails:
        if isinstance(raw, TravelerDetails):
            return raw
        if not isinstance(raw, dict):
            raise TypeError("GuestDetailsAgent.normalize_traveler expects TravelerDetails or dict")
        defaults = TravelerDetails()
        passport = str(raw.get("passport_number") or "").strip()
        return TravelerDetails(
            title=str(raw.get("title") or defaults.title).strip(),
            first_name=str(raw.get("first_name") or "").strip(),
            last_name=str(raw.get("last_name") or "").strip(),
            date_of_birth=str(raw.get("date_of_birth") or "").strip(),
            gender=str(raw.get("gender") or defaults.gender).strip(),
            nationality=str(raw.get("nationality") or defaults.nationality).strip(),
            passport_number=passport or None,
        )

    def validate(self, guest: GuestDetails) -> Dict[str, str]:
        errors: Dict[str, str] = {}
        for name, message in REQUIRED_GUEST_FIELDS.items():
            if not str(getattr(guest, name) or "").strip():
                errors[name] = message

        if "email" not in errors and not is_valid_email(guest.email):
            errors["email"] = "Invalid email format"
        if "phone" not in errors and not is_valid_phone(guest.phone):
            errors["phone"] = "Phone must be 10 digits"
        return errors

    def validate_travelers(self, travelers: List[TravelerDetails]) -> Dict[str, str]:
        errors: Dict[str, str] = {}
        for index, t in enumerate(travelers):
            if not all(str(getattr(t, name) or "").strip() for name in REQUIRED_TRAVELER_FIELDS):
                errors[f"traveler-{index}"] = "Please complete all fields"
        return errors

    def validate_contact(self, contact: Optional[ContactDetails]) -> Dict[str, str]:
        if contact is None:
            return {}
        errors: Dict[str, str] = {}
        if not is_valid_email(contact.email):
            errors["contact-email"] = "Invalid email address"
        if not is_valid_phone(contact.phone):
            errors["contact-phone"] = "Invalid phone number (10 digits required)"
        return errors

    def validate_all(
        self,
        guest: GuestDetails,
        travelers: Optional[List[TravelerDetails]] = None,
        contact: Optional[ContactDetails] = None,
    ) -> Dict[str, str]:
        errors = self.validate(guest)
        errors.update(self.validate_travelers(travelers or []))
        errors.update(self.validate_contact(contact))
        return errors
