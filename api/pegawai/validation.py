"""
Input normalization and validation for new contacts.

`validate_new_contact` is the only entry point the service uses: it takes the
raw request body (parsed JSON or form fields) and returns a `NewContact` with
every field already in its stored form.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from . import errors

REQUIRED_FIELDS = ("nip", "nama", "bidang", "no_telp", "email")

COUNTRY_CODE = "62"
MIN_PHONE_DIGITS = 8
MAX_PHONE_DIGITS = 15

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_NON_DIGIT_RE = re.compile(r"[^0-9]")
_PHONE_RE = re.compile(rf"[0-9]{{{MIN_PHONE_DIGITS},{MAX_PHONE_DIGITS}}}")


@dataclass(frozen=True)
class NewContact:
    nip: str
    nama: str
    bidang: str
    no_telp: str
    email: str
    alamat: str | None = None


def _as_text(value: Any) -> str:
    """
    Strings are trimmed and numbers are stringified. Anything else (None,
    booleans, objects, arrays) counts as no value.
    """
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ""


def is_email(value: Any) -> bool:
    return _EMAIL_RE.match(_as_text(value)) is not None


def normalize_phone(raw: Any) -> str:
    """
    Reduce a phone number to digits with the `62` country code in front.

    "081234567890" -> "6281234567890"
    "+62 812-3456-7890" -> "6281234567890"
    Returns "" when there are no digits at all.
    """
    digits = _NON_DIGIT_RE.sub("", _as_text(raw))
    if not digits:
        return ""
    if digits.startswith(COUNTRY_CODE):
        return digits
    if digits.startswith("0"):
        digits = digits[1:]
    return COUNTRY_CODE + digits


def is_valid_phone(phone: str) -> bool:
    return _PHONE_RE.fullmatch(phone) is not None


def validate_new_contact(payload: Mapping[str, Any]) -> NewContact:
    """
    Checks run in a fixed order: required fields, email, phone.
    The first failure raises `errors.ValidationError`.
    """
    values = {name: _as_text(payload.get(name)) for name in REQUIRED_FIELDS}
    if not all(values.values()):
        raise errors.ValidationError(errors.MISSING_FIELD)

    if not is_email(values["email"]):
        raise errors.ValidationError(errors.INVALID_EMAIL)

    phone = normalize_phone(values["no_telp"])
    if not is_valid_phone(phone):
        raise errors.ValidationError(errors.INVALID_PHONE)

    alamat = _as_text(payload.get("alamat"))
    return NewContact(
        nip=values["nip"],
        nama=values["nama"],
        bidang=values["bidang"],
        no_telp=phone,
        email=values["email"].lower(),
        alamat=alamat or None,
    )
