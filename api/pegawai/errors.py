"""
Contact registry error taxonomy.

Each error carries the HTTP status and the public message that the API
returns. Internal detail (tracebacks, SQL) stays in the logs.
"""

from __future__ import annotations


class RegistryError(RuntimeError):
    status_code = 500
    default_message = "Terjadi kesalahan pada server."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


MISSING_FIELD = "missing_field"
INVALID_EMAIL = "invalid_email"
INVALID_PHONE = "invalid_phone"

_VALIDATION_MESSAGES = {
    MISSING_FIELD: "Field wajib (NIP, NAMA, BIDANG, NO_TELP, EMAIL).",
    INVALID_EMAIL: "Format email tidak valid.",
    INVALID_PHONE: "No. telp tidak valid.",
}


class ValidationError(RegistryError):
    status_code = 400

    def __init__(self, reason: str) -> None:
        if reason not in _VALIDATION_MESSAGES:
            raise ValueError(f"Unknown validation reason: {reason!r}")
        self.reason = reason
        super().__init__(_VALIDATION_MESSAGES[reason])


class ConflictError(RegistryError):
    status_code = 409
    default_message = "NIP sudah terdaftar."


class InternalError(RegistryError):
    status_code = 500
