"""
Contact registry API schemas (response models).

Request bodies are not modelled here: `/api/pegawai/add` accepts JSON or
form data and is validated by `validation.validate_new_contact` so that
each failure maps to its own message.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class ContactRecord(BaseModel):
    id: int
    nip: str
    nama: str
    bidang: str
    no_telp: str
    email: str
    alamat: str | None = None
    created_at: datetime


class CreateContactResponse(BaseModel):
    success: bool = True
    id: int


class ListContactsResponse(BaseModel):
    success: bool = True
    data: list[ContactRecord]
