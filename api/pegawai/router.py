"""
Contact registry API endpoints.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Query, Request

from core.db import Database
from core.dependencies import get_db

from . import schemas, service

router = APIRouter(prefix="/api/pegawai")

_FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def _read_payload(request: Request) -> dict[str, Any]:
    """
    Accept a JSON object or form fields. Anything else is an empty payload,
    which validation reports as missing fields.
    """
    content_type = request.headers.get("content-type", "").lower()
    if content_type.startswith(_FORM_CONTENT_TYPES):
        form = await request.form()
        return {key: value for key, value in form.items() if isinstance(value, str)}

    try:
        data = await request.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}


@router.post("/add")
async def add_pegawai(
    request: Request,
    database: Database = Depends(get_db),
) -> schemas.CreateContactResponse:
    payload = await _read_payload(request)
    contact_id = await service.create_contact(database, payload)
    return schemas.CreateContactResponse(id=contact_id)


@router.get("/list")
async def list_pegawai(
    q: str = Query(default=""),
    # Kept as strings: non-numeric values fall back to defaults instead of a 422.
    limit: str | None = Query(default=None),
    offset: str | None = Query(default=None),
    database: Database = Depends(get_db),
) -> schemas.ListContactsResponse:
    records = await service.list_contacts(database, query=q, limit=limit, offset=offset)
    return schemas.ListContactsResponse(data=records)
