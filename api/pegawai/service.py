"""
Contact registry business logic.

Scope:
- validate and normalize new contacts before they reach SQL
- clamp list paging parameters
- turn unexpected persistence failures into `errors.InternalError`
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

from core.db import Database

from . import errors, repository, schemas, validation

DEFAULT_LIST_LIMIT = 100
MAX_LIST_LIMIT = 500

SAVE_FAILED_MESSAGE = "Gagal menyimpan data."
LIST_FAILED_MESSAGE = "Gagal mengambil data."

_INT_RE = re.compile(r"[+-]?[0-9]+")

logger = logging.getLogger(__name__)


def _parse_int(raw: Any, default: int) -> int:
    if raw is None:
        return default
    text = str(raw).strip()
    if not _INT_RE.fullmatch(text):
        return default
    return int(text)


def clamp_limit(raw: Any) -> int:
    return max(1, min(_parse_int(raw, DEFAULT_LIST_LIMIT), MAX_LIST_LIMIT))


def clamp_offset(raw: Any) -> int:
    return max(_parse_int(raw, 0), 0)


def _to_contact_record(row: dict) -> schemas.ContactRecord:
    return schemas.ContactRecord(
        id=int(row["id"]),
        nip=str(row["nip"]),
        nama=str(row["nama"]),
        bidang=str(row["bidang"]),
        no_telp=str(row["no_telp"]),
        email=str(row["email"]),
        alamat=row.get("alamat"),
        created_at=row["created_at"],
    )


async def create_contact(database: Database, payload: Mapping[str, Any]) -> int:
    contact = validation.validate_new_contact(payload)
    try:
        contact_id = await repository.insert_contact(database, contact)
    except errors.ConflictError:
        raise
    except Exception as exc:
        logger.exception("add_pegawai_failed nip=%s", contact.nip)
        raise errors.InternalError(SAVE_FAILED_MESSAGE) from exc

    logger.info("pegawai_created id=%s nip=%s", contact_id, contact.nip)
    return contact_id


async def list_contacts(
    database: Database,
    *,
    query: str | None = None,
    limit: Any = None,
    offset: Any = None,
) -> list[schemas.ContactRecord]:
    q = (query or "").strip()
    page_limit = clamp_limit(limit)
    page_offset = clamp_offset(offset)
    try:
        rows = await repository.list_contacts(
            database,
            query=q,
            limit=page_limit,
            offset=page_offset,
        )
    except Exception as exc:
        logger.exception("list_pegawai_failed q=%r limit=%s offset=%s", q, page_limit, page_offset)
        raise errors.InternalError(LIST_FAILED_MESSAGE) from exc

    return [_to_contact_record(row) for row in rows]
