"""
Contact persistence (raw SQL) for the `kontak_pegawai` table.
"""

from __future__ import annotations

from typing import Any

import asyncpg

from core.db import Database

from . import errors
from .validation import NewContact

SEARCH_COLUMNS = ("nip", "nama", "bidang", "email", "no_telp")


def like_pattern(query: str) -> str:
    """
    Wrap `query` for a literal substring match with ILIKE ... ESCAPE '\\'.
    """
    escaped = query.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


async def insert_contact(database: Database, contact: NewContact) -> int:
    """
    Insert one contact and return its generated id.

    The UNIQUE constraint on `nip` is the only uniqueness check; a violation
    is raised as `errors.ConflictError`.
    """
    try:
        row = await database.fetch_one(
            """
            INSERT INTO kontak_pegawai (nip, nama, bidang, no_telp, email, alamat)
            VALUES ($1, $2, $3, $4, $5, $6)
            RETURNING id
            """,
            contact.nip,
            contact.nama,
            contact.bidang,
            contact.no_telp,
            contact.email,
            contact.alamat,
        )
    except asyncpg.UniqueViolationError as exc:
        raise errors.ConflictError() from exc

    if row is None or "id" not in row:
        raise RuntimeError("Failed to insert contact.")
    return int(row["id"])


async def list_contacts(
    database: Database,
    *,
    query: str = "",
    limit: int = 100,
    offset: int = 0,
) -> list[dict[str, Any]]:
    """
    Newest first. An empty `query` disables the filter.
    """
    q = (query or "").strip()
    return await database.fetch_all(
        """
        SELECT id, nip, nama, bidang, no_telp, email, alamat, created_at
        FROM kontak_pegawai
        WHERE $1 = ''
           OR nip ILIKE $2 ESCAPE '\\'
           OR nama ILIKE $2 ESCAPE '\\'
           OR bidang ILIKE $2 ESCAPE '\\'
           OR email ILIKE $2 ESCAPE '\\'
           OR no_telp ILIKE $2 ESCAPE '\\'
        ORDER BY id DESC
        LIMIT $3
        OFFSET $4
        """,
        q,
        like_pattern(q),
        limit,
        offset,
    )
