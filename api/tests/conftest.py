"""
Pytest configuration and fixtures
"""
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import asyncpg
import pytest
from fastapi.testclient import TestClient

# Add api directory to path for imports
api_dir = Path(__file__).parent.parent
if str(api_dir) not in sys.path:
    sys.path.insert(0, str(api_dir))

from core.db import Database  # noqa: E402
from main import app  # noqa: E402

SEARCH_FIELDS = ("nip", "nama", "bidang", "email", "no_telp")


class FakeDatabase(Database):
    """
    In-memory `kontak_pegawai` table answering the statements the app issues.

    Every statement is recorded in `calls` as (normalized_sql, args).
    Set `fail_with` to make the next statements raise.
    """

    def __init__(self):
        super().__init__(pool=None)
        self.rows = []
        self.calls = []
        self.fail_with = None
        self._next_id = 1
        self._clock = datetime(2025, 1, 1, tzinfo=timezone.utc)

    def _record(self, sql, args):
        self.calls.append((" ".join(sql.split()), args))
        if self.fail_with is not None:
            raise self.fail_with

    async def fetch_one(self, sql, *args):
        self._record(sql, args)
        if "SELECT 1 AS ok" in sql:
            return {"ok": 1}
        if "INSERT INTO kontak_pegawai" in sql:
            return self._insert(*args)
        raise AssertionError(f"unexpected statement: {sql}")

    async def fetch_all(self, sql, *args):
        self._record(sql, args)
        if "FROM kontak_pegawai" not in sql:
            raise AssertionError(f"unexpected statement: {sql}")
        query, _pattern, limit, offset = args
        rows = sorted(self.rows, key=lambda r: r["id"], reverse=True)
        if query:
            needle = query.lower()
            rows = [r for r in rows if any(needle in str(r[f]).lower() for f in SEARCH_FIELDS)]
        return [dict(r) for r in rows[offset : offset + limit]]

    def _insert(self, nip, nama, bidang, no_telp, email, alamat):
        if any(r["nip"] == nip for r in self.rows):
            raise asyncpg.UniqueViolationError(
                'duplicate key value violates unique constraint "kontak_pegawai_nip_key"'
            )
        row = {
            "id": self._next_id,
            "nip": nip,
            "nama": nama,
            "bidang": bidang,
            "no_telp": no_telp,
            "email": email,
            "alamat": alamat,
            "created_at": self._clock + timedelta(minutes=self._next_id),
        }
        self.rows.append(row)
        self._next_id += 1
        return {"id": row["id"]}


@pytest.fixture
def fake_db():
    return FakeDatabase()


@pytest.fixture
def client(fake_db):
    """
    Test client wired to the in-memory database.

    The lifespan is not entered, so no real pool is opened.
    """
    app.state.db = fake_db
    try:
        yield TestClient(app)
    finally:
        app.state.db = None


@pytest.fixture
def contact_payload():
    return {
        "nip": "198501012010011001",
        "nama": "  Budi Santoso ",
        "bidang": "Keuangan",
        "no_telp": "0812-3456-7890",
        "email": " Budi.Santoso@Example.go.id ",
        "alamat": " Jl. Merdeka No. 1 ",
    }
