from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, translate_duplicate
from .model import Officer
from .repository import OfficerRepository

_COLUMNS = "id, full_name, email, password_hash, is_active, created_at"


def _to_officer(row: dict) -> Officer:
    return Officer(
        officer_id=int(row["id"]),
        full_name=row["full_name"],
        email=row["email"],
        password_hash=row["password_hash"],
        is_active=bool(row.get("is_active", True)),
        created_at=row.get("created_at"),
    )


class MySQLOfficerRepository(OfficerRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_email(self, email: str) -> Optional[Officer]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM officers WHERE email=%s", (email,))
            row = fetchone(cur)
            return _to_officer(row) if row else None

    def create_officer(self, *, full_name: str, email: str, password_hash: str) -> int:
        with translate_duplicate("An account with this email already exists"):
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    "INSERT INTO officers(full_name, email, password_hash, is_active) VALUES(%s,%s,%s,1)",
                    (full_name, email, password_hash),
                )
                return int(cur.lastrowid)
