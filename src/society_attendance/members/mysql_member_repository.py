from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Program
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, translate_duplicate
from .model import Member, MemberInput
from .repository import MemberRepository

_COLUMNS = "id, school_id, name, program, block, year_level, created_at"
_DUPLICATE_MESSAGE = "A member with this school ID already exists"


def _to_member(row: dict) -> Member:
    year_level = row.get("year_level")
    return Member(
        member_id=int(row["id"]),
        school_id=row["school_id"],
        name=row["name"],
        program=Program(row["program"]),
        block=row.get("block") or "",
        year_level=int(year_level) if year_level is not None else None,
        created_at=row.get("created_at"),
    )


class MySQLMemberRepository(MemberRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM members ORDER BY name ASC")
            return [_to_member(r) for r in fetchall(cur)]

    def get_by_id(self, member_id: int) -> Optional[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM members WHERE id=%s", (int(member_id),))
            row = fetchone(cur)
            return _to_member(row) if row else None

    def get_by_school_id(self, school_id: str) -> Optional[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM members WHERE school_id=%s", (school_id,))
            row = fetchone(cur)
            return _to_member(row) if row else None

    def create_member(self, data: MemberInput) -> int:
        with translate_duplicate(_DUPLICATE_MESSAGE):
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO members(school_id, name, program, block, year_level)
                    VALUES(%s,%s,%s,%s,%s)
                    """,
                    (data.school_id, data.name, data.program.value, data.block, data.year_level),
                )
                return int(cur.lastrowid)

    def update_member(self, member_id: int, data: MemberInput) -> bool:
        with translate_duplicate(_DUPLICATE_MESSAGE):
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    UPDATE members
                    SET school_id=%s, name=%s, program=%s, block=%s, year_level=%s
                    WHERE id=%s
                    """,
                    (data.school_id, data.name, data.program.value, data.block, data.year_level, int(member_id)),
                )
                return cur.rowcount > 0

    def update_year_level(self, member_id: int, year_level: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE members SET year_level=%s WHERE id=%s", (int(year_level), int(member_id)))
            return cur.rowcount > 0

    def delete_by_id(self, member_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM members WHERE id=%s", (int(member_id),))
            return cur.rowcount > 0

    def count(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS n FROM members")
            row = fetchone(cur)
            return int(row["n"]) if row else 0
