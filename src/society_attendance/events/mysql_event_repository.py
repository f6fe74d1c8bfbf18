from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Event, EventInput
from .repository import EventRepository

_COLUMNS = "id, name, description, event_date, created_by, created_at"


def _to_event(row: dict) -> Event:
    return Event(
        event_id=int(row["id"]),
        name=row["name"],
        description=row.get("description"),
        event_date=row["event_date"],
        created_by=row.get("created_by"),
        created_at=row.get("created_at"),
    )


class MySQLEventRepository(EventRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Event]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM events ORDER BY event_date DESC, id DESC")
            return [_to_event(r) for r in fetchall(cur)]

    def get_by_id(self, event_id: int) -> Optional[Event]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM events WHERE id=%s", (int(event_id),))
            row = fetchone(cur)
            return _to_event(row) if row else None

    def create_event(self, data: EventInput, *, created_by: Optional[int]) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO events(name, description, event_date, created_by) VALUES(%s,%s,%s,%s)",
                (data.name, data.description, data.event_date, created_by),
            )
            return int(cur.lastrowid)

    def update_event(self, event_id: int, data: EventInput) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE events SET name=%s, description=%s, event_date=%s WHERE id=%s",
                (data.name, data.description, data.event_date, int(event_id)),
            )
            return cur.rowcount > 0

    def delete_by_id(self, event_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM events WHERE id=%s", (int(event_id),))
            return cur.rowcount > 0

    def count(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS n FROM events")
            row = fetchone(cur)
            return int(row["n"]) if row else 0

    def count_on(self, day: date) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS n FROM events WHERE event_date=%s", (day,))
            row = fetchone(cur)
            return int(row["n"]) if row else 0
