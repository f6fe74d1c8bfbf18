from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..core.enums import AttendanceSession, Program
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, translate_duplicate
from .model import AttendanceRecord, AttendanceReportRow
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_slot(
        self,
        *,
        member_id: int,
        event_id: int,
        session: AttendanceSession,
    ) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, member_id, event_id, session, time_in, time_out
                FROM attendance
                WHERE member_id=%s AND event_id=%s AND session=%s
                """,
                (int(member_id), int(event_id), session.value),
            )
            r = fetchone(cur)
            if not r:
                return None
            return AttendanceRecord(
                attendance_id=int(r["id"]),
                member_id=int(r["member_id"]),
                event_id=int(r["event_id"]),
                session=AttendanceSession(r["session"]),
                time_in=r["time_in"],
                time_out=r.get("time_out"),
            )

    def create_time_in(
        self,
        *,
        member_id: int,
        event_id: int,
        session: AttendanceSession,
        time_in: datetime,
    ) -> int:
        with translate_duplicate("Attendance already recorded for this session"):
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO attendance(member_id, event_id, session, time_in)
                    VALUES(%s,%s,%s,%s)
                    """,
                    (int(member_id), int(event_id), session.value, time_in),
                )
                return int(cur.lastrowid)

    def set_time_out(self, *, attendance_id: int, time_out: datetime) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE attendance SET time_out=%s WHERE id=%s AND time_out IS NULL",
                (time_out, int(attendance_id)),
            )
            return cur.rowcount > 0

    def list_for_event(self, event_id: int) -> Sequence[AttendanceReportRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT a.id, a.session, a.time_in, a.time_out,
                       m.school_id, m.name, m.program, m.block
                FROM attendance a
                JOIN members m ON m.id = a.member_id
                WHERE a.event_id=%s
                ORDER BY a.time_in DESC
                """,
                (int(event_id),),
            )
            return [
                AttendanceReportRow(
                    attendance_id=int(r["id"]),
                    session=AttendanceSession(r["session"]),
                    time_in=r["time_in"],
                    time_out=r.get("time_out"),
                    school_id=r["school_id"],
                    name=r["name"],
                    program=Program(r["program"]),
                    block=r.get("block") or "",
                )
                for r in fetchall(cur)
            ]

    def count_since(self, start: datetime) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS n FROM attendance WHERE time_in >= %s", (start,))
            row = fetchone(cur)
            return int(row["n"]) if row else 0
