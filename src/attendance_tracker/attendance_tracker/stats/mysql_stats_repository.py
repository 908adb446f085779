from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..attendance.mysql_attendance_repository import COLUMNS, row_to_record
from ..core.constants import MONTH_FORMAT
from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetch_count, fetchall
from .model import MonthlyTrend
from .repository import StatsRepository


class MySQLStatsRepository(StatsRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def count_all(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS count FROM Attendance")
            return fetch_count(cur)

    def count_by_status_on(self, status: AttendanceStatus, *, today: Optional[date] = None) -> int:
        # NULL falls back to the server's CURDATE().
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT COUNT(*) AS count
                FROM Attendance
                WHERE date = COALESCE(%s, CURDATE()) AND status=%s
                """,
                (today, status.value),
            )
            return fetch_count(cur)

    def count_distinct_employees(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(DISTINCT employeeID) AS count FROM Attendance")
            return fetch_count(cur)

    def list_recent(self, limit: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {COLUMNS}
                FROM Attendance
                ORDER BY created_at DESC, id DESC
                LIMIT %s
                """,
                (int(limit),),
            )
            return [row_to_record(r) for r in fetchall(cur)]

    def monthly_trends(self, *, months: int, today: Optional[date] = None) -> Sequence[MonthlyTrend]:
        # The month format goes in as a parameter so the '%' never reaches
        # the driver's placeholder substitution.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT DATE_FORMAT(date, %s) AS month, status, COUNT(*) AS count
                FROM Attendance
                WHERE date >= DATE_SUB(COALESCE(%s, CURDATE()), INTERVAL %s MONTH)
                GROUP BY month, status
                ORDER BY month DESC, CAST(status AS CHAR) ASC
                """,
                (MONTH_FORMAT, today, int(months)),
            )
            return [
                MonthlyTrend(
                    month=str(r["month"]),
                    status=AttendanceStatus(r["status"]),
                    count=int(r["count"]),
                )
                for r in fetchall(cur)
            ]
