from __future__ import annotations

from datetime import date
from typing import Any, Dict, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import AttendanceRecord, NewAttendance
from .repository import AttendanceRepository

COLUMNS = "id, employeeName, employeeID, date, status, created_at"


def row_to_record(r: Dict[str, Any]) -> AttendanceRecord:
    return AttendanceRecord(
        id=int(r["id"]),
        employee_name=r["employeeName"],
        employee_id=r["employeeID"],
        date=r["date"],
        status=AttendanceStatus(r["status"]),
        created_at=r.get("created_at"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {COLUMNS}
                FROM Attendance
                ORDER BY date DESC, created_at DESC, id DESC
                """
            )
            return [row_to_record(r) for r in fetchall(cur)]

    def create(self, record: NewAttendance) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO Attendance (employeeName, employeeID, date, status)
                VALUES (%s, %s, %s, %s)
                """,
                (record.employee_name, record.employee_id, record.date, record.status.value),
            )
            return int(cur.lastrowid)

    def delete(self, record_id: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM Attendance WHERE id=%s", (int(record_id),))
            return int(cur.rowcount)

    def list_by_employee(self, employee_id: str) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {COLUMNS}
                FROM Attendance
                WHERE employeeID=%s
                ORDER BY date DESC
                """,
                (employee_id,),
            )
            return [row_to_record(r) for r in fetchall(cur)]

    def list_by_date(self, work_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {COLUMNS}
                FROM Attendance
                WHERE date=%s
                ORDER BY employeeName ASC
                """,
                (work_date,),
            )
            return [row_to_record(r) for r in fetchall(cur)]
