from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import AttendanceRecord, NewAttendance


class AttendanceRepository(Protocol):
    def list_all(self) -> Sequence[AttendanceRecord]:
        """Newest date first; same-date rows newest-created first."""

        raise NotImplementedError

    def create(self, record: NewAttendance) -> int:
        raise NotImplementedError

    def delete(self, record_id: int) -> int:
        """Return the number of rows removed (0 or 1)."""

        raise NotImplementedError

    def list_by_employee(self, employee_id: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_by_date(self, work_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
