from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import format_date, format_timestamp
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class NewAttendance:
    """Validated input for an insert; id and created_at come from the store."""

    employee_name: str
    employee_id: str
    date: date
    status: AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance row."""

    id: int
    employee_name: str
    employee_id: str
    date: date
    status: AttendanceStatus
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "employeeName": self.employee_name,
            "employeeID": self.employee_id,
            "date": format_date(self.date),
            "status": self.status.value,
            "createdAt": format_timestamp(self.created_at),
        }
