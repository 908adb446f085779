from __future__ import annotations

import logging
from typing import Any, Sequence

from ..common.validators import require_choice, require_fields, require_iso_date
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError
from .model import AttendanceRecord, NewAttendance
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("employeeName", "employeeID", "date", "status")


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    @staticmethod
    def validate_new(payload: Any) -> NewAttendance:
        """Check presence of every field, then the status enum, then the date."""

        data = require_fields(payload, REQUIRED_FIELDS)
        # status is matched exactly, before any stripping
        status = require_choice(payload["status"], "Status", AttendanceStatus.values())
        work_date = require_iso_date(data["date"], "Date")
        return NewAttendance(
            employee_name=data["employeeName"],
            employee_id=data["employeeID"],
            date=work_date,
            status=AttendanceStatus(status),
        )

    def list_all(self) -> Sequence[AttendanceRecord]:
        return self._attendance.list_all()

    def record(self, payload: Any) -> int:
        new = self.validate_new(payload)
        record_id = self._attendance.create(new)
        logger.info("Recorded attendance id=%s employeeID=%s date=%s", record_id, new.employee_id, new.date)
        return record_id

    def delete(self, record_id: int) -> None:
        if self._attendance.delete(int(record_id)) == 0:
            raise NotFoundError("Record not found")
        logger.info("Deleted attendance id=%s", record_id)

    def list_for_employee(self, employee_id: str) -> Sequence[AttendanceRecord]:
        return self._attendance.list_by_employee(employee_id)

    def list_for_date(self, value: str) -> Sequence[AttendanceRecord]:
        return self._attendance.list_by_date(require_iso_date(value, "Date"))
