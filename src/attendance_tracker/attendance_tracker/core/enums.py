from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance status as stored in the ENUM column."""

    PRESENT = "Present"
    ABSENT = "Absent"

    @classmethod
    def values(cls) -> list[str]:
        return [s.value for s in cls]
