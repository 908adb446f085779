from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from ..attendance.model import AttendanceRecord
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class DashboardStats:
    """Read-model for the dashboard cards (each field computed independently)."""

    total_records: int = 0
    present_today: int = 0
    absent_today: int = 0
    unique_employees: int = 0
    recent_activity: Sequence[AttendanceRecord] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "totalRecords": self.total_records,
            "presentToday": self.present_today,
            "absentToday": self.absent_today,
            "uniqueEmployees": self.unique_employees,
            "recentActivity": [r.to_dict() for r in self.recent_activity],
        }


@dataclass(frozen=True)
class MonthlyTrend:
    month: str
    status: AttendanceStatus
    count: int

    def to_dict(self) -> dict:
        return {"month": self.month, "status": self.status.value, "count": self.count}
