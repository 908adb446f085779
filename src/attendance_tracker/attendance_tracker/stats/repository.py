from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..attendance.model import AttendanceRecord
from ..core.enums import AttendanceStatus
from .model import MonthlyTrend


class StatsRepository(Protocol):
    """Aggregate queries over the attendance table.

    Wherever ``today`` is accepted, ``None`` means the store's own current date.
    """

    def count_all(self) -> int:
        raise NotImplementedError

    def count_by_status_on(self, status: AttendanceStatus, *, today: Optional[date] = None) -> int:
        raise NotImplementedError

    def count_distinct_employees(self) -> int:
        raise NotImplementedError

    def list_recent(self, limit: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def monthly_trends(self, *, months: int, today: Optional[date] = None) -> Sequence[MonthlyTrend]:
        raise NotImplementedError
