from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor, wait
from datetime import date
from typing import Any, Callable, Dict, Optional, Sequence, Tuple

from ..core.constants import DEFAULT_DASHBOARD_WORKERS, RECENT_ACTIVITY_LIMIT, TREND_MONTHS
from ..core.enums import AttendanceStatus
from .model import DashboardStats, MonthlyTrend
from .repository import StatsRepository

logger = logging.getLogger(__name__)


class StatsService:
    """Dashboard aggregates and monthly trends.

    The dashboard runs its sub-queries side by side on a thread pool and waits
    for all of them. A sub-query that raises is logged and replaced by its
    default, so one broken aggregate never fails the whole response.
    """

    def __init__(
        self,
        stats: StatsRepository,
        *,
        max_workers: int = DEFAULT_DASHBOARD_WORKERS,
        recent_limit: int = RECENT_ACTIVITY_LIMIT,
        trend_months: int = TREND_MONTHS,
    ):
        self._stats = stats
        self._max_workers = max(1, int(max_workers))
        self._recent_limit = int(recent_limit)
        self._trend_months = int(trend_months)

    def _dashboard_queries(self, today: Optional[date]) -> Dict[str, Tuple[Callable[[], Any], Any]]:
        """field name -> (sub-query, fallback value)"""
        return {
            "total_records": (self._stats.count_all, 0),
            "present_today": (lambda: self._stats.count_by_status_on(AttendanceStatus.PRESENT, today=today), 0),
            "absent_today": (lambda: self._stats.count_by_status_on(AttendanceStatus.ABSENT, today=today), 0),
            "unique_employees": (self._stats.count_distinct_employees, 0),
            "recent_activity": (lambda: list(self._stats.list_recent(self._recent_limit)), []),
        }

    def dashboard(self, *, today: Optional[date] = None) -> DashboardStats:
        queries = self._dashboard_queries(today)

        with ThreadPoolExecutor(max_workers=min(self._max_workers, len(queries))) as pool:
            futures: Dict[str, Future] = {name: pool.submit(fn) for name, (fn, _) in queries.items()}
            wait(futures.values())

        values: Dict[str, Any] = {}
        for name, future in futures.items():
            fallback = queries[name][1]
            error = future.exception()
            if error is not None:
                logger.error("Dashboard sub-query %s failed: %s", name, error, exc_info=error)
                values[name] = fallback
            else:
                values[name] = future.result()

        return DashboardStats(**values)

    def monthly_trends(self, *, today: Optional[date] = None) -> Sequence[MonthlyTrend]:
        return self._stats.monthly_trends(months=self._trend_months, today=today)
