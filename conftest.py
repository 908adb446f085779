from __future__ import annotations

import calendar
import os
from datetime import date, datetime, timedelta
from typing import Optional

import pytest

os.environ["APP_ENV"] = "testing"

from src.attendance_tracker.attendance_tracker.attendance.model import AttendanceRecord, NewAttendance
from src.attendance_tracker.attendance_tracker.attendance.service import AttendanceService
from src.attendance_tracker.attendance_tracker.container import Container
from src.attendance_tracker.attendance_tracker.core.enums import AttendanceStatus
from src.attendance_tracker.attendance_tracker.main import create_app
from src.attendance_tracker.attendance_tracker.stats.model import MonthlyTrend
from src.attendance_tracker.attendance_tracker.stats.service import StatsService


def months_back(day: date, months: int) -> date:
    """Same clamping as MySQL's DATE_SUB(day, INTERVAL n MONTH)."""
    year, month0 = divmod(day.year * 12 + (day.month - 1) - months, 12)
    last_day = calendar.monthrange(year, month0 + 1)[1]
    return date(year, month0 + 1, min(day.day, last_day))


class InMemoryAttendance:
    """Stands in for both the attendance and the stats repositories.

    ``store_today`` plays the part of the server's CURDATE().
    """

    def __init__(self, *, store_today: date = date(2024, 1, 2)):
        self.store_today = store_today
        self._rows: dict[int, AttendanceRecord] = {}
        self._id = 0
        self._clock = datetime(2024, 1, 1, 9, 0, 0)

    def count(self) -> int:
        return len(self._rows)

    def create(self, record: NewAttendance) -> int:
        self._id += 1
        self._clock += timedelta(seconds=1)
        self._rows[self._id] = AttendanceRecord(
            id=self._id,
            employee_name=record.employee_name,
            employee_id=record.employee_id,
            date=record.date,
            status=record.status,
            created_at=self._clock,
        )
        return self._id

    def add(self, name: str, employee_id: str, day: date, status: str) -> int:
        return self.create(NewAttendance(name, employee_id, day, AttendanceStatus(status)))

    def list_all(self):
        return sorted(self._rows.values(), key=lambda r: (r.date, r.created_at, r.id), reverse=True)

    def delete(self, record_id: int) -> int:
        return 1 if self._rows.pop(int(record_id), None) else 0

    def list_by_employee(self, employee_id: str):
        items = [r for r in self._rows.values() if r.employee_id == employee_id]
        return sorted(items, key=lambda r: r.date, reverse=True)

    def list_by_date(self, work_date: date):
        items = [r for r in self._rows.values() if r.date == work_date]
        return sorted(items, key=lambda r: r.employee_name)

    # stats

    def count_all(self) -> int:
        return len(self._rows)

    def count_by_status_on(self, status: AttendanceStatus, *, today: Optional[date] = None) -> int:
        day = today or self.store_today
        return sum(1 for r in self._rows.values() if r.date == day and r.status == status)

    def count_distinct_employees(self) -> int:
        return len({r.employee_id for r in self._rows.values()})

    def list_recent(self, limit: int):
        return sorted(self._rows.values(), key=lambda r: (r.created_at, r.id), reverse=True)[:limit]

    def monthly_trends(self, *, months: int, today: Optional[date] = None):
        since = months_back(today or self.store_today, months)
        buckets: dict[tuple[str, str], int] = {}
        for r in self._rows.values():
            if r.date >= since:
                key = (r.date.strftime("%Y-%m"), r.status.value)
                buckets[key] = buckets.get(key, 0) + 1
        ordered = sorted(buckets.items(), key=lambda kv: kv[0][1])
        ordered.sort(key=lambda kv: kv[0][0], reverse=True)
        return [MonthlyTrend(month=m, status=AttendanceStatus(s), count=c) for (m, s), c in ordered]


class FakeConnection:
    def __init__(self, alive: bool = True):
        self.alive = alive

    def ping(self) -> bool:
        return self.alive


def build_test_container(repo, *, conn: Optional[FakeConnection] = None) -> Container:
    return Container(
        conn=conn or FakeConnection(),
        attendance_repo=repo,
        stats_repo=repo,
        attendance_service=AttendanceService(repo),
        stats_service=StatsService(repo),
    )


@pytest.fixture
def fixed_today() -> date:
    return date(2024, 1, 2)


@pytest.fixture
def repo(fixed_today) -> InMemoryAttendance:
    return InMemoryAttendance(store_today=fixed_today)


@pytest.fixture
def db_conn() -> FakeConnection:
    return FakeConnection()


@pytest.fixture
def app(repo, db_conn):
    return create_app(container=build_test_container(repo, conn=db_conn))


@pytest.fixture
def client(app):
    return app.test_client()
