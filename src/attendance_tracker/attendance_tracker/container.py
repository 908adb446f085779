from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_DASHBOARD_WORKERS
from .database.connection import DBConfig, DatabaseConnection
from .stats.mysql_stats_repository import MySQLStatsRepository
from .stats.repository import StatsRepository
from .stats.service import StatsService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    attendance_repo: AttendanceRepository
    stats_repo: StatsRepository

    attendance_service: AttendanceService
    stats_service: StatsService


def build_container(*, db_config: dict, dashboard_workers: int = DEFAULT_DASHBOARD_WORKERS) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))

    attendance_repo = MySQLAttendanceRepository(conn)
    stats_repo = MySQLStatsRepository(conn)

    return Container(
        conn=conn,
        attendance_repo=attendance_repo,
        stats_repo=stats_repo,
        attendance_service=AttendanceService(attendance_repo),
        stats_service=StatsService(stats_repo, max_workers=dashboard_workers),
    )
