from __future__ import annotations

from datetime import date

import pytest

from src.attendance_tracker.attendance_tracker.common.validators import require_choice, require_fields, require_iso_date
from src.attendance_tracker.attendance_tracker.core.exceptions import ValidationError
from src.attendance_tracker.attendance_tracker.database.bootstrap import (
    _iter_sql_statements,
    _strip_comments,
    _strip_create_db_and_use,
    SCHEMA_PATH,
    demo_records,
)
from src.attendance_tracker.attendance_tracker.database.connection import DBConfig


def test_require_fields_strips_values():
    assert require_fields({"a": " x ", "b": "y"}, ["a", "b"]) == {"a": "x", "b": "y"}


@pytest.mark.parametrize("data", [{}, {"a": None}, {"a": ""}, {"a": "  "}])
def test_require_fields_rejects_absent_or_blank(data):
    with pytest.raises(ValidationError):
        require_fields(data, ["a"])


def test_require_choice_is_case_sensitive():
    assert require_choice("Present", "Status", ["Present", "Absent"]) == "Present"
    with pytest.raises(ValidationError, match="Status must be Present or Absent"):
        require_choice("present", "Status", ["Present", "Absent"])


def test_require_iso_date():
    assert require_iso_date("2024-02-29", "Date") == date(2024, 2, 29)
    with pytest.raises(ValidationError):
        require_iso_date("2023-02-29", "Date")


def test_sql_splitter_keeps_semicolons_in_quotes():
    sql = "INSERT INTO t VALUES ('a;b'); SELECT 1;"

    assert list(_iter_sql_statements(sql)) == ["INSERT INTO t VALUES ('a;b')", "SELECT 1"]


def test_schema_file_has_single_attendance_table():
    sql = _strip_create_db_and_use(SCHEMA_PATH.read_text(encoding="utf-8"))
    statements = list(_iter_sql_statements(_strip_comments(sql)))

    assert len(statements) == 1
    assert "CREATE TABLE IF NOT EXISTS Attendance" in statements[0]
    assert "ENUM('Present', 'Absent')" in statements[0]


def test_demo_records_cover_both_statuses():
    rows = demo_records(date(2024, 1, 2))

    assert {r[3] for r in rows} == {"Present", "Absent"}
    assert any(r[2] == date(2024, 1, 2) for r in rows)


def test_db_config_describe_hides_password():
    cfg = DBConfig.from_dict({"host": "db", "port": "3307", "user": "u", "password": "secret", "database": "att"})

    assert cfg.port == 3307
    assert cfg.describe() == "u@db:3307/att"
