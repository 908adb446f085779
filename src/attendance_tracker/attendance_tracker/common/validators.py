from __future__ import annotations

import re
from datetime import date
from typing import Any, Iterable, Mapping

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date

ISO_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


def require_fields(data: Any, fields: Iterable[str]) -> dict[str, str]:
    """Return the requested fields stripped, or fail if any is absent/blank."""
    if not isinstance(data, Mapping):
        raise ValidationError("All fields are required")
    out: dict[str, str] = {}
    for name in fields:
        value = data.get(name)
        if value is None or not str(value).strip():
            raise ValidationError("All fields are required")
        out[name] = str(value).strip()
    return out


def require_choice(value: Any, field_name: str, choices: Iterable[str]) -> str:
    allowed = list(choices)
    if value not in allowed:
        raise ValidationError(f"{field_name} must be {' or '.join(allowed)}")
    return value


def require_iso_date(value: str, field_name: str) -> date:
    # strptime alone would take unpadded parts such as 2024-1-5
    if not isinstance(value, str) or not ISO_DATE_RE.fullmatch(value):
        raise ValidationError(f"{field_name} must be a date in YYYY-MM-DD format")
    try:
        return parse_iso_date(value)
    except ValueError:
        raise ValidationError(f"{field_name} must be a date in YYYY-MM-DD format")
