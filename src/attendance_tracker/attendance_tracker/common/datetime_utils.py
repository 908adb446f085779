from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Optional

from ..core.constants import ISO_DATE_FORMAT


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, ISO_DATE_FORMAT).date()


def format_date(value: Optional[date]) -> Optional[str]:
    if value is None:
        return None
    return value.strftime(ISO_DATE_FORMAT)


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    return value.isoformat()


def now_utc_iso() -> str:
    """Current UTC time as ISO-8601.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(timezone.utc).isoformat()
