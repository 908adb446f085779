"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

RECENT_ACTIVITY_LIMIT = 5
TREND_MONTHS = 6
DEFAULT_DASHBOARD_WORKERS = 5
ISO_DATE_FORMAT = "%Y-%m-%d"
MONTH_FORMAT = "%Y-%m"
