"""Date helpers shared by the fetchers, classifier and renderers."""

import calendar
from datetime import datetime, timezone, tzinfo
from zoneinfo import ZoneInfo


def get_timezone(name: str) -> tzinfo:
    """Resolve a timezone name, treating UTC without the tz database."""
    if name.upper() in ("UTC", "Z"):
        return timezone.utc
    return ZoneInfo(name)


def parse_datetime(value: str | None) -> datetime | None:
    """Parse ISO datetime string."""
    if not value:
        return None
    try:
        if value.endswith("Z"):
            value = value[:-1] + "+00:00"
        return datetime.fromisoformat(value)
    except (ValueError, TypeError):
        return None


def format_display_datetime(value: datetime) -> str:
    """Format a timestamp as ``MM/DD/YYYY h:mm AM``."""
    hour = value.hour % 12 or 12
    meridiem = "AM" if value.hour < 12 else "PM"
    return f"{value:%m/%d/%Y} {hour}:{value:%M} {meridiem}"


def month_name(month: int) -> str:
    """English name of a month number (1-12)."""
    return calendar.month_name[month]


def in_same_month(first: datetime, second: datetime) -> bool:
    """Check whether two timestamps fall in the same calendar month."""
    return first.year == second.year and first.month == second.month
