"""Calendar-day keys.

Diary rows are bucketed by a ``YYYY-MM-DD`` string for the local calendar day.
Keys are compared as strings; they are only parsed to enumerate a range.
"""

from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo


def to_day_key(value: date) -> str:
    """Format a date as its canonical day key."""
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def today_key(timezone_name: str, now: datetime | None = None) -> str:
    """Return the day key for the current local day in a timezone."""
    tz = ZoneInfo(timezone_name)
    current = now.astimezone(tz) if now else datetime.now(tz=tz)
    return to_day_key(current.date())


def parse_day_key(key: str) -> date:
    """Parse a day key, raising ValueError for anything else."""
    year, month, day = (int(part) for part in key.split("-"))
    return date(year, month, day)


def is_day_key(value: str) -> bool:
    """Return True when value is a canonical day key."""
    try:
        return to_day_key(parse_day_key(value)) == value
    except ValueError:
        return False


def iter_day_keys(start: str, end: str) -> list[str]:
    """Return every day key from start to end inclusive."""
    first = parse_day_key(start)
    last = parse_day_key(end)
    if last < first:
        return []
    return [
        to_day_key(first + timedelta(days=offset))
        for offset in range((last - first).days + 1)
    ]


def shift_day_key(key: str, days: int) -> str:
    """Return the day key ``days`` away from key."""
    return to_day_key(parse_day_key(key) + timedelta(days=days))
