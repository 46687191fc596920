from __future__ import annotations

from datetime import date, datetime, timedelta

# Upstream uses 0001-01-01 style placeholders for "no date".
MIN_VALID_DATE = datetime(2013, 1, 1)


def parse_convert_date(value: str | date | datetime | None) -> datetime | None:
    """Parse an ISO-8601 value into a naive datetime in server local time.

    Returns None when the value cannot be parsed.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is not None:
        # Sentinels like 0001-01-01Z can fall outside the local date range.
        try:
            parsed = parsed.astimezone().replace(tzinfo=None)
        except (OverflowError, ValueError):
            return None
    return parsed


def is_valid_date(
    value: str | date | datetime | None,
    min_date: datetime = MIN_VALID_DATE,
) -> bool:
    parsed = parse_convert_date(value)
    if parsed is None:
        return False
    return parsed >= min_date


def _to_day(value: date | datetime) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def is_date_past(value: str | date | datetime, today: date | None = None) -> bool:
    """Return True if the calendar day of ``value`` is strictly before today."""
    parsed = parse_convert_date(value)
    if parsed is None:
        return False
    current = _to_day(today) if today else date.today()
    return parsed.date() < current


def format_date(value: str | date | datetime | None) -> str:
    parsed = parse_convert_date(value)
    if parsed is None:
        return ""
    return f"{parsed.month}/{parsed.day}/{parsed.year}"


def get_date_with_offset(days: int, today: date | None = None) -> str:
    current = _to_day(today) if today else date.today()
    shifted = current + timedelta(days=days)
    return datetime(shifted.year, shifted.month, shifted.day).isoformat()
