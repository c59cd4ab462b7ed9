"""Parsing and validation of the report start date."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

DATE_FORMAT = "%b %d %Y"
ISO_FORMAT = "%Y-%m-%dT%H:%M:%SZ"
MAX_MONTHS_BACK = 3


class DateError(ValueError):
    """Raised when a date cannot be parsed or is out of range."""


def parse_date(date: str) -> datetime:
    """Parse a date such as ``Jan 2 2006`` into a UTC datetime."""
    try:
        parsed = datetime.strptime(date, DATE_FORMAT)
    except (TypeError, ValueError) as exc:
        raise DateError(f"Failed to parse date: {exc}") from exc
    return parsed.replace(tzinfo=timezone.utc)


def _add_months(moment: datetime, months: int) -> datetime:
    """Shift by whole months, letting an overflowing day roll into the next month."""
    total = moment.year * 12 + (moment.month - 1) + months
    year, month_index = divmod(total, 12)
    first = moment.replace(year=year, month=month_index + 1, day=1)
    return first + timedelta(days=moment.day - 1)


def validate_date(date: str, now: datetime | None = None) -> bool:
    """Check that the date is no more than three months before ``now``."""
    parsed = parse_date(date)
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    if parsed < _add_months(now, -MAX_MONTHS_BACK):
        raise DateError("Date must be within the last 3 months")
    return True


def get_iso_date(date: str) -> str:
    """Return the date in ISO 8601 form at midnight UTC."""
    return parse_date(date).strftime(ISO_FORMAT)