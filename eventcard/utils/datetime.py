from __future__ import annotations

from datetime import UTC, date, datetime

from eventcard.models import Event

MONTHS_SHORT = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def as_date(value: date | datetime) -> date:
    if isinstance(value, datetime):
        # Naive datetimes are treated as UTC.
        if value.tzinfo is not None:
            value = value.astimezone(UTC)
        return value.date()
    return value


def format_date_short(value: date | datetime) -> str:
    day = as_date(value)
    return f"{MONTHS_SHORT[day.month - 1]} {day.day}, {day.year}"


def is_past_event(event: Event, now: datetime | None = None) -> bool:
    now = now or datetime.now(tz=UTC)
    return as_date(event.date) < as_date(now)
