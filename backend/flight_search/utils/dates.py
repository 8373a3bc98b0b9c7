"""
Date utilities: finestra di disponibilità e formattazione date.

Flight data only exists for departures between 2022-11-10 and 2022-11-30
(inclusive). Every comparison happens on UTC instants; ISO timestamps without
an offset (the format used by the flights document) are read as UTC.
Displayed hours and dates keep the wall-clock fields written in the timestamp.

Used by:
  - search_form (validazione data di partenza)
  - search_engine (confronto per giorno di calendario)
  - results (orari e date nelle card)
"""
from datetime import date, datetime, time, timedelta, timezone

MIN_DATE = date(2022, 11, 10)
MAX_DATE = date(2022, 11, 30)

# Label mostrata nei messaggi di errore del form
AVAILABLE_RANGE_LABEL = "Nov 10-30, 2022"

INPUT_FORMAT = "%Y-%m-%d"

_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def _utc_midnight(day: date) -> datetime:
    return datetime.combine(day, time.min, tzinfo=timezone.utc)


def as_utc(value: date | datetime) -> datetime:
    """Normalizza date/datetime a un datetime aware in UTC (naive = UTC)."""
    if not isinstance(value, datetime):
        return _utc_midnight(value)
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def min_selectable_date() -> datetime:
    return _utc_midnight(MIN_DATE)


def max_selectable_date() -> datetime:
    return _utc_midnight(MAX_DATE)


def in_range(value: date | datetime) -> bool:
    """
    True if value falls inside the availability window.

    The upper bound is exclusive at the start of the day after MAX_DATE, so the
    whole last day is accepted regardless of time-of-day.
    """
    instant = as_utc(value)
    upper = _utc_midnight(MAX_DATE + timedelta(days=1))
    return min_selectable_date() <= instant < upper


def to_input_format(value: date | datetime) -> str:
    """YYYY-MM-DD from the UTC calendar fields (formato di <input type=date>)."""
    instant = as_utc(value)
    return f"{instant.year:04d}-{instant.month:02d}-{instant.day:02d}"


def from_input_format(value: str) -> datetime | None:
    """UTC midnight of the given YYYY-MM-DD day, None if it does not parse."""
    try:
        day = datetime.strptime(value.strip(), INPUT_FORMAT).date()
    except (AttributeError, ValueError):
        return None
    return _utc_midnight(day)


def _wall_clock(value: str) -> datetime | None:
    # Campi così come scritti nel timestamp, senza conversione in UTC
    try:
        return datetime.fromisoformat(value)
    except (TypeError, ValueError):
        return None


def parse_timestamp(value: str) -> datetime | None:
    """ISO 8601 timestamp -> aware UTC datetime. None when malformed."""
    parsed = _wall_clock(value)
    return None if parsed is None else as_utc(parsed)


def format_time(value: str) -> str:
    """'2022-11-10T06:25:00' -> '06:25'. Malformed input is returned as-is."""
    parsed = _wall_clock(value)
    if parsed is None:
        return value
    return f"{parsed.hour:02d}:{parsed.minute:02d}"


def format_date(value: str) -> str:
    """'2022-11-10T06:25:00' -> 'November 10, 2022'. Malformed input is returned as-is."""
    parsed = _wall_clock(value)
    if parsed is None:
        return value
    return f"{_MONTHS[parsed.month - 1]} {parsed.day}, {parsed.year}"


def same_utc_day(first: datetime, second: datetime) -> bool:
    a, b = as_utc(first), as_utc(second)
    return (a.year, a.month, a.day) == (b.year, b.month, b.day)
