from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional

from ..core.constants import CLOCK_FORMAT, DEVICE_TIMESTAMP_FORMAT, EMPTY_CLOCK_VALUES
from ..core.exceptions import MalformedTimestampError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def truncate_to_minute(value: datetime) -> datetime:
    return value.replace(second=0, microsecond=0)


def parse_device_timestamp(value: str) -> datetime:
    """Parse a device feed timestamp (dd/MM/yyyy HH:mm:ss) to whole minutes."""
    if not isinstance(value, str):
        raise MalformedTimestampError(value, "dd/MM/yyyy HH:mm:ss")
    try:
        parsed = datetime.strptime(value.strip(), DEVICE_TIMESTAMP_FORMAT)
    except ValueError as exc:
        raise MalformedTimestampError(value, "dd/MM/yyyy HH:mm:ss") from exc
    return truncate_to_minute(parsed)


def parse_clock(value: Optional[str]) -> Optional[time]:
    """Parse an HH:mm clock value.

    Returns None for the blank markers spreadsheet exports use for
    "no punch" and raises MalformedTimestampError for anything else unparseable.
    """
    if value is None or value.strip() in EMPTY_CLOCK_VALUES:
        return None
    try:
        return datetime.strptime(value.strip(), CLOCK_FORMAT).time()
    except ValueError as exc:
        raise MalformedTimestampError(value, "HH:mm") from exc


def parse_instant(value) -> datetime:
    """Parse a logged-at instant: datetime passthrough or ISO-8601 string.

    Offsets are dropped; all instants are treated as local wall-clock time.
    """
    if isinstance(value, datetime):
        return value.replace(tzinfo=None)
    if not isinstance(value, str) or not value.strip():
        raise MalformedTimestampError(value, "ISO-8601 datetime")
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1]
    try:
        return datetime.fromisoformat(text).replace(tzinfo=None)
    except ValueError as exc:
        raise MalformedTimestampError(value, "ISO-8601 datetime") from exc


def minutes_of_day(value) -> int:
    """Minutes since midnight for a time or datetime."""
    return value.hour * 60 + value.minute


def format_clock(value) -> str:
    return f"{value.hour:02d}:{value.minute:02d}"

