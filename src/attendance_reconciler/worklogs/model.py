from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..common.datetime_utils import format_clock, minutes_of_day


@dataclass(frozen=True)
class TimeLogEntry:
    """One self-reported work record from the time tracker (read-only here)."""

    logged_at: datetime
    work_timestamp: datetime
    duration_minutes: int
    label: str = ""

    @property
    def log_minutes(self) -> int:
        """Clock time of day (minutes) at which the entry was recorded."""
        return minutes_of_day(self.logged_at)

    @property
    def log_clock(self) -> str:
        return format_clock(self.logged_at)

    @property
    def is_backfilled(self) -> bool:
        """Recorded on a different calendar day than the work it covers."""
        return self.logged_at.date() != self.work_timestamp.date()


def total_logged_minutes(entries) -> int:
    return sum(e.duration_minutes for e in entries)
