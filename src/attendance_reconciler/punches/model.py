from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import Optional

from ..common.datetime_utils import format_clock, minutes_of_day
from ..core.enums import AttendanceStatus, DiagnosticKind, PunchDirection


@dataclass(frozen=True)
class PunchEvent:
    """Domain entity: one raw swipe from the attendance device."""

    employee_code: str
    employee_name: str
    timestamp: datetime
    direction: PunchDirection

    @property
    def work_date(self) -> date:
        return self.timestamp.date()

    @property
    def clock(self) -> time:
        return self.timestamp.time()


@dataclass(frozen=True)
class WorkSession:
    """A matched IN -> OUT pair (wall-clock, same day)."""

    in_time: time
    out_time: time

    @property
    def duration_minutes(self) -> int:
        return minutes_of_day(self.out_time) - minutes_of_day(self.in_time)

    def label(self) -> str:
        return f"{format_clock(self.in_time)}-{format_clock(self.out_time)}"


@dataclass(frozen=True)
class Diagnostic:
    """Structured warning collected alongside a result, never raised."""

    kind: DiagnosticKind
    message: str
    source: Optional[str] = None
    raw: Optional[str] = None
    work_date: Optional[date] = None


@dataclass(frozen=True)
class AttendanceDay:
    """Reconciled attendance record for one person-day.

    Recomputed from the raw punch set on every run; never mutated.
    """

    employee_code: Optional[str]
    employee_name: Optional[str]
    work_date: Optional[date]
    sessions: tuple[WorkSession, ...]
    unpaired_ins: tuple[time, ...]
    unpaired_outs: tuple[time, ...]
    first_in: Optional[time]
    last_out: Optional[time]
    total_minutes: int
    status: AttendanceStatus
    diagnostics: tuple[Diagnostic, ...] = field(default=())

    @property
    def total_hours(self) -> float:
        return self.total_minutes / 60

    @property
    def has_record(self) -> bool:
        """True when any raw punch existed for the day."""
        return self.status != AttendanceStatus.ABSENT

    def gaps(self) -> list[tuple[time, time]]:
        """OUT periods between consecutive sessions (lunch, breaks)."""
        return [
            (current.out_time, following.in_time)
            for current, following in zip(self.sessions, self.sessions[1:])
        ]
