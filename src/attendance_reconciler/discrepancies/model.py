from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Union

from ..core.enums import AttendanceStatus, DiscrepancyRuleType, DiscrepancyStatus, Severity


@dataclass(frozen=True)
class OutPeriod:
    start: str
    end: str


@dataclass(frozen=True)
class LogAfterExitDetail:
    log_time: str
    label: str
    out_period: OutPeriod
    sessions: tuple[tuple[str, str], ...]


@dataclass(frozen=True)
class NoAttendanceDetail:
    log_count: int
    logged_minutes: int
    marked_absent: bool


@dataclass(frozen=True)
class OutsideHoursDetail:
    log_count: int
    outside_minutes: int


@dataclass(frozen=True)
class ZeroPresenceDetail:
    presence_minutes: int
    logged_minutes: int
    attendance_status: AttendanceStatus


DiscrepancyDetail = Union[LogAfterExitDetail, NoAttendanceDetail, OutsideHoursDetail, ZeroPresenceDetail]


@dataclass(frozen=True)
class Discrepancy:
    """One mismatch between attendance and logged work, tied to a rule.

    Persisted by natural key (person_id, date, rule).
    """

    person_id: str
    date: date
    rule: DiscrepancyRuleType
    severity: Severity
    minutes_involved: int
    metadata: DiscrepancyDetail
    status: DiscrepancyStatus = DiscrepancyStatus.OPEN

    @property
    def natural_key(self) -> tuple[str, date, DiscrepancyRuleType]:
        return (self.person_id, self.date, self.rule)


@dataclass(frozen=True)
class DiscrepancySummary:
    rule: DiscrepancyRuleType
    count: int
    severity: Severity
    title: str
    description: str
    affected_person_ids: tuple[str, ...]


@dataclass(frozen=True)
class DiscrepancyStats:
    total: int
    open: int
    resolved: int
    by_rule: dict[DiscrepancyRuleType, int]
    by_severity: dict[Severity, int]
