from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import Sequence

from ...core.constants import (
    MIN_LOGGED_MINUTES,
    MIN_PRESENCE_MINUTES,
    WORKDAY_END_MINUTES,
    WORKDAY_START_MINUTES,
)
from ...core.enums import DiscrepancyRuleType
from ...punches.model import AttendanceDay
from ...worklogs.model import TimeLogEntry
from ..model import Discrepancy, DiscrepancyDetail
from ..severity import severity_for


@dataclass(frozen=True)
class DetectionThresholds:
    workday_start: int = WORKDAY_START_MINUTES
    workday_end: int = WORKDAY_END_MINUTES
    min_presence: int = MIN_PRESENCE_MINUTES
    min_logged: int = MIN_LOGGED_MINUTES

    def within_workday(self, minutes: int) -> bool:
        """Workday window is half-open: [start, end)."""
        return self.workday_start <= minutes < self.workday_end


@dataclass(frozen=True)
class DetectionContext:
    person_id: str
    work_date: date
    day: AttendanceDay
    logs: Sequence[TimeLogEntry]
    marked_absent: bool
    thresholds: DetectionThresholds

    def make(self, rule: DiscrepancyRuleType, minutes: int, metadata: DiscrepancyDetail) -> Discrepancy:
        return Discrepancy(
            person_id=self.person_id,
            date=self.work_date,
            rule=rule,
            severity=severity_for(rule, minutes),
            minutes_involved=minutes,
            metadata=metadata,
        )


class DiscrepancyRule(ABC):
    """Strategy Pattern: one detection rule, evaluated independently."""

    rule_type: DiscrepancyRuleType

    @abstractmethod
    def evaluate(self, ctx: DetectionContext) -> list[Discrepancy]:
        raise NotImplementedError
