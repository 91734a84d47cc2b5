from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from ..compliance.model import ComplianceFlags
from ..discrepancies.model import Discrepancy
from ..punches.model import AttendanceDay, Diagnostic


@dataclass(frozen=True)
class Person:
    """Domain entity: a person being reconciled."""

    person_id: str
    employee_code: str
    name: str


@dataclass(frozen=True)
class DayReconciliation:
    person_id: str
    work_date: date
    attendance: AttendanceDay
    logged_minutes: int
    discrepancies: tuple[Discrepancy, ...]
    compliance: ComplianceFlags
    diagnostics: tuple[Diagnostic, ...] = ()


@dataclass
class BatchResult:
    days: list[DayReconciliation] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def discrepancies(self) -> list[Discrepancy]:
        return [d for day in self.days for d in day.discrepancies]
