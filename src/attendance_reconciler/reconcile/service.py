from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Iterable, Iterator, Optional, Sequence

from ..compliance.classifier import ComplianceClassifier
from ..core.enums import DiagnosticKind
from ..core.exceptions import DomainError
from ..discrepancies.detector import DiscrepancyDetector
from ..discrepancies.repository import DiscrepancyRepository
from ..punches.engine import PunchPairingEngine
from ..punches.model import Diagnostic, PunchEvent
from ..punches.normalizer import group_by_person_day
from ..worklogs.model import TimeLogEntry, total_logged_minutes
from .model import BatchResult, DayReconciliation
from .repository import AttendanceDayRepository, AttendanceStatusSource, PersonDirectory, TimeLogSource

logger = logging.getLogger(__name__)


def each_day(start: date, end: date) -> Iterator[date]:
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


class ReconciliationService:
    """Compose pairing, detection and classification per person-day.

    Each person-day is independent; diagnostics are collected, never raised.
    """

    def __init__(
        self,
        *,
        engine: Optional[PunchPairingEngine] = None,
        detector: Optional[DiscrepancyDetector] = None,
        classifier: Optional[ComplianceClassifier] = None,
        people: Optional[PersonDirectory] = None,
        time_logs: Optional[TimeLogSource] = None,
        statuses: Optional[AttendanceStatusSource] = None,
        attendance_repo: Optional[AttendanceDayRepository] = None,
        discrepancy_repo: Optional[DiscrepancyRepository] = None,
    ):
        self._engine = engine or PunchPairingEngine()
        self._detector = detector or DiscrepancyDetector()
        self._classifier = classifier or ComplianceClassifier()
        self._people = people
        self._time_logs = time_logs
        self._statuses = statuses
        self._attendance_repo = attendance_repo
        self._discrepancy_repo = discrepancy_repo

    def reconcile_day(
        self,
        *,
        person_id: str,
        work_date: date,
        punches: Iterable[PunchEvent],
        logs: Sequence[TimeLogEntry],
        employee_code: Optional[str] = None,
        marked_absent: bool = False,
    ) -> DayReconciliation:
        day = self._engine.pair(punches, employee_code=employee_code, work_date=work_date)
        discrepancies = self._detector.detect(
            day,
            logs,
            person_id=person_id,
            work_date=work_date,
            marked_absent=marked_absent,
        )
        logged = total_logged_minutes(logs)
        flags = self._classifier.classify(day.total_minutes, logged, day.first_in)

        return DayReconciliation(
            person_id=person_id,
            work_date=work_date,
            attendance=day,
            logged_minutes=logged,
            discrepancies=tuple(discrepancies),
            compliance=flags,
            diagnostics=day.diagnostics,
        )

    def reconcile_range(
        self,
        events: Iterable[PunchEvent],
        *,
        start: date,
        end: date,
        diagnostics: Iterable[Diagnostic] = (),
    ) -> BatchResult:
        """Reconcile every known person for every date in [start, end].

        `diagnostics` carries warnings from feed normalization so the batch
        reports everything in one place.
        """
        if self._people is None or self._time_logs is None:
            raise DomainError("Batch reconciliation requires a person directory and a time-log source")
        if end < start:
            raise DomainError("end date is before start date")

        result = BatchResult(diagnostics=list(diagnostics))
        grouped = group_by_person_day(e for e in events if start <= e.work_date <= end)

        people = list(self._people.list_people())
        known_codes = {p.employee_code for p in people}

        for (code, work_date) in sorted(grouped):
            if code in known_codes:
                continue
            person = self._people.find_by_employee_code(code)
            if person is not None:
                people.append(person)
                known_codes.add(code)
                continue
            logger.warning("Skipping %s on %s: unknown employee code", code, work_date.isoformat())
            result.diagnostics.append(
                Diagnostic(
                    kind=DiagnosticKind.UNKNOWN_PERSON,
                    message=f"No person found for employee code {code!r}",
                    source=code,
                    work_date=work_date,
                )
            )

        for person in people:
            for work_date in each_day(start, end):
                try:
                    marked_absent = bool(
                        self._statuses and self._statuses.is_marked_absent(person.person_id, work_date)
                    )
                    reconciled = self.reconcile_day(
                        person_id=person.person_id,
                        work_date=work_date,
                        punches=grouped.get((person.employee_code, work_date), []),
                        logs=list(self._time_logs.get_for_person_and_date(person.person_id, work_date)),
                        employee_code=person.employee_code,
                        marked_absent=marked_absent,
                    )
                    self._persist(reconciled)
                except Exception as e:
                    logger.exception(
                        "Reconciliation failed for %s on %s", person.person_id, work_date.isoformat()
                    )
                    result.diagnostics.append(
                        Diagnostic(
                            kind=DiagnosticKind.RECONCILE_FAILED,
                            message=f"Reconciliation failed: {e}",
                            source=person.person_id,
                            work_date=work_date,
                        )
                    )
                    continue
                result.days.append(reconciled)
                result.diagnostics.extend(reconciled.diagnostics)

        logger.info(
            "Reconciled %d person-days: %d discrepancies, %d diagnostics",
            len(result.days),
            len(result.discrepancies),
            len(result.diagnostics),
        )
        return result

    def _persist(self, reconciled: DayReconciliation) -> None:
        if self._attendance_repo is not None:
            self._attendance_repo.upsert(
                person_id=reconciled.person_id,
                work_date=reconciled.work_date,
                day=reconciled.attendance,
            )
        if self._discrepancy_repo is not None:
            for d in reconciled.discrepancies:
                self._discrepancy_repo.upsert(d)
