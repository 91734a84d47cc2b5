from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .compliance.classifier import ComplianceClassifier
from .discrepancies.detector import DiscrepancyDetector
from .discrepancies.factory import DiscrepancyRuleFactory
from .discrepancies.repository import DiscrepancyRepository
from .punches.engine import PunchPairingEngine
from .reconcile.repository import AttendanceDayRepository, AttendanceStatusSource, PersonDirectory, TimeLogSource
from .reconcile.service import ReconciliationService


@dataclass(frozen=True)
class Container:
    engine: PunchPairingEngine
    detector: DiscrepancyDetector
    classifier: ComplianceClassifier
    reconciliation_service: ReconciliationService


def build_container(
    *,
    settings=None,
    people: Optional[PersonDirectory] = None,
    time_logs: Optional[TimeLogSource] = None,
    statuses: Optional[AttendanceStatusSource] = None,
    attendance_repo: Optional[AttendanceDayRepository] = None,
    discrepancy_repo: Optional[DiscrepancyRepository] = None,
) -> Container:
    """Wire the engine and its collaborators.

    Storage and lookup collaborators are optional; without them only
    single-day reconciliation is available.
    """
    disabled = frozenset(getattr(settings, "DISABLED_RULES", ()) or ())

    engine = PunchPairingEngine()
    detector = DiscrepancyDetector(DiscrepancyRuleFactory(disabled=disabled).build())
    classifier = ComplianceClassifier()
    reconciliation_service = ReconciliationService(
        engine=engine,
        detector=detector,
        classifier=classifier,
        people=people,
        time_logs=time_logs,
        statuses=statuses,
        attendance_repo=attendance_repo,
        discrepancy_repo=discrepancy_repo,
    )

    return Container(
        engine=engine,
        detector=detector,
        classifier=classifier,
        reconciliation_service=reconciliation_service,
    )
