from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..punches.model import AttendanceDay
from ..worklogs.model import TimeLogEntry
from .factory import DiscrepancyRuleFactory
from .model import Discrepancy
from .rules.base import DetectionContext, DetectionThresholds, DiscrepancyRule

logger = logging.getLogger(__name__)


class DiscrepancyDetector:
    """Compare one AttendanceDay with that day's time logs.

    Rules never short-circuit each other; a day may fire all of them.
    """

    def __init__(
        self,
        rules: Optional[Sequence[DiscrepancyRule]] = None,
        *,
        thresholds: Optional[DetectionThresholds] = None,
    ):
        self._rules = list(rules) if rules is not None else DiscrepancyRuleFactory().build()
        self._thresholds = thresholds or DetectionThresholds()

    def detect(
        self,
        day: AttendanceDay,
        logs: Sequence[TimeLogEntry],
        *,
        person_id: Optional[str] = None,
        work_date: Optional[date] = None,
        marked_absent: bool = False,
    ) -> list[Discrepancy]:
        person_id = person_id or day.employee_code
        work_date = work_date or day.work_date
        if person_id is None or work_date is None:
            raise ValueError("person_id and work_date are required when the day carries no identity")

        ctx = DetectionContext(
            person_id=str(person_id),
            work_date=work_date,
            day=day,
            logs=tuple(logs),
            marked_absent=marked_absent,
            thresholds=self._thresholds,
        )

        found: list[Discrepancy] = []
        for rule in self._rules:
            found.extend(rule.evaluate(ctx))

        if found:
            logger.debug(
                "%s on %s: %s",
                ctx.person_id,
                work_date.isoformat(),
                ", ".join(d.rule.value for d in found),
            )
        return found
