from __future__ import annotations

from ...core.enums import AttendanceStatus, DiscrepancyRuleType
from ..model import Discrepancy, NoAttendanceDetail
from .base import DetectionContext, DiscrepancyRule


class NoAttendanceRule(DiscrepancyRule):
    """Work logged during office hours on a day without attendance."""

    rule_type = DiscrepancyRuleType.NO_ATTENDANCE

    def evaluate(self, ctx: DetectionContext) -> list[Discrepancy]:
        if not (ctx.marked_absent or ctx.day.status == AttendanceStatus.ABSENT):
            return []

        in_hours = [e for e in ctx.logs if ctx.thresholds.within_workday(e.log_minutes)]
        if not in_hours:
            return []

        minutes = sum(e.duration_minutes for e in in_hours)
        detail = NoAttendanceDetail(log_count=len(in_hours), logged_minutes=minutes, marked_absent=ctx.marked_absent)
        return [ctx.make(self.rule_type, minutes, detail)]
