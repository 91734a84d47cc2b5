from __future__ import annotations

from ...core.enums import DiscrepancyRuleType
from ..model import Discrepancy, OutsideHoursDetail
from .base import DetectionContext, DiscrepancyRule


class OutsideHoursRule(DiscrepancyRule):
    """Informational: work logged outside the workday window."""

    rule_type = DiscrepancyRuleType.OUTSIDE_HOURS

    def evaluate(self, ctx: DetectionContext) -> list[Discrepancy]:
        outside = [e for e in ctx.logs if not ctx.thresholds.within_workday(e.log_minutes)]
        if not outside:
            return []

        minutes = sum(e.duration_minutes for e in outside)
        return [ctx.make(self.rule_type, minutes, OutsideHoursDetail(log_count=len(outside), outside_minutes=minutes))]
