from __future__ import annotations

from ...core.enums import DiscrepancyRuleType
from ...worklogs.model import total_logged_minutes
from ..model import Discrepancy, ZeroPresenceDetail
from .base import DetectionContext, DiscrepancyRule


class ZeroPresenceRule(DiscrepancyRule):
    """Near-zero office presence alongside significant logged work."""

    rule_type = DiscrepancyRuleType.ZERO_PRESENCE

    def evaluate(self, ctx: DetectionContext) -> list[Discrepancy]:
        if not ctx.day.has_record:
            return []

        logged = total_logged_minutes(ctx.logs)
        presence = ctx.day.total_minutes
        if presence >= ctx.thresholds.min_presence or logged <= ctx.thresholds.min_logged:
            return []

        detail = ZeroPresenceDetail(
            presence_minutes=presence,
            logged_minutes=logged,
            attendance_status=ctx.day.status,
        )
        return [ctx.make(self.rule_type, logged, detail)]
