from __future__ import annotations

from ...common.datetime_utils import format_clock, minutes_of_day
from ...core.enums import DiscrepancyRuleType
from ..model import Discrepancy, LogAfterExitDetail, OutPeriod
from .base import DetectionContext, DiscrepancyRule


class LogAfterExitRule(DiscrepancyRule):
    """Work logged while punched out between two sessions (lunch, breaks)."""

    rule_type = DiscrepancyRuleType.LOG_AFTER_EXIT

    def evaluate(self, ctx: DetectionContext) -> list[Discrepancy]:
        gaps = ctx.day.gaps()
        if not gaps:
            return []

        sessions = tuple((format_clock(s.in_time), format_clock(s.out_time)) for s in ctx.day.sessions)
        found: list[Discrepancy] = []
        for entry in ctx.logs:
            for gap_start, gap_end in gaps:
                if minutes_of_day(gap_start) < entry.log_minutes < minutes_of_day(gap_end):
                    detail = LogAfterExitDetail(
                        log_time=entry.log_clock,
                        label=entry.label,
                        out_period=OutPeriod(start=format_clock(gap_start), end=format_clock(gap_end)),
                        sessions=sessions,
                    )
                    found.append(ctx.make(self.rule_type, entry.duration_minutes, detail))
                    break
        return found
