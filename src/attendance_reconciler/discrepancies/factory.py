from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from ..core.enums import DiscrepancyRuleType
from .rules.base import DiscrepancyRule
from .rules.log_after_exit import LogAfterExitRule
from .rules.no_attendance import NoAttendanceRule
from .rules.outside_hours import OutsideHoursRule
from .rules.zero_presence import ZeroPresenceRule

_RULE_CLASSES = {
    DiscrepancyRuleType.LOG_AFTER_EXIT: LogAfterExitRule,
    DiscrepancyRuleType.NO_ATTENDANCE: NoAttendanceRule,
    DiscrepancyRuleType.OUTSIDE_HOURS: OutsideHoursRule,
    DiscrepancyRuleType.ZERO_PRESENCE: ZeroPresenceRule,
}


@dataclass
class DiscrepancyRuleFactory:
    """Factory Pattern: build the rule set, optionally a subset of it."""

    disabled: frozenset[DiscrepancyRuleType] = field(default_factory=frozenset)

    def build(self, only: Iterable[DiscrepancyRuleType] | None = None) -> list[DiscrepancyRule]:
        wanted = list(only) if only is not None else list(DiscrepancyRuleType)
        return [_RULE_CLASSES[r]() for r in wanted if r not in self.disabled]
