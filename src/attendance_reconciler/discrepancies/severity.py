from __future__ import annotations

from ..core.constants import LOG_AFTER_EXIT_MEDIUM_MAX_MINUTES
from ..core.enums import DiscrepancyRuleType, Severity


def severity_for(rule: DiscrepancyRuleType, minutes: int) -> Severity:
    """Severity is a pure function of (rule, minutes involved)."""
    if rule == DiscrepancyRuleType.LOG_AFTER_EXIT:
        return Severity.MEDIUM if minutes <= LOG_AFTER_EXIT_MEDIUM_MAX_MINUTES else Severity.HIGH
    if rule == DiscrepancyRuleType.NO_ATTENDANCE:
        return Severity.MEDIUM
    if rule == DiscrepancyRuleType.OUTSIDE_HOURS:
        return Severity.LOW
    if rule == DiscrepancyRuleType.ZERO_PRESENCE:
        return Severity.HIGH
    raise ValueError(f"Unknown discrepancy rule: {rule!r}")
