from __future__ import annotations

import os

from ..core.enums import DiscrepancyRuleType


def disabled_rules_from_env() -> frozenset[DiscrepancyRuleType]:
    """DISABLED_RULES=OUTSIDE_HOURS,ZERO_PRESENCE turns rules off."""
    raw = os.getenv("DISABLED_RULES", "")
    names = [part.strip().upper() for part in raw.split(",") if part.strip()]
    return frozenset(DiscrepancyRuleType(name) for name in names)
