from __future__ import annotations

from collections import Counter
from typing import Iterable

from ..core.enums import DiscrepancyRuleType, DiscrepancyStatus, Severity
from .model import Discrepancy, DiscrepancyStats, DiscrepancySummary

RULE_TITLES = {
    DiscrepancyRuleType.LOG_AFTER_EXIT: "Logged During OUT Periods",
    DiscrepancyRuleType.NO_ATTENDANCE: "Logged Without Attendance",
    DiscrepancyRuleType.OUTSIDE_HOURS: "After-Hours Logging",
    DiscrepancyRuleType.ZERO_PRESENCE: "High Logging with Minimal Presence",
}

RULE_DESCRIPTIONS = {
    DiscrepancyRuleType.LOG_AFTER_EXIT: "members logged time during lunch/break periods",
    DiscrepancyRuleType.NO_ATTENDANCE: "members logged time without attendance record",
    DiscrepancyRuleType.OUTSIDE_HOURS: "members logged time outside work hours",
    DiscrepancyRuleType.ZERO_PRESENCE: "members with high logged time but minimal office presence",
}


def summarize(discrepancies: Iterable[Discrepancy]) -> list[DiscrepancySummary]:
    """Group by rule: count, worst severity, affected people (first-seen order)."""
    grouped: dict[DiscrepancyRuleType, list[Discrepancy]] = {}
    for d in discrepancies:
        grouped.setdefault(d.rule, []).append(d)

    summaries = []
    for rule, items in grouped.items():
        people = tuple(dict.fromkeys(d.person_id for d in items))
        worst = max((d.severity for d in items), key=lambda s: s.rank)
        summaries.append(
            DiscrepancySummary(
                rule=rule,
                count=len(items),
                severity=worst,
                title=RULE_TITLES[rule],
                description=RULE_DESCRIPTIONS[rule],
                affected_person_ids=people,
            )
        )
    return summaries


def statistics(discrepancies: Iterable[Discrepancy]) -> DiscrepancyStats:
    items = list(discrepancies)
    by_rule = Counter(d.rule for d in items)
    by_severity = Counter(d.severity for d in items)
    return DiscrepancyStats(
        total=len(items),
        open=sum(1 for d in items if d.status == DiscrepancyStatus.OPEN),
        resolved=sum(1 for d in items if d.status == DiscrepancyStatus.RESOLVED),
        by_rule={r: by_rule.get(r, 0) for r in DiscrepancyRuleType},
        by_severity={s: by_severity.get(s, 0) for s in Severity},
    )
