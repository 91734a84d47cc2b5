from __future__ import annotations

from enum import Enum


class PunchDirection(str, Enum):
    """Swipe direction: entrance or exit reader."""

    IN = "IN"
    OUT = "OUT"


class AttendanceStatus(str, Enum):
    """Day-level attendance status derived from raw punches."""

    PRESENT = "PRESENT"
    PARTIAL = "PARTIAL"
    ABSENT = "ABSENT"


class DiscrepancyRuleType(str, Enum):
    LOG_AFTER_EXIT = "LOG_AFTER_EXIT"
    NO_ATTENDANCE = "NO_ATTENDANCE"
    OUTSIDE_HOURS = "OUTSIDE_HOURS"
    ZERO_PRESENCE = "ZERO_PRESENCE"


class Severity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]


_SEVERITY_RANK = {Severity.LOW: 1, Severity.MEDIUM: 2, Severity.HIGH: 3}


class DiscrepancyStatus(str, Enum):
    """Discrepancy workflow status. The detector only creates OPEN records."""

    OPEN = "open"
    RESOLVED = "resolved"


class DiagnosticKind(str, Enum):
    """Structured, non-fatal warnings raised while reconciling."""

    MALFORMED_TIMESTAMP = "MALFORMED_TIMESTAMP"
    UNKNOWN_DIRECTION = "UNKNOWN_DIRECTION"
    INVALID_SESSION_DURATION = "INVALID_SESSION_DURATION"
    DUPLICATE_IN = "DUPLICATE_IN"
    DUPLICATE_OUT = "DUPLICATE_OUT"
    UNKNOWN_PERSON = "UNKNOWN_PERSON"
    INVALID_DURATION = "INVALID_DURATION"
    RECONCILE_FAILED = "RECONCILE_FAILED"
