from __future__ import annotations

from datetime import date, datetime, time

import pytest

from attendance_reconciler.core.enums import AttendanceStatus, DiscrepancyRuleType, DiscrepancyStatus, Severity
from attendance_reconciler.discrepancies.detector import DiscrepancyDetector
from attendance_reconciler.discrepancies.factory import DiscrepancyRuleFactory
from attendance_reconciler.discrepancies.model import (
    LogAfterExitDetail,
    NoAttendanceDetail,
    OutPeriod,
    OutsideHoursDetail,
    ZeroPresenceDetail,
)
from attendance_reconciler.punches.model import AttendanceDay, WorkSession
from attendance_reconciler.worklogs.model import TimeLogEntry

DAY = date(2026, 1, 1)


def _t(clock: str) -> time:
    hh, mm = (int(p) for p in clock.split(":"))
    return time(hh, mm)


def _day(*sessions: tuple[str, str], status: AttendanceStatus | None = None, total: int | None = None) -> AttendanceDay:
    ws = tuple(WorkSession(in_time=_t(a), out_time=_t(b)) for a, b in sessions)
    if status is None:
        status = AttendanceStatus.PRESENT if ws else AttendanceStatus.ABSENT
    return AttendanceDay(
        employee_code="E001",
        employee_name="John Doe",
        work_date=DAY,
        sessions=ws,
        unpaired_ins=(),
        unpaired_outs=(),
        first_in=ws[0].in_time if ws else None,
        last_out=ws[-1].out_time if ws else None,
        total_minutes=sum(s.duration_minutes for s in ws) if total is None else total,
        status=status,
    )


def _log(clock: str, minutes: int, label: str = "task") -> TimeLogEntry:
    at = datetime.combine(DAY, _t(clock))
    return TimeLogEntry(logged_at=at, work_timestamp=at, duration_minutes=minutes, label=label)


def _detect(day, logs, **kwargs):
    return DiscrepancyDetector().detect(day, logs, person_id="u-1", **kwargs)


def _rules(found):
    return [d.rule for d in found]


@pytest.mark.parametrize("minutes, severity", [(20, Severity.MEDIUM), (30, Severity.MEDIUM), (45, Severity.HIGH)])
def test_log_inside_lunch_gap(minutes, severity):
    day = _day(("09:00", "12:00"), ("13:00", "18:00"))

    found = _detect(day, [_log("12:30", minutes, "Fix login")])

    assert _rules(found) == [DiscrepancyRuleType.LOG_AFTER_EXIT]
    d = found[0]
    assert d.minutes_involved == minutes
    assert d.severity == severity
    assert d.status == DiscrepancyStatus.OPEN
    assert d.person_id == "u-1"
    assert d.date == DAY
    assert isinstance(d.metadata, LogAfterExitDetail)
    assert d.metadata.label == "Fix login"
    assert d.metadata.log_time == "12:30"
    assert d.metadata.out_period == OutPeriod(start="12:00", end="13:00")


def test_log_on_gap_boundary_is_not_inside():
    day = _day(("09:00", "12:00"), ("13:00", "18:00"))

    assert _detect(day, [_log("12:00", 40), _log("13:00", 40)]) == []


def test_single_session_has_no_gaps():
    day = _day(("10:00", "18:00"))

    assert _detect(day, [_log("19:00", 40)]) == []


def test_each_log_in_a_gap_fires_once():
    day = _day(("10:00", "11:00"), ("11:30", "13:00"), ("14:00", "19:00"))

    found = _detect(day, [_log("11:15", 10), _log("13:30", 50), _log("15:00", 60)])

    assert [d.minutes_involved for d in found] == [10, 50]
    assert [d.metadata.out_period.start for d in found] == ["11:00", "13:00"]


def test_no_attendance_aggregates_in_window_minutes():
    day = _day()

    found = _detect(day, [_log("10:00", 30), _log("15:00", 45), _log("20:30", 60)])

    no_att = [d for d in found if d.rule == DiscrepancyRuleType.NO_ATTENDANCE]
    assert len(no_att) == 1
    assert no_att[0].minutes_involved == 75
    assert no_att[0].severity == Severity.MEDIUM
    assert no_att[0].metadata == NoAttendanceDetail(log_count=2, logged_minutes=75, marked_absent=False)


def test_marked_absent_triggers_no_attendance_despite_punches():
    day = _day(("10:00", "10:10"), status=AttendanceStatus.PRESENT)

    found = _detect(day, [_log("11:00", 20)], marked_absent=True)

    assert DiscrepancyRuleType.NO_ATTENDANCE in _rules(found)


def test_partial_day_is_not_no_attendance():
    day = _day(status=AttendanceStatus.PARTIAL)

    found = _detect(day, [_log("11:00", 20)])

    assert DiscrepancyRuleType.NO_ATTENDANCE not in _rules(found)


def test_outside_hours_is_low_and_ignores_attendance():
    day = _day(("10:00", "19:00"))

    found = _detect(day, [_log("09:59", 15), _log("20:00", 25), _log("19:59", 100)])

    assert _rules(found) == [DiscrepancyRuleType.OUTSIDE_HOURS]
    assert found[0].severity == Severity.LOW
    assert found[0].minutes_involved == 40
    assert found[0].metadata == OutsideHoursDetail(log_count=2, outside_minutes=40)


def test_zero_presence_with_heavy_logging():
    day = _day(("10:00", "10:10"))
    assert day.total_minutes == 10

    found = _detect(day, [_log("11:00", 50), _log("14:00", 40)])

    assert _rules(found) == [DiscrepancyRuleType.ZERO_PRESENCE]
    assert found[0].severity == Severity.HIGH
    assert found[0].minutes_involved == 90
    assert found[0].metadata == ZeroPresenceDetail(
        presence_minutes=10, logged_minutes=90, attendance_status=AttendanceStatus.PRESENT
    )


@pytest.mark.parametrize("presence, logged", [(30, 90), (10, 60)])
def test_zero_presence_thresholds_are_strict(presence, logged):
    day = _day(("10:00", "10:30"), total=presence)

    found = _detect(day, [_log("11:00", logged)])

    assert DiscrepancyRuleType.ZERO_PRESENCE not in _rules(found)


def test_zero_presence_needs_an_attendance_record():
    found = _detect(_day(), [_log("21:00", 120)])

    assert DiscrepancyRuleType.ZERO_PRESENCE not in _rules(found)


def test_partial_day_can_fire_zero_presence():
    found = _detect(_day(status=AttendanceStatus.PARTIAL), [_log("11:00", 120)])

    assert _rules(found) == [DiscrepancyRuleType.ZERO_PRESENCE]


def test_all_four_rules_fire_together():
    day = _day(("10:00", "10:05"), ("10:10", "10:20"))

    logs = [_log("10:07", 40), _log("21:00", 60), _log("15:00", 20)]
    found = _detect(day, logs, marked_absent=True)

    assert sorted(r.value for r in _rules(found)) == [
        "LOG_AFTER_EXIT",
        "NO_ATTENDANCE",
        "OUTSIDE_HOURS",
        "ZERO_PRESENCE",
    ]


def test_disabling_one_rule_does_not_change_the_others():
    day = _day(("10:00", "10:05"), ("10:10", "10:20"))
    logs = [_log("10:07", 40), _log("21:00", 60), _log("15:00", 20)]

    everything = _detect(day, logs, marked_absent=True)
    for rule in DiscrepancyRuleType:
        rules = DiscrepancyRuleFactory(disabled=frozenset({rule})).build()
        found = DiscrepancyDetector(rules).detect(day, logs, person_id="u-1", marked_absent=True)
        assert found == [d for d in everything if d.rule != rule]


def test_no_logs_no_discrepancies():
    assert _detect(_day(), []) == []
    assert _detect(_day(("09:00", "12:00"), ("13:00", "18:00")), []) == []


def test_identity_falls_back_to_day():
    day = _day(("09:00", "12:00"), ("13:00", "18:00"))

    found = DiscrepancyDetector().detect(day, [_log("12:30", 10)])

    assert found[0].person_id == "E001"
    assert found[0].date == DAY
