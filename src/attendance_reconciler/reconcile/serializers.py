from __future__ import annotations

from dataclasses import asdict
from enum import Enum

from ..common.datetime_utils import format_clock
from ..discrepancies.model import Discrepancy
from ..punches.model import AttendanceDay, Diagnostic
from .model import DayReconciliation


def _clock(value):
    return format_clock(value) if value is not None else None


def _plain(value):
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


def attendance_to_dict(day: AttendanceDay) -> dict:
    return {
        "employeeCode": day.employee_code,
        "employeeName": day.employee_name,
        "date": day.work_date.isoformat() if day.work_date else None,
        "sessions": [{"in": _clock(s.in_time), "out": _clock(s.out_time)} for s in day.sessions],
        "unpairedIns": [_clock(t) for t in day.unpaired_ins],
        "unpairedOuts": [_clock(t) for t in day.unpaired_outs],
        "firstIn": _clock(day.first_in),
        "lastOut": _clock(day.last_out),
        "totalMinutes": day.total_minutes,
        "totalHours": round(day.total_hours, 2),
        "status": day.status.value,
    }


def discrepancy_to_dict(d: Discrepancy) -> dict:
    return {
        "personId": d.person_id,
        "date": d.date.isoformat(),
        "rule": d.rule.value,
        "severity": d.severity.value,
        "minutesInvolved": d.minutes_involved,
        "status": d.status.value,
        "metadata": _plain(asdict(d.metadata)),
    }


def diagnostic_to_dict(diag: Diagnostic) -> dict:
    return {
        "kind": diag.kind.value,
        "message": diag.message,
        "source": diag.source,
        "raw": diag.raw,
        "date": diag.work_date.isoformat() if diag.work_date else None,
    }


def reconciliation_to_dict(r: DayReconciliation) -> dict:
    return {
        "personId": r.person_id,
        "date": r.work_date.isoformat(),
        "attendance": attendance_to_dict(r.attendance),
        "loggedMinutes": r.logged_minutes,
        "discrepancies": [discrepancy_to_dict(d) for d in r.discrepancies],
        "compliance": asdict(r.compliance),
        "diagnostics": [diagnostic_to_dict(d) for d in r.diagnostics],
    }
