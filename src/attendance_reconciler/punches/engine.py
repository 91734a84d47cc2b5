"""Punch pairing.

Turns the raw IN/OUT swipes of one person-day into work sessions. The walk is
anchored to the surrounding IN/OUT sequence instead of a time window:

* several INs before the first available OUT collapse to the earliest IN;
* several OUTs before the next IN collapse to the latest OUT;
* the last IN takes the latest OUT remaining.

Every raw punch ends up in exactly one place: a session, a collapsed
duplicate (reported as a diagnostic) or the unpaired lists.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import format_clock
from ..core.enums import AttendanceStatus, DiagnosticKind, PunchDirection
from .model import AttendanceDay, Diagnostic, PunchEvent, WorkSession

logger = logging.getLogger(__name__)


def _sort_key(event: PunchEvent):
    return (event.timestamp, event.direction.value, event.employee_code, event.employee_name)


class PunchPairingEngine:
    """Stateless; safe to share between threads and batch workers."""

    def pair(
        self,
        events: Iterable[PunchEvent],
        *,
        employee_code: Optional[str] = None,
        work_date: Optional[date] = None,
    ) -> AttendanceDay:
        ordered = sorted(events, key=_sort_key)
        ins = [e for e in ordered if e.direction == PunchDirection.IN]
        outs = [e for e in ordered if e.direction == PunchDirection.OUT]

        if ordered:
            employee_code = employee_code or ordered[0].employee_code
            work_date = work_date or ordered[0].work_date
        employee_name = ordered[0].employee_name if ordered else None

        sessions: list[WorkSession] = []
        unpaired_ins: list[PunchEvent] = []
        diagnostics: list[Diagnostic] = []

        pending_ins: Sequence[PunchEvent] = ins
        remaining_outs: Sequence[PunchEvent] = outs

        while pending_ins:
            current, pending_ins = pending_ins[0], pending_ins[1:]

            later_outs = [o for o in remaining_outs if o.timestamp > current.timestamp]
            if not later_outs:
                unpaired_ins.append(current)
                continue

            first_out = later_outs[0]
            duplicates = [i for i in pending_ins if i.timestamp < first_out.timestamp]
            pending_ins = pending_ins[len(duplicates):]
            for dup in duplicates:
                diagnostics.append(self._duplicate(DiagnosticKind.DUPLICATE_IN, dup, kept=current))

            next_in = pending_ins[0] if pending_ins else None
            if next_in is None:
                candidates = later_outs
            else:
                candidates = [o for o in later_outs if o.timestamp < next_in.timestamp]
            if not candidates:
                unpaired_ins.append(current)
                continue

            matched = candidates[-1]
            for dup in candidates[:-1]:
                diagnostics.append(self._duplicate(DiagnosticKind.DUPLICATE_OUT, dup, kept=matched))

            earlier_outs = [o for o in remaining_outs if o.timestamp <= current.timestamp]
            remaining_outs = earlier_outs + later_outs[len(candidates):]

            session = WorkSession(in_time=current.clock, out_time=matched.clock)
            if session.duration_minutes < 0:
                logger.warning(
                    "Dropping session %s for %s: OUT clock-time before IN",
                    session.label(),
                    current.employee_code,
                )
                diagnostics.append(
                    Diagnostic(
                        kind=DiagnosticKind.INVALID_SESSION_DURATION,
                        message=f"Session {session.label()} has negative duration",
                        source=current.employee_code,
                        raw=session.label(),
                        work_date=current.work_date,
                    )
                )
                continue
            sessions.append(session)

        total_minutes = sum(s.duration_minutes for s in sessions)

        if sessions:
            status = AttendanceStatus.PRESENT
        elif ordered:
            status = AttendanceStatus.PARTIAL
        else:
            status = AttendanceStatus.ABSENT

        return AttendanceDay(
            employee_code=employee_code,
            employee_name=employee_name,
            work_date=work_date,
            sessions=tuple(sessions),
            unpaired_ins=tuple(e.clock for e in unpaired_ins),
            unpaired_outs=tuple(e.clock for e in remaining_outs),
            first_in=ins[0].clock if ins else None,
            last_out=outs[-1].clock if outs else None,
            total_minutes=total_minutes,
            status=status,
            diagnostics=tuple(diagnostics),
        )

    @staticmethod
    def _duplicate(kind: DiagnosticKind, dropped: PunchEvent, *, kept: PunchEvent) -> Diagnostic:
        logger.debug(
            "%s for %s: dropping %s, keeping %s",
            kind.value,
            dropped.employee_code,
            format_clock(dropped.clock),
            format_clock(kept.clock),
        )
        return Diagnostic(
            kind=kind,
            message=f"{dropped.direction.value} {format_clock(dropped.clock)} collapsed into {format_clock(kept.clock)}",
            source=dropped.employee_code,
            raw=format_clock(dropped.clock),
            work_date=dropped.work_date,
        )

