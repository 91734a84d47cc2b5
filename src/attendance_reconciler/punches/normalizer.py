"""Feed normalization: raw device / spreadsheet punches -> PunchEvent.

Bad records are dropped with a Diagnostic; the rest of the feed keeps going.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable, Mapping, Optional

from ..common.datetime_utils import parse_clock, parse_device_timestamp
from ..core.enums import DiagnosticKind, PunchDirection
from ..core.exceptions import MalformedTimestampError
from .model import Diagnostic, PunchEvent

logger = logging.getLogger(__name__)

# Device machine ids: "1" is the entrance reader, "2" the exit reader.
MCID_DIRECTIONS = {
    "1": PunchDirection.IN,
    "2": PunchDirection.OUT,
}


@dataclass(frozen=True)
class NormalizedPunches:
    events: list[PunchEvent]
    diagnostics: list[Diagnostic]


def normalize_device_punches(records: Iterable[Mapping]) -> NormalizedPunches:
    """Convert device feed rows ({Name, Empcode, PunchDate, mcid}) to events."""
    events: list[PunchEvent] = []
    diagnostics: list[Diagnostic] = []

    for record in records:
        code = str(record.get("Empcode") or "").strip()
        name = str(record.get("Name") or "").strip()
        raw_ts = record.get("PunchDate")

        try:
            timestamp = parse_device_timestamp(raw_ts)
        except MalformedTimestampError as e:
            logger.warning("Dropping punch for %s: %s", code or "?", e)
            diagnostics.append(
                Diagnostic(
                    kind=DiagnosticKind.MALFORMED_TIMESTAMP,
                    message=str(e),
                    source=code or None,
                    raw=None if raw_ts is None else str(raw_ts),
                )
            )
            continue

        direction = MCID_DIRECTIONS.get(str(record.get("mcid") or "").strip())
        if direction is None:
            logger.warning("Dropping punch for %s: unknown mcid %r", code or "?", record.get("mcid"))
            diagnostics.append(
                Diagnostic(
                    kind=DiagnosticKind.UNKNOWN_DIRECTION,
                    message=f"Unknown punch direction {record.get('mcid')!r}",
                    source=code or None,
                    raw=str(raw_ts),
                    work_date=timestamp.date(),
                )
            )
            continue

        events.append(PunchEvent(employee_code=code, employee_name=name, timestamp=timestamp, direction=direction))

    return NormalizedPunches(events=events, diagnostics=diagnostics)


def clock_punch(
    *,
    employee_code: str,
    employee_name: str,
    work_date: date,
    clock: Optional[str],
    direction: PunchDirection,
) -> Optional[PunchEvent]:
    """Build an event from a spreadsheet HH:mm cell.

    Returns None for empty cells; raises MalformedTimestampError otherwise.
    """
    parsed = parse_clock(clock)
    if parsed is None:
        return None
    return PunchEvent(
        employee_code=employee_code,
        employee_name=employee_name,
        timestamp=datetime.combine(work_date, parsed),
        direction=direction,
    )


def group_by_person_day(events: Iterable[PunchEvent]) -> dict[tuple[str, date], list[PunchEvent]]:
    grouped: dict[tuple[str, date], list[PunchEvent]] = defaultdict(list)
    for event in events:
        grouped[(event.employee_code, event.work_date)].append(event)
    return dict(grouped)
