from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional

from ..common.datetime_utils import parse_instant
from ..core.enums import DiagnosticKind
from ..core.exceptions import MalformedTimestampError, ValidationError
from ..punches.model import Diagnostic
from .model import TimeLogEntry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NormalizedLogs:
    entries: list[TimeLogEntry]
    diagnostics: list[Diagnostic]


def _duration_minutes(record: Mapping) -> int:
    if record.get("durationMinutes") is not None:
        minutes = record["durationMinutes"]
    elif record.get("duration") is not None:
        # Tracker durations arrive in milliseconds.
        try:
            minutes = round(float(record["duration"]) / 1000 / 60)
        except (TypeError, ValueError) as exc:
            raise ValidationError(f"Invalid duration {record['duration']!r}") from exc
    else:
        raise ValidationError("Time log entry has no duration")
    try:
        minutes = int(minutes)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"Invalid duration {minutes!r}") from exc
    if minutes < 0:
        raise ValidationError(f"Negative duration {minutes}")
    return minutes


def normalize_time_logs(records: Iterable[Mapping], *, source: Optional[str] = None) -> NormalizedLogs:
    """Convert tracker rows to TimeLogEntry values.

    Accepted keys: loggedAt, workTimestamp (or start), duration in ms or
    durationMinutes, label (or taskName). workTimestamp defaults to loggedAt.
    Rows with a bad timestamp or duration are dropped with a diagnostic.
    """
    entries: list[TimeLogEntry] = []
    diagnostics: list[Diagnostic] = []

    for record in records:
        raw_logged = record.get("loggedAt")
        raw_work = record.get("workTimestamp", record.get("start"))
        try:
            logged_at = parse_instant(raw_logged)
            work_timestamp = parse_instant(raw_work) if raw_work is not None else logged_at
            duration = _duration_minutes(record)
        except MalformedTimestampError as e:
            logger.warning("Dropping time log from %s: %s", source or "?", e)
            diagnostics.append(
                Diagnostic(
                    kind=DiagnosticKind.MALFORMED_TIMESTAMP,
                    message=str(e),
                    source=source,
                    raw=None if e.raw is None else str(e.raw),
                )
            )
            continue
        except ValidationError as e:
            logger.warning("Dropping time log from %s: %s", source or "?", e)
            raw_duration = record.get("durationMinutes", record.get("duration"))
            diagnostics.append(
                Diagnostic(
                    kind=DiagnosticKind.INVALID_DURATION,
                    message=str(e),
                    source=source,
                    raw=None if raw_duration is None else str(raw_duration),
                )
            )
            continue

        entries.append(
            TimeLogEntry(
                logged_at=logged_at,
                work_timestamp=work_timestamp,
                duration_minutes=duration,
                label=str(record.get("label") or record.get("taskName") or ""),
            )
        )

    return NormalizedLogs(entries=entries, diagnostics=diagnostics)
