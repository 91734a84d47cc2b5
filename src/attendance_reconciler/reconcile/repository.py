from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..punches.model import AttendanceDay
from ..worklogs.model import TimeLogEntry
from .model import Person


class PersonDirectory(Protocol):
    """Lookup collaborator: maps device employee codes to people."""

    def list_people(self) -> Sequence[Person]:
        raise NotImplementedError

    def find_by_employee_code(self, employee_code: str) -> Optional[Person]:
        raise NotImplementedError


class TimeLogSource(Protocol):
    def get_for_person_and_date(self, person_id: str, work_date: date) -> Sequence[TimeLogEntry]:
        raise NotImplementedError


class AttendanceStatusSource(Protocol):
    """Explicit ABSENT overrides (leave, manual marking), distinct from "no punches"."""

    def is_marked_absent(self, person_id: str, work_date: date) -> bool:
        raise NotImplementedError


class AttendanceDayRepository(Protocol):
    """Storage collaborator; upsert keyed by (person_id, work_date)."""

    def upsert(self, *, person_id: str, work_date: date, day: AttendanceDay) -> None:
        raise NotImplementedError

    def get(self, person_id: str, work_date: date) -> Optional[AttendanceDay]:
        raise NotImplementedError
