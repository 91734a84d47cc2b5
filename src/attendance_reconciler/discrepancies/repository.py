from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import DiscrepancyRuleType
from .model import Discrepancy


class DiscrepancyRepository(Protocol):
    """Storage collaborator for discrepancies.

    upsert() is keyed by (person_id, date, rule): an existing record keeps its
    status and resolution data, only severity/minutes/metadata are refreshed.
    """

    def upsert(self, discrepancy: Discrepancy) -> None:
        raise NotImplementedError

    def get(self, person_id: str, work_date: date, rule: DiscrepancyRuleType) -> Optional[Discrepancy]:
        raise NotImplementedError

    def list_for_person(self, person_id: str, *, start: date, end: date) -> Sequence[Discrepancy]:
        raise NotImplementedError
