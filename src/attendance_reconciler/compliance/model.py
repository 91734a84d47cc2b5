from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class ComplianceFlags:
    """Independent per-day predicates summed by reporting roll-ups."""

    late_checkin: bool = False
    super_late_checkin: bool = False
    insufficient_hours: bool = False
    outside_office_work: bool = False
    no_data_day: bool = False
    super_late_with_office_but_low_work: bool = False
    super_late_with_office_and_good_work: bool = False
    less_than_8h_office: bool = False

    def raised(self) -> list[str]:
        return [name for name, value in asdict(self).items() if value]
