from __future__ import annotations

from datetime import time
from typing import Optional

from ..common.datetime_utils import minutes_of_day
from ..core.constants import LATE_CHECKIN_MINUTES, MINIMUM_WORK_MINUTES, SUPER_LATE_CHECKIN_MINUTES
from .model import ComplianceFlags


class ComplianceClassifier:
    def __init__(
        self,
        *,
        late_after: int = LATE_CHECKIN_MINUTES,
        super_late_after: int = SUPER_LATE_CHECKIN_MINUTES,
        minimum_minutes: int = MINIMUM_WORK_MINUTES,
    ):
        self._late_after = int(late_after)
        self._super_late_after = int(super_late_after)
        self._minimum = int(minimum_minutes)

    def classify(self, attendance_minutes: int, logged_minutes: int, first_in: Optional[time]) -> ComplianceFlags:
        checkin = minutes_of_day(first_in) if first_in is not None else None
        super_late = checkin is not None and checkin > self._super_late_after
        late = checkin is not None and not super_late and checkin > self._late_after

        office_ok = attendance_minutes >= self._minimum
        work_ok = logged_minutes >= self._minimum

        return ComplianceFlags(
            late_checkin=late,
            super_late_checkin=super_late,
            insufficient_hours=(
                not office_ok and not work_ok and (attendance_minutes > 0 or logged_minutes > 0)
            ),
            outside_office_work=not office_ok and work_ok,
            no_data_day=attendance_minutes == 0 and logged_minutes == 0,
            super_late_with_office_but_low_work=super_late and office_ok and not work_ok,
            super_late_with_office_and_good_work=super_late and office_ok and work_ok,
            less_than_8h_office=0 < attendance_minutes < self._minimum,
        )
