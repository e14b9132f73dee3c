from __future__ import annotations

from typing import Optional

from ...attendance.model import AttendanceRecord
from ...core.constants import WORKED_HOURS_PLACEHOLDER
from .base import Hours, WorkedHoursCalculator


class FullPunchPlaceholderCalculator(WorkedHoursCalculator):
    """Demo rule: a fixed 9 hours when both check-in and check-out exist.

    Swap in a real formula by passing another WorkedHoursCalculator to TimesheetService.
    """

    def worked_hours(self, record: Optional[AttendanceRecord]) -> Optional[Hours]:
        if record is not None and record.has_full_punch:
            return WORKED_HOURS_PLACEHOLDER
        return None
