from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Union

from ...attendance.model import AttendanceRecord

Hours = Union[int, float]


class WorkedHoursCalculator(ABC):
    """Calculator interface (Strategy Pattern for per-day worked hours)."""

    @abstractmethod
    def worked_hours(self, record: Optional[AttendanceRecord]) -> Optional[Hours]:
        """Hours for one day, or None when the day has no countable value.

        ``record`` is None for dates without any stored attendance.
        """

        raise NotImplementedError
