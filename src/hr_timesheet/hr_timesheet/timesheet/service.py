from __future__ import annotations

from typing import Any, Optional

from ..attendance.repository import AttendanceRepository
from ..attendance.service import RANGE_PARAMS_MESSAGE
from ..common.datetime_utils import iter_dates, weekday_label
from ..common.validators import require_iso_date, require_params
from ..core.constants import TOTAL_ROW_LABEL
from .calculator.base import WorkedHoursCalculator
from .calculator.placeholder_calculator import FullPunchPlaceholderCalculator
from .model import TimesheetCards, TimesheetDay, TimesheetSummary


class TimesheetService:
    """Use case: bảng công tổng hợp (cards + rows) cho một nhân viên trong một kỳ.

    Every date of the period gets a row, whether or not attendance exists for it.
    An inverted period (from > to) simply produces no day rows.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        calculator: Optional[WorkedHoursCalculator] = None,
    ):
        self._attendance = attendance
        self._calculator = calculator or FullPunchPlaceholderCalculator()

    def summarize(self, employee_code: Any, from_date: Any, to_date: Any) -> TimesheetSummary:
        require_params(RANGE_PARAMS_MESSAGE, employee_code, from_date, to_date)
        start = require_iso_date(from_date, "from")
        end = require_iso_date(to_date, "to")

        records = self._attendance.list_range(
            employee_code=str(employee_code).strip(),
            start_date=start,
            end_date=end,
        )
        by_date = {r.work_date: r for r in records}

        days: list[TimesheetDay] = []
        for day in iter_dates(start, end):
            record = by_date.get(day)
            days.append(
                TimesheetDay(
                    time=weekday_label(day),
                    ccc=self._calculator.worked_hours(record),
                    note=(record.note or "") if record else "",
                )
            )

        total = sum(d.ccc for d in days if d.ccc is not None)
        total_row = TimesheetDay(time=TOTAL_ROW_LABEL, ccc=total or None)

        return TimesheetSummary(cards=TimesheetCards(total_hours=total), total_row=total_row, days=days)
