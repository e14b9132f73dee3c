from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import ExplainStatus


@dataclass(frozen=True)
class AttendanceDraft:
    """Dữ liệu đầu vào cho thao tác upsert theo khoá (employee_code, work_date)."""

    employee_code: str
    work_date: date
    shift_code: Optional[str] = None
    shift_time: Optional[str] = None
    check_in: Optional[str] = None
    check_out: Optional[str] = None
    explain_status: ExplainStatus = ExplainStatus.PENDING
    note: Optional[str] = None


@dataclass(frozen=True)
class AttendanceRecord:
    """Thực thể miền (domain): Bản ghi chấm công của một nhân viên trong một ngày."""

    attendance_id: int
    employee_code: str
    work_date: date
    shift_code: Optional[str]
    shift_time: Optional[str]
    check_in: Optional[str]
    check_out: Optional[str]
    explain_status: ExplainStatus
    note: Optional[str]
    created_at: Optional[datetime] = None

    @property
    def has_full_punch(self) -> bool:
        return bool(self.check_in) and bool(self.check_out)

    def to_dict(self) -> dict:
        return {
            "id": self.attendance_id,
            "employeeCode": self.employee_code,
            "workDate": self.work_date.strftime("%Y-%m-%d"),
            "shiftCode": self.shift_code,
            "shiftTime": self.shift_time,
            "checkIn": self.check_in,
            "checkOut": self.check_out,
            "explainStatus": self.explain_status.value,
            "note": self.note,
            "createdAt": self.created_at.strftime("%Y-%m-%d %H:%M:%S") if self.created_at else None,
        }
