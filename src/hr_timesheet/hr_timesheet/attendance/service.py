from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from ..common.validators import optional_text, require_iso_date, require_non_empty, require_params
from ..core.enums import ExplainStatus
from ..core.exceptions import NotFoundError, ValidationError
from .model import AttendanceDraft, AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

RANGE_PARAMS_MESSAGE = "Thiếu tham số: employeeCode, from, to"


class AttendanceService:
    """Use case: lưu trữ và truy vấn chấm công theo nhân viên/ngày."""

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def query(self, employee_code: Any, from_date: Any, to_date: Any) -> Sequence[AttendanceRecord]:
        require_params(RANGE_PARAMS_MESSAGE, employee_code, from_date, to_date)
        start = require_iso_date(from_date, "from")
        end = require_iso_date(to_date, "to")
        return self._attendance.list_range(
            employee_code=str(employee_code).strip(),
            start_date=start,
            end_date=end,
        )

    def upsert(self, payload: Mapping[str, Any]) -> AttendanceRecord:
        draft = self._to_draft(payload)
        record = self._attendance.upsert(draft)
        logger.info("Saved attendance %s/%s (id=%s)", record.employee_code, record.work_date, record.attendance_id)
        return record

    def delete(self, attendance_id: int) -> None:
        if not self._attendance.delete_by_id(int(attendance_id)):
            raise NotFoundError("Không tìm thấy bản ghi chấm công")
        logger.info("Deleted attendance id=%s", attendance_id)

    def _to_draft(self, payload: Mapping[str, Any]) -> AttendanceDraft:
        employee_code = payload.get("employeeCode") or payload.get("maNv")
        work_date = payload.get("workDate")
        require_params("Thiếu employeeCode hoặc workDate", employee_code, work_date)

        status_raw = optional_text(payload.get("explainStatus"))
        try:
            explain_status = ExplainStatus(status_raw.upper()) if status_raw else ExplainStatus.PENDING
        except ValueError:
            raise ValidationError("explainStatus chỉ nhận PENDING hoặc EXPLAINED")

        return AttendanceDraft(
            employee_code=require_non_empty(employee_code, "employeeCode"),
            work_date=require_iso_date(work_date, "workDate"),
            shift_code=optional_text(payload.get("shiftCode")),
            shift_time=optional_text(payload.get("shiftTime")),
            check_in=optional_text(payload.get("checkIn")),
            check_out=optional_text(payload.get("checkOut")),
            explain_status=explain_status,
            note=optional_text(payload.get("note")),
        )
