from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import AttendanceDraft, AttendanceRecord


class AttendanceRepository(Protocol):
    """Giao diện repository cho bản ghi chấm công.

    Lưu ý: (employee_code, work_date) là khoá duy nhất; upsert là đường ghi duy nhất
    ngoài xoá theo id.
    """

    def list_range(self, *, employee_code: str, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        """Records in [start_date, end_date], ordered by work_date ascending."""

        raise NotImplementedError

    def upsert(self, draft: AttendanceDraft) -> AttendanceRecord:
        """Insert, or replace mutable fields in place; id and created_at are kept."""

        raise NotImplementedError

    def delete_by_id(self, attendance_id: int) -> bool:
        raise NotImplementedError
