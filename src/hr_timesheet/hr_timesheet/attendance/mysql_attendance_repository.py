from __future__ import annotations

from datetime import date
from typing import Sequence

from ..core.enums import ExplainStatus
from ..core.exceptions import StorageError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_text, db_cursor, fetchall, fetchone
from .model import AttendanceDraft, AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = """
    id, employee_code, work_date, shift_code, shift_time,
    check_in, check_out, explain_status, note, created_at
"""


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["id"]),
        employee_code=as_text(r["employee_code"]),
        work_date=r["work_date"],
        shift_code=as_text(r.get("shift_code")),
        shift_time=as_text(r.get("shift_time")),
        check_in=as_text(r.get("check_in")),
        check_out=as_text(r.get("check_out")),
        explain_status=ExplainStatus(as_text(r["explain_status"])),
        note=as_text(r.get("note")),
        created_at=r.get("created_at"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_range(self, *, employee_code: str, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance
                WHERE employee_code=%s
                  AND work_date >= %s
                  AND work_date <= %s
                ORDER BY work_date ASC
                """,
                (employee_code, start_date, end_date),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def upsert(self, draft: AttendanceDraft) -> AttendanceRecord:
        # UNIQUE(employee_code, work_date) makes the write atomic; write and re-read share one transaction.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance
                    (employee_code, work_date, shift_code, shift_time, check_in, check_out, explain_status, note)
                VALUES (%s, %s, %s, %s, %s, %s, %s, %s) AS new
                ON DUPLICATE KEY UPDATE
                    shift_code=new.shift_code,
                    shift_time=new.shift_time,
                    check_in=new.check_in,
                    check_out=new.check_out,
                    explain_status=new.explain_status,
                    note=new.note
                """,
                (
                    draft.employee_code,
                    draft.work_date,
                    draft.shift_code,
                    draft.shift_time,
                    draft.check_in,
                    draft.check_out,
                    draft.explain_status.value,
                    draft.note,
                ),
            )
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance WHERE employee_code=%s AND work_date=%s",
                (draft.employee_code, draft.work_date),
            )
            r = fetchone(cur)
            if not r:
                raise StorageError("Không đọc lại được bản ghi chấm công sau khi lưu")
            return _to_record(r)

    def delete_by_id(self, attendance_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance WHERE id=%s", (int(attendance_id),))
            return cur.rowcount > 0
