from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.service import AttendanceService
from .audit.mysql_audit_repository import MySQLAuditLogRepository
from .audit.service import AuditLogService
from .core.constants import MAX_AVATAR_BYTES
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_department_repository import MySQLDepartmentRepository
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.service import DepartmentService, EmployeeService
from .storage.avatar_storage import LocalAvatarStorage
from .timesheet.service import TimesheetService
from .users.mysql_user_repository import MySQLUserRepository
from .users.service import UserService


@dataclass(frozen=True)
class Container:
    avatar_storage: LocalAvatarStorage

    attendance_service: AttendanceService
    timesheet_service: TimesheetService
    employee_service: EmployeeService
    department_service: DepartmentService
    user_service: UserService
    audit_service: AuditLogService

    conn: Optional[DatabaseConnection] = None

    def close(self) -> None:
        if self.conn is not None:
            self.conn.close()


def build_container(
    *,
    db_config: dict,
    upload_dir: str | Path,
    max_avatar_bytes: int = MAX_AVATAR_BYTES,
) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))

    attendance_repo = MySQLAttendanceRepository(conn)
    avatar_storage = LocalAvatarStorage(upload_dir, max_bytes=max_avatar_bytes)

    return Container(
        conn=conn,
        avatar_storage=avatar_storage,
        attendance_service=AttendanceService(attendance_repo),
        timesheet_service=TimesheetService(attendance_repo),
        employee_service=EmployeeService(MySQLEmployeeRepository(conn), avatar_storage),
        department_service=DepartmentService(MySQLDepartmentRepository(conn)),
        user_service=UserService(MySQLUserRepository(conn)),
        audit_service=AuditLogService(MySQLAuditLogRepository(conn)),
    )
