from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee, EmployeeDraft, EmployeeStatistics


class EmployeeRepository(Protocol):
    """Giao diện repository cho Employee.

    Lưu ý (DIP): tầng service phụ thuộc vào interface này, không phụ thuộc trực tiếp DB cụ thể.
    Vi phạm mã nhân viên trùng được báo bằng ConflictError.
    """

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def create(self, draft: EmployeeDraft) -> int:
        raise NotImplementedError

    def update(self, employee_id: int, draft: EmployeeDraft) -> bool:
        raise NotImplementedError

    def delete_by_id(self, employee_id: int) -> bool:
        raise NotImplementedError

    def set_avatar_url(self, employee_id: int, avatar_url: str) -> bool:
        raise NotImplementedError

    def statistics(self) -> EmployeeStatistics:
        raise NotImplementedError
