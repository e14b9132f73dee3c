from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

from werkzeug.datastructures import FileStorage

from ..common.validators import optional_number, optional_text, require_non_empty, require_params
from ..core.exceptions import ConflictError, NotFoundError
from ..storage.avatar_storage import AvatarStorage
from .department_model import Department
from .department_repository import DepartmentRepository
from .model import Employee, EmployeeDraft, EmployeeStatistics
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: quản lý hồ sơ nhân viên."""

    def __init__(self, employees: EmployeeRepository, avatars: AvatarStorage):
        self._employees = employees
        self._avatars = avatars

    def list_all(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def get(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise NotFoundError("Không tìm thấy nhân viên")
        return employee

    def create(self, payload: Mapping[str, Any]) -> Employee:
        draft = self._to_draft(payload)
        try:
            employee_id = self._employees.create(draft)
        except ConflictError:
            raise ConflictError("Mã nhân viên đã tồn tại")
        logger.info("Created employee %s (id=%s)", draft.ma_nv, employee_id)
        return self.get(employee_id)

    def update(self, employee_id: int, payload: Mapping[str, Any]) -> None:
        draft = self._to_draft(payload)
        try:
            found = self._employees.update(int(employee_id), draft)
        except ConflictError:
            raise ConflictError("Mã nhân viên đã tồn tại")
        if not found:
            raise NotFoundError("Không tìm thấy nhân viên")

    def delete(self, employee_id: int) -> None:
        if not self._employees.delete_by_id(int(employee_id)):
            raise NotFoundError("Không tìm thấy nhân viên")
        logger.info("Deleted employee id=%s", employee_id)

    def set_avatar(self, employee_id: int, upload: Optional[FileStorage]) -> str:
        self.get(employee_id)
        avatar_url = self._avatars.save(upload)
        if not self._employees.set_avatar_url(int(employee_id), avatar_url):
            self._avatars.delete(avatar_url)
            raise NotFoundError("Không tìm thấy nhân viên")
        return avatar_url

    def statistics(self) -> EmployeeStatistics:
        return self._employees.statistics()

    def _to_draft(self, payload: Mapping[str, Any]) -> EmployeeDraft:
        require_params("Mã nhân viên và Họ tên là bắt buộc", payload.get("maNv"), payload.get("hoTen"))
        return EmployeeDraft(
            ma_nv=require_non_empty(payload.get("maNv"), "Mã nhân viên"),
            ho_ten=require_non_empty(payload.get("hoTen"), "Họ tên"),
            chuc_danh=optional_text(payload.get("chucDanh")),
            ngay_sinh=optional_text(payload.get("ngaySinh")),
            gioi_tinh=optional_text(payload.get("gioiTinh")),
            he_so_luong=optional_number(payload.get("heSoLuong"), "Hệ số lương"),
            email=optional_text(payload.get("email")),
            so_dien_thoai=optional_text(payload.get("soDienThoai")),
            trang_thai=optional_text(payload.get("trangThai")),
            ma_pb=(optional_text(payload.get("maPb")) or "").upper() or None,
        )


class DepartmentService:
    """Use case: quản lý phòng ban."""

    def __init__(self, departments: DepartmentRepository):
        self._departments = departments

    def list_all(self) -> Sequence[Department]:
        return self._departments.list_all()

    def get(self, dept_id: int) -> Department:
        dept = self._departments.get_by_id(int(dept_id))
        if not dept:
            raise NotFoundError("Không tìm thấy phòng ban")
        return dept

    def create(self, payload: Mapping[str, Any]) -> Department:
        fields = self._clean(payload)
        try:
            dept_id = self._departments.create(**fields)
        except ConflictError:
            raise ConflictError("Mã phòng ban đã tồn tại")
        logger.info("Created department %s (id=%s)", fields["ma_pb"], dept_id)
        return Department(dept_id=dept_id, **fields)

    def update(self, dept_id: int, payload: Mapping[str, Any]) -> None:
        fields = self._clean(payload)
        try:
            found = self._departments.update(int(dept_id), **fields)
        except ConflictError:
            raise ConflictError("Mã phòng ban đã tồn tại")
        if not found:
            raise NotFoundError("Không tìm thấy phòng ban")

    def delete(self, dept_id: int) -> None:
        if not self._departments.delete_by_id(int(dept_id)):
            raise NotFoundError("Không tìm thấy phòng ban")

    @staticmethod
    def _clean(payload: Mapping[str, Any]) -> dict:
        require_params("Mã phòng ban và Tên phòng ban là bắt buộc", payload.get("maPb"), payload.get("tenPb"))
        return {
            "ma_pb": str(payload["maPb"]).strip().upper(),
            "ten_pb": str(payload["tenPb"]).strip(),
            "mo_ta_pb": str(payload.get("moTaPb") or "").strip(),
        }
