from __future__ import annotations

from dataclasses import replace
from typing import Optional

import pytest

from src.hr_timesheet.hr_timesheet.core.exceptions import ConflictError, NotFoundError, ValidationError
from src.hr_timesheet.hr_timesheet.employees.department_model import Department
from src.hr_timesheet.hr_timesheet.employees.model import Employee, EmployeeDraft, EmployeeStatistics
from src.hr_timesheet.hr_timesheet.employees.service import DepartmentService, EmployeeService


class InMemoryEmployees:
    def __init__(self):
        self.by_id: dict[int, Employee] = {}
        self._id = 0

    def _code_taken(self, ma_nv: str, *, except_id: Optional[int] = None) -> bool:
        return any(e.ma_nv == ma_nv and e.employee_id != except_id for e in self.by_id.values())

    def list_all(self):
        return sorted(self.by_id.values(), key=lambda e: int(e.ma_nv.replace("NV", "") or 0))

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self.by_id.get(employee_id)

    def create(self, draft: EmployeeDraft) -> int:
        if self._code_taken(draft.ma_nv):
            raise ConflictError("Duplicate entry for key 'uq_employees_ma_nv'")
        self._id += 1
        self.by_id[self._id] = Employee(employee_id=self._id, **draft.__dict__)
        return self._id

    def update(self, employee_id: int, draft: EmployeeDraft) -> bool:
        current = self.by_id.get(employee_id)
        if not current:
            return False
        if self._code_taken(draft.ma_nv, except_id=employee_id):
            raise ConflictError("Duplicate entry for key 'uq_employees_ma_nv'")
        self.by_id[employee_id] = replace(current, **draft.__dict__)
        return True

    def delete_by_id(self, employee_id: int) -> bool:
        return self.by_id.pop(employee_id, None) is not None

    def set_avatar_url(self, employee_id: int, avatar_url: str) -> bool:
        current = self.by_id.get(employee_id)
        if not current:
            return False
        self.by_id[employee_id] = replace(current, avatar_url=avatar_url)
        return True

    def statistics(self) -> EmployeeStatistics:
        items = list(self.by_id.values())
        return EmployeeStatistics(
            total=len(items),
            male=sum(1 for e in items if e.gioi_tinh == "Nam"),
            female=sum(1 for e in items if e.gioi_tinh == "Nữ"),
            no_salary=sum(1 for e in items if e.he_so_luong is None),
        )


class FakeAvatars:
    def __init__(self):
        self.saved: list[object] = []
        self.deleted: list[str] = []

    def save(self, upload) -> str:
        if upload is None:
            raise ValidationError("Không có file ảnh")
        self.saved.append(upload)
        return f"/uploads/avatar_{len(self.saved)}.png"

    def delete(self, url: str) -> None:
        self.deleted.append(url)


@pytest.fixture()
def employees():
    return InMemoryEmployees()


@pytest.fixture()
def avatars():
    return FakeAvatars()


@pytest.fixture()
def svc(employees, avatars):
    return EmployeeService(employees, avatars)


def test_create_normalizes_fields(svc):
    emp = svc.create({"maNv": " NV001 ", "hoTen": "Nguyễn Văn A", "heSoLuong": "2.34", "maPb": "it", "email": ""})

    assert emp.ma_nv == "NV001"
    assert emp.he_so_luong == pytest.approx(2.34)
    assert emp.ma_pb == "IT"
    assert emp.email is None


@pytest.mark.parametrize("payload", [{"maNv": "NV001"}, {"hoTen": "A"}, {"maNv": "NV001", "hoTen": "A", "heSoLuong": "abc"}])
def test_create_rejects_invalid_payload(svc, payload):
    with pytest.raises(ValidationError):
        svc.create(payload)


def test_duplicate_employee_code_is_a_conflict(svc):
    svc.create({"maNv": "NV001", "hoTen": "A"})
    with pytest.raises(ConflictError, match="Mã nhân viên đã tồn tại"):
        svc.create({"maNv": "NV001", "hoTen": "B"})


def test_update_and_delete_unknown_employee(svc):
    with pytest.raises(NotFoundError):
        svc.update(42, {"maNv": "NV042", "hoTen": "X"})
    with pytest.raises(NotFoundError):
        svc.delete(42)
    with pytest.raises(NotFoundError):
        svc.get(42)


def test_update_replaces_profile(svc):
    emp = svc.create({"maNv": "NV001", "hoTen": "A", "gioiTinh": "Nam"})
    svc.update(emp.employee_id, {"maNv": "NV001", "hoTen": "A2", "gioiTinh": "Nữ"})

    updated = svc.get(emp.employee_id)
    assert updated.ho_ten == "A2"
    assert updated.gioi_tinh == "Nữ"


def test_set_avatar_stores_file_and_url(svc, avatars):
    emp = svc.create({"maNv": "NV001", "hoTen": "A"})

    url = svc.set_avatar(emp.employee_id, object())

    assert url == "/uploads/avatar_1.png"
    assert svc.get(emp.employee_id).avatar_url == url


def test_set_avatar_for_unknown_employee_stores_nothing(svc, avatars):
    with pytest.raises(NotFoundError):
        svc.set_avatar(99, object())
    assert avatars.saved == []


def test_statistics(svc):
    svc.create({"maNv": "NV001", "hoTen": "A", "gioiTinh": "Nam", "heSoLuong": 2.0})
    svc.create({"maNv": "NV002", "hoTen": "B", "gioiTinh": "Nữ"})
    svc.create({"maNv": "NV003", "hoTen": "C", "gioiTinh": "Nam"})

    assert svc.statistics().to_dict() == {"total": 3, "male": 2, "female": 1, "noSalary": 2}


class InMemoryDepartments:
    def __init__(self):
        self.by_id: dict[int, Department] = {}
        self._id = 0

    def list_all(self):
        return sorted(self.by_id.values(), key=lambda d: d.ma_pb)

    def get_by_id(self, dept_id: int):
        return self.by_id.get(dept_id)

    def create(self, *, ma_pb: str, ten_pb: str, mo_ta_pb: str) -> int:
        if any(d.ma_pb == ma_pb for d in self.by_id.values()):
            raise ConflictError("Duplicate entry")
        self._id += 1
        self.by_id[self._id] = Department(dept_id=self._id, ma_pb=ma_pb, ten_pb=ten_pb, mo_ta_pb=mo_ta_pb)
        return self._id

    def update(self, dept_id: int, *, ma_pb: str, ten_pb: str, mo_ta_pb: str) -> bool:
        if dept_id not in self.by_id:
            return False
        self.by_id[dept_id] = Department(dept_id=dept_id, ma_pb=ma_pb, ten_pb=ten_pb, mo_ta_pb=mo_ta_pb)
        return True

    def delete_by_id(self, dept_id: int) -> bool:
        return self.by_id.pop(dept_id, None) is not None


def test_department_code_is_trimmed_and_uppercased():
    svc = DepartmentService(InMemoryDepartments())

    dept = svc.create({"maPb": " hcns ", "tenPb": " Hành chính nhân sự "})

    assert dept.ma_pb == "HCNS"
    assert dept.ten_pb == "Hành chính nhân sự"
    assert dept.mo_ta_pb == ""
    assert svc.get(dept.dept_id).to_dict()["maPb"] == "HCNS"


def test_department_rules():
    svc = DepartmentService(InMemoryDepartments())
    svc.create({"maPb": "IT", "tenPb": "CNTT"})

    with pytest.raises(ConflictError, match="Mã phòng ban đã tồn tại"):
        svc.create({"maPb": "it", "tenPb": "Khác"})
    with pytest.raises(ValidationError):
        svc.create({"maPb": "KD"})
    with pytest.raises(NotFoundError):
        svc.update(5, {"maPb": "KD", "tenPb": "Kinh doanh"})
    with pytest.raises(NotFoundError):
        svc.delete(5)
