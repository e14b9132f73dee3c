from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


def _ts(value: Optional[datetime]) -> Optional[str]:
    return value.strftime("%Y-%m-%d %H:%M:%S") if value else None


@dataclass(frozen=True)
class EmployeeDraft:
    """Dữ liệu hồ sơ nhân viên gửi lên khi thêm/sửa."""

    ma_nv: str
    ho_ten: str
    chuc_danh: Optional[str] = None
    ngay_sinh: Optional[str] = None
    gioi_tinh: Optional[str] = None
    he_so_luong: Optional[float] = None
    email: Optional[str] = None
    so_dien_thoai: Optional[str] = None
    trang_thai: Optional[str] = None
    ma_pb: Optional[str] = None


@dataclass(frozen=True)
class Employee:
    """Thực thể miền (domain): Nhân viên.

    Lưu ý: `ma_nv` là mã tự nhiên (VD: NV001), khác với id lưu trữ.
    """

    employee_id: int
    ma_nv: str
    ho_ten: str
    chuc_danh: Optional[str] = None
    ngay_sinh: Optional[str] = None
    gioi_tinh: Optional[str] = None
    he_so_luong: Optional[float] = None
    email: Optional[str] = None
    so_dien_thoai: Optional[str] = None
    avatar_url: Optional[str] = None
    trang_thai: Optional[str] = None
    ma_pb: Optional[str] = None
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.employee_id,
            "maNv": self.ma_nv,
            "hoTen": self.ho_ten,
            "chucDanh": self.chuc_danh,
            "ngaySinh": self.ngay_sinh,
            "gioiTinh": self.gioi_tinh,
            "heSoLuong": self.he_so_luong,
            "email": self.email,
            "soDienThoai": self.so_dien_thoai,
            "avatarUrl": self.avatar_url,
            "trangThai": self.trang_thai,
            "maPb": self.ma_pb,
            "createdAt": _ts(self.created_at),
        }


@dataclass(frozen=True)
class EmployeeStatistics:
    total: int
    male: int
    female: int
    no_salary: int

    def to_dict(self) -> dict:
        return {"total": self.total, "male": self.male, "female": self.female, "noSalary": self.no_salary}
