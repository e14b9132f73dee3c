from __future__ import annotations

from enum import Enum


class ExplainStatus(str, Enum):
    """Trạng thái giải trình chấm công lưu trong CSDL."""

    PENDING = "PENDING"
    EXPLAINED = "EXPLAINED"


class Gender(str, Enum):
    """Giá trị giới tính dùng cho thống kê nhân sự."""

    MALE = "Nam"
    FEMALE = "Nữ"
