from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.constants import DEFAULT_LAST_LOGIN


@dataclass(frozen=True)
class UserAccount:
    """Thực thể miền (domain): Tài khoản người dùng.

    Lưu ý: Đây là đối tượng dữ liệu thuần (không chứa code truy cập DB).
    Mật khẩu chỉ lưu dưới dạng hash và không bao giờ trả ra API.
    """

    username: str
    full_name: str
    role: str
    employee_code: str = ""
    password_hash: Optional[str] = None
    active: bool = True
    last_login: str = DEFAULT_LAST_LOGIN
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "username": self.username,
            "fullName": self.full_name,
            "role": self.role,
            "employeeCode": self.employee_code,
            "active": self.active,
            "lastLogin": self.last_login,
            "createdAt": self.created_at.strftime("%Y-%m-%d %H:%M:%S") if self.created_at else None,
        }
