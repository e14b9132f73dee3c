from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Department:
    dept_id: int
    ma_pb: str
    ten_pb: str
    mo_ta_pb: str = ""
    created_at: Optional[datetime] = None
    employee_count: Optional[int] = None

    def to_dict(self) -> dict:
        data = {
            "id": self.dept_id,
            "maPb": self.ma_pb,
            "tenPb": self.ten_pb,
            "moTaPb": self.mo_ta_pb,
            "createdAt": self.created_at.strftime("%Y-%m-%d %H:%M:%S") if self.created_at else None,
        }
        if self.employee_count is not None:
            data["soLuongNhanSu"] = self.employee_count
        return data
