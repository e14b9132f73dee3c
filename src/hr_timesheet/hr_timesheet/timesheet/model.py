from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..core.constants import (
    HOURS_BALANCE_PLACEHOLDER,
    LEAVE_AVAILABLE_PLACEHOLDER,
    LEAVE_USED_PLACEHOLDER,
    STANDARD_HOURS_QUOTA,
    UNSET_MARKER,
)
from .calculator.base import Hours


def format_hours(value: Hours) -> str:
    """Render hours with a decimal comma: 9 -> "9", 7.5 -> "7,5"."""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).replace(".", ",")


@dataclass(frozen=True)
class TimesheetDay:
    """Một dòng của bảng công (read-model, không lưu CSDL).

    Các cột danh mục (tăng ca, trực, ca 3, BHXH, nghỉ có/không lương, phép)
    chưa được tính và luôn là dấu "-".
    """

    time: str
    ccc: Optional[Hours] = None
    note: str = ""
    ot: str = UNSET_MARKER
    truc: str = UNSET_MARKER
    ca3: str = UNSET_MARKER
    bhxh: str = UNSET_MARKER
    hl: str = UNSET_MARKER
    khl: str = UNSET_MARKER
    phep: str = UNSET_MARKER

    def to_dict(self) -> dict:
        return {
            "time": self.time,
            "ot": self.ot,
            "truc": self.truc,
            "ca3": self.ca3,
            "bhxh": self.bhxh,
            "hl": self.hl,
            "khl": self.khl,
            "phep": self.phep,
            "ccc": self.ccc if self.ccc is not None else UNSET_MARKER,
            "note": self.note,
        }


@dataclass(frozen=True)
class TimesheetCards:
    total_hours: Hours
    standard_hours: str = STANDARD_HOURS_QUOTA
    hours_balance: str = HOURS_BALANCE_PLACEHOLDER
    leave_available: str = LEAVE_AVAILABLE_PLACEHOLDER
    leave_used: str = LEAVE_USED_PLACEHOLDER

    def to_dict(self) -> dict:
        return {
            "tongCong": format_hours(self.total_hours),
            "congChuan": self.standard_hours,
            "congTon": self.hours_balance,
            "phepKhaDung": self.leave_available,
            "phepDaDung": self.leave_used,
        }


@dataclass(frozen=True)
class TimesheetSummary:
    cards: TimesheetCards
    total_row: TimesheetDay
    days: list[TimesheetDay] = field(default_factory=list)

    @property
    def rows(self) -> list[TimesheetDay]:
        """Total row first, then one row per calendar date."""
        return [self.total_row, *self.days]

    def to_dict(self) -> dict:
        return {
            "cards": self.cards.to_dict(),
            "rows": [r.to_dict() for r in self.rows],
        }
