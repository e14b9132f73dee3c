from __future__ import annotations

from datetime import date
from typing import Any, Optional

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} không hợp lệ")
    return str(value).strip()


def require_params(message: str, *values: Any) -> None:
    """Raise one ValidationError listing the whole parameter group when any is missing."""
    if any(v is None or not str(v).strip() for v in values):
        raise ValidationError(message)


def require_iso_date(value: Any, field_name: str) -> date:
    if isinstance(value, date):
        return value
    text = require_non_empty(value, field_name)
    try:
        return parse_iso_date(text)
    except ValueError:
        raise ValidationError(f"{field_name} phải có dạng YYYY-MM-DD")


def optional_text(value: Any) -> Optional[str]:
    """Empty values are stored as NULL."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def optional_number(value: Any, field_name: str) -> Optional[float]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} phải là số")
