from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from werkzeug.security import generate_password_hash

from ..common.validators import require_non_empty, require_params
from ..core.exceptions import ConflictError, NotFoundError
from .model import UserAccount
from .repository import UserRepository

logger = logging.getLogger(__name__)

_NOT_FOUND = "Không tìm thấy user"


class UserService:
    """Use case: manage user accounts (admin)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def list_all(self) -> Sequence[UserAccount]:
        return self._users.list_all()

    def create(self, payload: Mapping[str, Any]) -> UserAccount:
        require_params(
            "Username, Họ tên, Role là bắt buộc",
            payload.get("username"),
            payload.get("fullName"),
            payload.get("role"),
        )
        password = payload.get("password") or ""
        account = UserAccount(
            username=str(payload["username"]).strip(),
            full_name=str(payload["fullName"]).strip(),
            role=str(payload["role"]).strip(),
            employee_code=str(payload.get("employeeCode") or "").strip(),
            password_hash=generate_password_hash(str(password)) if password else None,
        )
        try:
            self._users.create(account)
        except ConflictError:
            raise ConflictError("Username đã tồn tại")
        logger.info("Created user %s", account.username)
        return account

    def update(self, username: str, payload: Mapping[str, Any]) -> None:
        username = require_non_empty(username, "Username")
        require_params("Họ tên và Role là bắt buộc", payload.get("fullName"), payload.get("role"))
        found = self._users.update_profile(
            username,
            full_name=str(payload["fullName"]).strip(),
            role=str(payload["role"]).strip(),
            employee_code=str(payload.get("employeeCode") or "").strip(),
        )
        if not found:
            raise NotFoundError(_NOT_FOUND)

    def set_active(self, username: str, active: Any) -> None:
        if not self._users.set_active(str(username).strip(), active=bool(active)):
            raise NotFoundError(_NOT_FOUND)
        logger.info("User %s active=%s", username, bool(active))

    def reset_password(self, username: str, new_password: Any) -> None:
        require_params("Thiếu newPassword", new_password)
        if not self._users.set_password_hash(str(username).strip(), generate_password_hash(str(new_password))):
            raise NotFoundError(_NOT_FOUND)

    def delete(self, username: str) -> None:
        if not self._users.delete(str(username).strip()):
            raise NotFoundError(_NOT_FOUND)
        logger.info("Deleted user %s", username)
