from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import UserAccount


class UserRepository(Protocol):
    """Giao diện repository cho UserAccount (khoá: username).

    Lưu ý (DIP): tầng service phụ thuộc vào interface này, không phụ thuộc trực tiếp DB cụ thể.
    """

    def list_all(self) -> Sequence[UserAccount]:
        raise NotImplementedError

    def get_by_username(self, username: str) -> Optional[UserAccount]:
        raise NotImplementedError

    def create(self, account: UserAccount) -> None:
        raise NotImplementedError

    def update_profile(self, username: str, *, full_name: str, role: str, employee_code: str) -> bool:
        raise NotImplementedError

    def set_active(self, username: str, *, active: bool) -> bool:
        raise NotImplementedError

    def set_password_hash(self, username: str, password_hash: str) -> bool:
        raise NotImplementedError

    def delete(self, username: str) -> bool:
        raise NotImplementedError
