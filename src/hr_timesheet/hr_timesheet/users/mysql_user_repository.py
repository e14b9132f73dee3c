from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import DEFAULT_LAST_LOGIN
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_text, db_cursor, fetchall, fetchone
from .model import UserAccount
from .repository import UserRepository

_COLUMNS = "username, full_name, role, employee_code, password_hash, active, last_login, created_at"


def _to_user(row: dict) -> UserAccount:
    return UserAccount(
        username=as_text(row["username"]),
        full_name=as_text(row["full_name"]),
        role=as_text(row["role"]),
        employee_code=as_text(row.get("employee_code")) or "",
        password_hash=as_text(row.get("password_hash")),
        active=bool(row.get("active", True)),
        last_login=as_text(row.get("last_login")) or DEFAULT_LAST_LOGIN,
        created_at=row.get("created_at"),
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[UserAccount]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users ORDER BY username ASC")
            return [_to_user(r) for r in fetchall(cur)]

    def get_by_username(self, username: str) -> Optional[UserAccount]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE username=%s", (username,))
            row = fetchone(cur)
            return _to_user(row) if row else None

    def create(self, account: UserAccount) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO users (username, full_name, role, employee_code, password_hash, active, last_login)
                VALUES (%s, %s, %s, %s, %s, %s, %s)
                """,
                (
                    account.username,
                    account.full_name,
                    account.role,
                    account.employee_code,
                    account.password_hash,
                    1 if account.active else 0,
                    account.last_login,
                ),
            )

    def update_profile(self, username: str, *, full_name: str, role: str, employee_code: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE users SET full_name=%s, role=%s, employee_code=%s WHERE username=%s",
                (full_name, role, employee_code, username),
            )
            return cur.rowcount > 0

    def set_active(self, username: str, *, active: bool) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE users SET active=%s WHERE username=%s", (1 if active else 0, username))
            return cur.rowcount > 0

    def set_password_hash(self, username: str, password_hash: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE users SET password_hash=%s WHERE username=%s", (password_hash, username))
            return cur.rowcount > 0

    def delete(self, username: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM users WHERE username=%s", (username,))
            return cur.rowcount > 0
