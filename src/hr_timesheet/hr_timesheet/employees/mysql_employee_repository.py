from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Gender
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_text, db_cursor, fetchall, fetchone
from .model import Employee, EmployeeDraft, EmployeeStatistics
from .repository import EmployeeRepository

_COLUMNS = """
    id, ma_nv, ho_ten, chuc_danh, ngay_sinh, gioi_tinh, he_so_luong,
    email, so_dien_thoai, avatar_url, trang_thai, ma_pb, created_at
"""


def _to_employee(r: dict) -> Employee:
    salary = r.get("he_so_luong")
    return Employee(
        employee_id=int(r["id"]),
        ma_nv=as_text(r["ma_nv"]),
        ho_ten=as_text(r["ho_ten"]),
        chuc_danh=as_text(r.get("chuc_danh")),
        ngay_sinh=as_text(r.get("ngay_sinh")),
        gioi_tinh=as_text(r.get("gioi_tinh")),
        he_so_luong=float(salary) if salary is not None else None,
        email=as_text(r.get("email")),
        so_dien_thoai=as_text(r.get("so_dien_thoai")),
        avatar_url=as_text(r.get("avatar_url")),
        trang_thai=as_text(r.get("trang_thai")),
        ma_pb=as_text(r.get("ma_pb")),
        created_at=r.get("created_at"),
    )


def _draft_params(d: EmployeeDraft) -> tuple:
    return (
        d.ma_nv,
        d.ho_ten,
        d.chuc_danh,
        d.ngay_sinh,
        d.gioi_tinh,
        d.he_so_luong,
        d.email,
        d.so_dien_thoai,
        d.trang_thai,
        d.ma_pb,
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            # NV001, NV002, ... NV010 sorted by their numeric part
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM employees
                ORDER BY CAST(REPLACE(ma_nv, 'NV', '') AS UNSIGNED) ASC, ma_nv ASC
                """
            )
            return [_to_employee(r) for r in fetchall(cur)]

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE id=%s", (int(employee_id),))
            r = fetchone(cur)
            return _to_employee(r) if r else None

    def create(self, draft: EmployeeDraft) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees
                    (ma_nv, ho_ten, chuc_danh, ngay_sinh, gioi_tinh, he_so_luong,
                     email, so_dien_thoai, trang_thai, ma_pb)
                VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s)
                """,
                _draft_params(draft),
            )
            return int(cur.lastrowid)

    def update(self, employee_id: int, draft: EmployeeDraft) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE employees
                SET ma_nv=%s, ho_ten=%s, chuc_danh=%s, ngay_sinh=%s, gioi_tinh=%s, he_so_luong=%s,
                    email=%s, so_dien_thoai=%s, trang_thai=%s, ma_pb=%s
                WHERE id=%s
                """,
                (*_draft_params(draft), int(employee_id)),
            )
            return cur.rowcount > 0

    def delete_by_id(self, employee_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE id=%s", (int(employee_id),))
            return cur.rowcount > 0

    def set_avatar_url(self, employee_id: int, avatar_url: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE employees SET avatar_url=%s WHERE id=%s", (avatar_url, int(employee_id)))
            return cur.rowcount > 0

    def statistics(self) -> EmployeeStatistics:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT
                    COUNT(*) AS total,
                    COALESCE(SUM(gioi_tinh = %s), 0) AS male,
                    COALESCE(SUM(gioi_tinh = %s), 0) AS female,
                    COALESCE(SUM(he_so_luong IS NULL), 0) AS no_salary
                FROM employees
                """,
                (Gender.MALE.value, Gender.FEMALE.value),
            )
            r = fetchone(cur) or {}
            return EmployeeStatistics(
                total=int(r.get("total") or 0),
                male=int(r.get("male") or 0),
                female=int(r.get("female") or 0),
                no_salary=int(r.get("no_salary") or 0),
            )
