from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_text, db_cursor, fetchall, fetchone
from .department_model import Department
from .department_repository import DepartmentRepository


def _to_department(r: dict) -> Department:
    count = r.get("employee_count")
    return Department(
        dept_id=int(r["id"]),
        ma_pb=as_text(r["ma_pb"]),
        ten_pb=as_text(r["ten_pb"]),
        mo_ta_pb=as_text(r.get("mo_ta_pb")) or "",
        created_at=r.get("created_at"),
        employee_count=int(count) if count is not None else None,
    )


class MySQLDepartmentRepository(DepartmentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Department]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT
                    d.id, d.ma_pb, d.ten_pb, d.mo_ta_pb, d.created_at,
                    (SELECT COUNT(*) FROM employees e WHERE e.ma_pb = d.ma_pb) AS employee_count
                FROM departments d
                ORDER BY d.ma_pb ASC
                """
            )
            return [_to_department(r) for r in fetchall(cur)]

    def get_by_id(self, dept_id: int) -> Optional[Department]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT id, ma_pb, ten_pb, mo_ta_pb, created_at FROM departments WHERE id=%s",
                (int(dept_id),),
            )
            r = fetchone(cur)
            return _to_department(r) if r else None

    def create(self, *, ma_pb: str, ten_pb: str, mo_ta_pb: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO departments(ma_pb, ten_pb, mo_ta_pb) VALUES(%s, %s, %s)",
                (ma_pb, ten_pb, mo_ta_pb),
            )
            return int(cur.lastrowid)

    def update(self, dept_id: int, *, ma_pb: str, ten_pb: str, mo_ta_pb: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE departments SET ma_pb=%s, ten_pb=%s, mo_ta_pb=%s WHERE id=%s",
                (ma_pb, ten_pb, mo_ta_pb, int(dept_id)),
            )
            return cur.rowcount > 0

    def delete_by_id(self, dept_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM departments WHERE id=%s", (int(dept_id),))
            return cur.rowcount > 0
