from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .department_model import Department


class DepartmentRepository(Protocol):
    def list_all(self) -> Sequence[Department]:
        """All departments with their employee counts, ordered by code."""

        raise NotImplementedError

    def get_by_id(self, dept_id: int) -> Optional[Department]:
        raise NotImplementedError

    def create(self, *, ma_pb: str, ten_pb: str, mo_ta_pb: str) -> int:
        raise NotImplementedError

    def update(self, dept_id: int, *, ma_pb: str, ten_pb: str, mo_ta_pb: str) -> bool:
        raise NotImplementedError

    def delete_by_id(self, dept_id: int) -> bool:
        raise NotImplementedError
