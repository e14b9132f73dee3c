from __future__ import annotations

from typing import Protocol, Sequence

from .model import AuditLogEntry


class AuditLogRepository(Protocol):
    def list_latest(self, limit: int) -> Sequence[AuditLogEntry]:
        """Newest entries first."""

        raise NotImplementedError

    def add(self, *, time: str, actor: str, action: str) -> int:
        raise NotImplementedError
