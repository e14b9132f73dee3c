from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, Sequence

from ..common.datetime_utils import format_log_time, now_local
from ..common.validators import require_params
from ..core.constants import DEFAULT_LOG_LIMIT
from .model import AuditLogEntry
from .repository import AuditLogRepository


class AuditLogService:
    def __init__(self, logs: AuditLogRepository, *, clock: Callable[[], datetime] = now_local):
        self._logs = logs
        self._clock = clock

    def latest(self, limit: int = DEFAULT_LOG_LIMIT) -> Sequence[AuditLogEntry]:
        return self._logs.list_latest(limit)

    def record(self, actor: Any, action: Any) -> AuditLogEntry:
        require_params("Thiếu actor/action", actor, action)
        time_s = format_log_time(self._clock())
        log_id = self._logs.add(time=time_s, actor=str(actor), action=str(action))
        return AuditLogEntry(log_id=log_id, time=time_s, actor=str(actor), action=str(action))
