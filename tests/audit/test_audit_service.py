from __future__ import annotations

from datetime import datetime

import pytest

from src.hr_timesheet.hr_timesheet.audit.model import AuditLogEntry
from src.hr_timesheet.hr_timesheet.audit.service import AuditLogService
from src.hr_timesheet.hr_timesheet.core.exceptions import ValidationError


class InMemoryLogs:
    def __init__(self):
        self.entries: list[AuditLogEntry] = []

    def list_latest(self, limit: int):
        return sorted(self.entries, key=lambda e: e.log_id, reverse=True)[:limit]

    def add(self, *, time: str, actor: str, action: str) -> int:
        log_id = len(self.entries) + 1
        self.entries.append(AuditLogEntry(log_id=log_id, time=time, actor=actor, action=action))
        return log_id


def test_record_stamps_local_minute_time():
    repo = InMemoryLogs()
    svc = AuditLogService(repo, clock=lambda: datetime(2026, 1, 5, 14, 7, 33))

    entry = svc.record("admin", "Thêm nhân viên NV003")

    assert entry.to_dict() == {"id": 1, "time": "2026-01-05 14:07", "actor": "admin", "action": "Thêm nhân viên NV003"}


def test_latest_is_newest_first_and_limited():
    repo = InMemoryLogs()
    svc = AuditLogService(repo, clock=lambda: datetime(2026, 1, 5, 14, 7))
    for i in range(60):
        svc.record("admin", f"action {i}")

    latest = svc.latest()

    assert len(latest) == 50
    assert latest[0].action == "action 59"


@pytest.mark.parametrize("actor,action", [("", "x"), ("admin", None)])
def test_record_requires_actor_and_action(actor, action):
    with pytest.raises(ValidationError, match="Thiếu actor/action"):
        AuditLogService(InMemoryLogs()).record(actor, action)
