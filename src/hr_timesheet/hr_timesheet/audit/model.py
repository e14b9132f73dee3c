from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AuditLogEntry:
    """Một dòng nhật ký thao tác: ai (actor) làm gì (action) lúc nào (time)."""

    log_id: int
    time: str
    actor: str
    action: str

    def to_dict(self) -> dict:
        return {"id": self.log_id, "time": self.time, "actor": self.actor, "action": self.action}
