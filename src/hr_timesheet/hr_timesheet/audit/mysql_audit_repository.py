from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_text, db_cursor, fetchall
from .model import AuditLogEntry
from .repository import AuditLogRepository


class MySQLAuditLogRepository(AuditLogRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_latest(self, limit: int) -> Sequence[AuditLogEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, time, actor, action FROM logs ORDER BY id DESC LIMIT %s", (int(limit),))
            return [
                AuditLogEntry(
                    log_id=int(r["id"]),
                    time=as_text(r["time"]),
                    actor=as_text(r["actor"]),
                    action=as_text(r["action"]),
                )
                for r in fetchall(cur)
            ]

    def add(self, *, time: str, actor: str, action: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("INSERT INTO logs(time, actor, action) VALUES(%s, %s, %s)", (time, actor, action))
            return int(cur.lastrowid)
