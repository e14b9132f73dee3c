"""Schema bootstrap: versioned migrations and demo seed.

Migrations live in ``database/migrations/NNNN_name.sql`` and are applied in
version order. Applied versions are recorded in ``schema_migrations``.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

import mysql.connector

from .connection import DBConfig

logger = logging.getLogger(__name__)

_MIGRATION_NAME = re.compile(r"^(\d{4})_[A-Za-z0-9_]+\.sql$")


@dataclass(frozen=True)
class Migration:
    version: int
    path: Path

    @property
    def name(self) -> str:
        return self.path.stem


def _strip_create_db_and_use(sql: str) -> str:
    # Keep SQL files compatible regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _strip_line_comments(sql: str) -> str:
    return "\n".join(line for line in sql.splitlines() if not line.lstrip().startswith("--"))


def iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for migration/seed files (handles ';' inside quotes).
    buf: list[str] = []
    in_single = False
    in_double = False
    escape = False

    for ch in sql:
        if escape:
            buf.append(ch)
            escape = False
            continue

        if ch == "\\":
            buf.append(ch)
            escape = True
            continue

        if ch == "'" and not in_double:
            in_single = not in_single
            buf.append(ch)
            continue

        if ch == '"' and not in_single:
            in_double = not in_double
            buf.append(ch)
            continue

        if ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue

        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def discover_migrations(migrations_dir: str | Path) -> list[Migration]:
    found: list[Migration] = []
    for path in Path(migrations_dir).glob("*.sql"):
        m = _MIGRATION_NAME.match(path.name)
        if not m:
            logger.warning("Skipping file with unexpected migration name: %s", path.name)
            continue
        found.append(Migration(version=int(m.group(1)), path=path))

    found.sort(key=lambda mig: mig.version)
    versions = [mig.version for mig in found]
    if len(versions) != len(set(versions)):
        raise RuntimeError(f"Duplicate migration versions in {migrations_dir}")
    return found


def _connect(target: DBConfig, *, with_database: bool = True):
    kwargs = dict(host=target.host, port=target.port, user=target.user, password=target.password, use_pure=True)
    if with_database:
        kwargs["database"] = target.database
    return mysql.connector.connect(**kwargs)


def _exec_sql(cur, sql: str) -> None:
    for stmt in iter_sql_statements(_strip_line_comments(_strip_create_db_and_use(sql))):
        cur.execute(stmt)


def ensure_database_exists(db_config: dict) -> None:
    target = DBConfig.from_dict(db_config)
    conn = _connect(target, with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def apply_migrations(db_config: dict, *, migrations_dir: str | Path) -> list[str]:
    """Apply pending migrations; return the names applied in this run."""
    target = DBConfig.from_dict(db_config)
    ensure_database_exists(db_config)

    conn = _connect(target)
    applied_now: list[str] = []
    try:
        cur = conn.cursor()
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS schema_migrations (
                version INT PRIMARY KEY,
                name VARCHAR(255) NOT NULL,
                applied_at DATETIME NOT NULL DEFAULT CURRENT_TIMESTAMP
            )
            """
        )
        conn.commit()

        cur.execute("SELECT version FROM schema_migrations")
        done = {int(row[0]) for row in cur.fetchall()}

        for mig in discover_migrations(migrations_dir):
            if mig.version in done:
                continue
            logger.info("Applying migration %s", mig.name)
            _exec_sql(cur, mig.path.read_text(encoding="utf-8"))
            cur.execute(
                "INSERT INTO schema_migrations(version, name) VALUES(%s, %s)",
                (mig.version, mig.name),
            )
            conn.commit()
            applied_now.append(mig.name)
    finally:
        conn.close()

    return applied_now


def apply_seed_sql(db_config: dict, *, seed_path: str | Path) -> None:
    target = DBConfig.from_dict(db_config)
    seed_path = Path(seed_path)

    conn = _connect(target)
    try:
        cur = conn.cursor()
        _exec_sql(cur, seed_path.read_text(encoding="utf-8"))
        conn.commit()
    finally:
        conn.close()


def list_tables(db_config: dict) -> list[str]:
    target = DBConfig.from_dict(db_config)
    conn = _connect(target)
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
