"""Database maintenance for the HR backend.

    python scripts/manage_db.py migrate        # apply pending migrations
    python scripts/manage_db.py seed           # migrate, then load demo rows
    python scripts/manage_db.py tables         # list tables in the target DB

The target database comes from the active settings module (APP_ENV).
"""
from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

_ROOT = Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from dotenv import load_dotenv

from config import get_settings_module
from src.hr_timesheet.hr_timesheet.database.bootstrap import apply_migrations, apply_seed_sql, list_tables
from src.hr_timesheet.hr_timesheet.database.connection import DBConfig
from src.hr_timesheet.hr_timesheet.logging_config import setup_logging

MIGRATIONS_DIR = _ROOT / "database" / "migrations"
SEED_PATH = _ROOT / "database" / "seed.sql"


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Migrate or seed the HR database")
    p.add_argument("command", choices=("migrate", "seed", "tables"))
    p.add_argument("--settings", default=None, help="settings module, e.g. config.testing")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    load_dotenv(override=False)
    args = _parse_args(argv)
    settings = importlib.import_module(args.settings or get_settings_module())
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    db_config = dict(settings.DB_CONFIG)
    target = DBConfig.from_dict(db_config).describe()

    if args.command == "tables":
        for name in list_tables(db_config):
            print(name)
        return 0

    applied = apply_migrations(db_config, migrations_dir=MIGRATIONS_DIR)
    print(f"OK: {len(applied)} migration(s) applied on {target}: {', '.join(applied) or 'none pending'}")

    if args.command == "seed":
        apply_seed_sql(db_config, seed_path=SEED_PATH)
        print(f"OK: demo data loaded into {target}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
