from __future__ import annotations

import atexit
import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, request
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .audit.controller import register as register_audit
from .common.http import fail
from .container import Container, build_container
from .core.constants import MAX_AVATAR_BYTES
from .database.bootstrap import apply_migrations, apply_seed_sql
from .employees.controller import register as register_employees
from .logging_config import setup_logging
from .timesheet.controller import register as register_timesheet
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

REPO_ROOT = Path(__file__).resolve().parents[3]
MIGRATIONS_DIR = REPO_ROOT / "database" / "migrations"
SEED_PATH = REPO_ROOT / "database" / "seed.sql"

# multipart framing on top of the avatar payload itself
_MULTIPART_OVERHEAD = 64 * 1024


def create_app(*, container: Optional[Container] = None, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, static_folder=None)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    max_avatar_bytes = int(getattr(settings, "MAX_AVATAR_BYTES", MAX_AVATAR_BYTES))
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["MAX_CONTENT_LENGTH"] = max_avatar_bytes + _MULTIPART_OVERHEAD
    app.json.ensure_ascii = False

    if container is None:
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

        if bool(getattr(settings, "AUTO_MIGRATE_DB", False)):
            applied = apply_migrations(db_config, migrations_dir=MIGRATIONS_DIR)
            logger.info("schema ready (applied=%s)", applied or "none")
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db_config, seed_path=SEED_PATH)
            logger.info("demo seed ready")

        container = build_container(
            db_config=db_config,
            upload_dir=getattr(settings, "UPLOAD_DIR"),
            max_avatar_bytes=max_avatar_bytes,
        )
        atexit.register(container.close)

    app.extensions["container"] = container

    register_attendance(app, container)
    register_timesheet(app, container)
    register_employees(app, container)
    register_users(app, container)
    register_audit(app, container)

    @app.errorhandler(HTTPException)
    def http_error(e: HTTPException):
        if not request.path.startswith("/api/"):
            return e
        if e.code == 413:
            return fail("File vượt quá dung lượng cho phép", 413)
        return fail(e.description or e.name, e.code or 500)

    return app
