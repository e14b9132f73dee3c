import os
import tempfile

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "nhansu_test"),
}

UPLOAD_DIR = os.getenv("UPLOAD_DIR", os.path.join(tempfile.gettempdir(), "hr_timesheet_uploads"))
MAX_AVATAR_BYTES = 2 * 1024 * 1024

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_MIGRATE_DB = False
AUTO_SEED_DB = False
