"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Timesheet placeholders (demo values until a real hour formula exists)
WORKED_HOURS_PLACEHOLDER = 9
UNSET_MARKER = "-"
TOTAL_ROW_LABEL = "Tổng"
STANDARD_HOURS_QUOTA = "27,25"
HOURS_BALANCE_PLACEHOLDER = "--"
LEAVE_AVAILABLE_PLACEHOLDER = "0"
LEAVE_USED_PLACEHOLDER = "0"

# Avatar uploads
MAX_AVATAR_BYTES = 2 * 1024 * 1024
ALLOWED_AVATAR_EXTENSIONS = (".png", ".jpg", ".jpeg", ".webp")
DEFAULT_AVATAR_EXTENSION = ".jpg"
UPLOAD_URL_PREFIX = "/uploads"

DEFAULT_LOG_LIMIT = 50
DEFAULT_LAST_LOGIN = "-"
