"""Ví dụ: dùng service layer (không qua Flask).

In bảng công của NV001 cho kỳ 23/12/2025 - 22/01/2026.
"""

import importlib
import json

from config import get_settings_module

from src.hr_timesheet.hr_timesheet.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, upload_dir=settings.UPLOAD_DIR)
    try:
        summary = container.timesheet_service.summarize("NV001", "2025-12-23", "2026-01-22")
        print(json.dumps(summary.to_dict(), ensure_ascii=False, indent=2))
    finally:
        container.close()


if __name__ == "__main__":
    main()
