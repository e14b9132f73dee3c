from __future__ import annotations

import logging
import sys

_HANDLER_NAME = "hr_timesheet.stderr"


def setup_logging(level: str | int = logging.INFO) -> None:
    """Thiết lập logging cho ứng dụng (ghi ra stderr).

    Gọi lại nhiều lần không nhân đôi handler; handler của bên khác được giữ nguyên.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setLevel(level)
    handler.setFormatter(formatter)

    for existing in list(root_logger.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
