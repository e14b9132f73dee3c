from __future__ import annotations

from flask import Flask

from ..attendance.controller import range_args
from ..common.http import json_endpoint, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/timesheet/summary", methods=["GET"], endpoint="timesheet_summary")
    @json_endpoint
    def timesheet_summary():
        summary = container.timesheet_service.summarize(*range_args())
        return ok(summary.to_dict())
