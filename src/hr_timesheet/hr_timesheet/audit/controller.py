from __future__ import annotations

from flask import Flask

from ..common.http import json_body, json_endpoint, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/logs", methods=["GET"], endpoint="logs_list")
    @json_endpoint
    def logs_list():
        return ok([e.to_dict() for e in container.audit_service.latest()])

    @app.route("/api/logs", methods=["POST"], endpoint="logs_add")
    @json_endpoint
    def logs_add():
        body = json_body()
        entry = container.audit_service.record(body.get("actor"), body.get("action"))
        return ok(entry.to_dict(), message="Logged")
