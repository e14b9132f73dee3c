from __future__ import annotations

from flask import Flask, request

from ..common.http import json_body, json_endpoint, ok
from ..container import Container


def range_args() -> tuple:
    """employeeCode/from/to query params; `maNv` is accepted as the legacy name."""
    employee_code = request.args.get("employeeCode") or request.args.get("maNv")
    return employee_code, request.args.get("from"), request.args.get("to")


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_list")
    @json_endpoint
    def attendance_list():
        records = container.attendance_service.query(*range_args())
        return ok([r.to_dict() for r in records])

    @app.route("/api/attendance", methods=["POST"], endpoint="attendance_upsert")
    @json_endpoint
    def attendance_upsert():
        record = container.attendance_service.upsert(json_body())
        return ok(record.to_dict(), message="Đã lưu chấm công")

    @app.route("/api/attendance/<int:attendance_id>", methods=["DELETE"], endpoint="attendance_delete")
    @json_endpoint
    def attendance_delete(attendance_id: int):
        container.attendance_service.delete(attendance_id)
        return ok(message="Đã xóa chấm công")
