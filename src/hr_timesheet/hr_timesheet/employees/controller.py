from __future__ import annotations

from flask import Flask, request, send_from_directory

from ..common.http import json_body, json_endpoint, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    employees = container.employee_service
    departments = container.department_service

    # ---- employees ----

    @app.route("/api/employees", methods=["GET"], endpoint="employees_list")
    @json_endpoint
    def employees_list():
        return ok([e.to_dict() for e in employees.list_all()])

    @app.route("/api/employees/<int:employee_id>", methods=["GET"], endpoint="employees_get")
    @json_endpoint
    def employees_get(employee_id: int):
        return ok(employees.get(employee_id).to_dict())

    @app.route("/api/employees", methods=["POST"], endpoint="employees_create")
    @json_endpoint
    def employees_create():
        employee = employees.create(json_body())
        return ok(employee.to_dict(), message="Đã thêm nhân viên thành công")

    @app.route("/api/employees/<int:employee_id>", methods=["PUT"], endpoint="employees_update")
    @json_endpoint
    def employees_update(employee_id: int):
        employees.update(employee_id, json_body())
        return ok(message="Cập nhật thành công")

    @app.route("/api/employees/<int:employee_id>", methods=["DELETE"], endpoint="employees_delete")
    @json_endpoint
    def employees_delete(employee_id: int):
        employees.delete(employee_id)
        return ok(message="Đã xóa nhân viên")

    @app.route("/api/employees/<int:employee_id>/avatar", methods=["POST"], endpoint="employees_avatar")
    @json_endpoint
    def employees_avatar(employee_id: int):
        avatar_url = employees.set_avatar(employee_id, request.files.get("avatar"))
        return ok({"avatarUrl": avatar_url})

    @app.route("/api/statistics", methods=["GET"], endpoint="employees_statistics")
    @json_endpoint
    def employees_statistics():
        return ok(employees.statistics().to_dict())

    @app.route("/uploads/<path:filename>", methods=["GET"], endpoint="uploaded_file")
    def uploaded_file(filename: str):
        return send_from_directory(container.avatar_storage.upload_dir, filename)

    # ---- departments ----

    @app.route("/api/departments", methods=["GET"], endpoint="departments_list")
    @json_endpoint
    def departments_list():
        return ok([d.to_dict() for d in departments.list_all()])

    @app.route("/api/departments/<int:dept_id>", methods=["GET"], endpoint="departments_get")
    @json_endpoint
    def departments_get(dept_id: int):
        return ok(departments.get(dept_id).to_dict())

    @app.route("/api/departments", methods=["POST"], endpoint="departments_create")
    @json_endpoint
    def departments_create():
        dept = departments.create(json_body())
        return ok(dept.to_dict(), message="Đã thêm phòng ban thành công")

    @app.route("/api/departments/<int:dept_id>", methods=["PUT"], endpoint="departments_update")
    @json_endpoint
    def departments_update(dept_id: int):
        departments.update(dept_id, json_body())
        return ok(message="Cập nhật phòng ban thành công")

    @app.route("/api/departments/<int:dept_id>", methods=["DELETE"], endpoint="departments_delete")
    @json_endpoint
    def departments_delete(dept_id: int):
        departments.delete(dept_id)
        return ok(message="Đã xóa phòng ban")
