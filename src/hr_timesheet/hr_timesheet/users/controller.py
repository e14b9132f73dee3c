from __future__ import annotations

from flask import Flask

from ..common.http import json_body, json_endpoint, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    users = container.user_service

    @app.route("/api/users", methods=["GET"], endpoint="users_list")
    @json_endpoint
    def users_list():
        return ok([u.to_dict() for u in users.list_all()])

    @app.route("/api/users", methods=["POST"], endpoint="users_create")
    @json_endpoint
    def users_create():
        account = users.create(json_body())
        return ok(account.to_dict(), message="Tạo user thành công")

    @app.route("/api/users/<username>", methods=["PUT"], endpoint="users_update")
    @json_endpoint
    def users_update(username: str):
        users.update(username, json_body())
        return ok(message="Cập nhật user thành công")

    @app.route("/api/users/<username>/status", methods=["PATCH"], endpoint="users_status")
    @json_endpoint
    def users_status(username: str):
        users.set_active(username, json_body().get("active"))
        return ok(message="Cập nhật trạng thái thành công")

    @app.route("/api/users/<username>/reset-password", methods=["POST"], endpoint="users_reset_password")
    @json_endpoint
    def users_reset_password(username: str):
        users.reset_password(username, json_body().get("newPassword"))
        return ok(message="Reset mật khẩu thành công")

    @app.route("/api/users/<username>", methods=["DELETE"], endpoint="users_delete")
    @json_endpoint
    def users_delete(username: str):
        users.delete(username)
        return ok(message="Đã xóa user")
