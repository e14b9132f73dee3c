"""Shared JSON response helpers for the controller layer.

Every response carries a ``success`` flag. Failures carry an ``error`` string
and no ``data``.
"""
from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Optional

from flask import jsonify, request
from werkzeug.exceptions import HTTPException

from ..core.exceptions import ConflictError, DomainError, NotFoundError, StorageError, ValidationError

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (NotFoundError, 404),
    (ConflictError, 409),
    (StorageError, 500),
)


def status_for(exc: DomainError) -> int:
    for exc_type, status in _STATUS_BY_ERROR:
        if isinstance(exc, exc_type):
            return status
    return 400


def ok(data: Any = None, *, message: Optional[str] = None, status: int = 200):
    body: dict[str, Any] = {"success": True}
    if message:
        body["message"] = message
    if data is not None:
        body["data"] = data
    return jsonify(body), status


def fail(error: str, status: int):
    return jsonify({"success": False, "error": error}), status


def json_body() -> dict:
    """Parsed JSON object of the request; anything else (array, scalar, bad JSON) reads as empty."""
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else {}


def json_endpoint(view):
    """Translate domain exceptions raised by a view into JSON error responses."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except DomainError as e:
            status = status_for(e)
            if status >= 500:
                logger.error("%s %s failed: %s", request.method, request.path, e)
            return fail(str(e), status)
        except HTTPException:
            raise
        except Exception:
            logger.exception("Unhandled error on %s %s", request.method, request.path)
            return fail("Lỗi hệ thống", 500)

    return wrapper
