from __future__ import annotations

from flask import jsonify, request

from ..core.exceptions import ValidationError


def json_error(message: str, status: int, **extra):
    body = {"success": False, "message": message}
    body.update(extra)
    return jsonify(body), status


def validation_error(e: ValidationError):
    return jsonify({"success": False, "errors": e.errors}), 400


def json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}
