from __future__ import annotations

from typing import Any

from flask import jsonify, request


def json_body() -> Any:
    """Request JSON; an empty/invalid body reads as ``{}`` so schemas report the missing fields."""
    data = request.get_json(silent=True)
    return {} if data is None else data


def not_found(entity: str):
    return jsonify({"message": f"{entity} not found"}), 404


def no_content():
    return "", 204
