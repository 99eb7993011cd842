from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, not_found
from ..common.serializers import to_json, to_json_list
from ..container import Container


def register(app: Flask, container: Container) -> None:
    leave = container.leave_service

    def _body() -> dict:
        body = json_body()
        return body if isinstance(body, dict) else {}

    @app.route("/api/leave-requests", methods=["GET"], endpoint="list_leave_requests")
    def list_leave_requests():
        return jsonify(to_json_list(leave.list_all()))

    @app.route("/api/employees/<employee_id>/leave-requests", methods=["GET"], endpoint="employee_leave_requests")
    def employee_leave_requests(employee_id: str):
        return jsonify(to_json_list(leave.list_by_employee(employee_id)))

    @app.route("/api/leave-requests", methods=["POST"], endpoint="create_leave_request")
    def create_leave_request():
        return jsonify(to_json(leave.create(json_body()))), 201

    @app.route("/api/leave-requests/<request_id>", methods=["GET"], endpoint="get_leave_request")
    def get_leave_request(request_id: str):
        record = leave.get(request_id)
        if not record:
            return not_found("Leave request")
        return jsonify(to_json(record))

    @app.route("/api/leave-requests/<request_id>", methods=["PUT"], endpoint="update_leave_request")
    def update_leave_request(request_id: str):
        record = leave.update(request_id, json_body())
        if not record:
            return not_found("Leave request")
        return jsonify(to_json(record))

    @app.route("/api/leave-requests/<request_id>/approve", methods=["PUT"], endpoint="approve_leave_request")
    def approve_leave_request(request_id: str):
        body = _body()
        record = leave.approve(request_id, body.get("approved_by"))
        if not record:
            return not_found("Leave request")
        return jsonify(to_json(record))

    @app.route("/api/leave-requests/<request_id>/reject", methods=["PUT"], endpoint="reject_leave_request")
    def reject_leave_request(request_id: str):
        body = _body()
        record = leave.reject(request_id, body.get("approved_by"), body.get("comments"))
        if not record:
            return not_found("Leave request")
        return jsonify(to_json(record))
