from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.http import json_body, not_found
from ..common.serializers import to_json, to_json_list
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    attendance = container.attendance_service

    def _employee_id_from_body() -> str:
        body = json_body()
        employee_id = body.get("employee_id") if isinstance(body, dict) else None
        if not employee_id:
            raise ValidationError("Employee ID required")
        return str(employee_id)

    @app.route("/api/attendance", methods=["GET"], endpoint="list_attendance")
    def list_attendance():
        day = request.args.get("date")
        if day:
            try:
                rows = attendance.list_by_date(parse_iso_date(day))
            except ValueError:
                raise ValidationError("Invalid date (YYYY-MM-DD)")
        else:
            rows = attendance.list_all()
        return jsonify(to_json_list(rows))

    @app.route("/api/employees/<employee_id>/attendance", methods=["GET"], endpoint="employee_attendance")
    def employee_attendance(employee_id: str):
        return jsonify(to_json_list(attendance.list_by_employee(employee_id)))

    @app.route("/api/attendance/today/<employee_id>", methods=["GET"], endpoint="today_attendance")
    def today_attendance(employee_id: str):
        return jsonify(to_json(attendance.get_today(employee_id)))

    @app.route("/api/attendance", methods=["POST"], endpoint="create_attendance")
    def create_attendance():
        return jsonify(to_json(attendance.create(json_body()))), 201

    @app.route("/api/attendance/<attendance_id>", methods=["PUT"], endpoint="update_attendance")
    def update_attendance(attendance_id: str):
        record = attendance.update(attendance_id, json_body())
        if not record:
            return not_found("Attendance record")
        return jsonify(to_json(record))

    @app.route("/api/attendance/punch-in", methods=["POST"], endpoint="punch_in")
    def punch_in():
        record = attendance.punch_in(_employee_id_from_body())
        return jsonify(to_json(record)), 201

    @app.route("/api/attendance/punch-out", methods=["POST"], endpoint="punch_out")
    def punch_out():
        record = attendance.punch_out(_employee_id_from_body())
        return jsonify(to_json(record))
