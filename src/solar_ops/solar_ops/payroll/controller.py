from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, not_found
from ..common.serializers import to_json, to_json_list
from ..container import Container


def register(app: Flask, container: Container) -> None:
    payroll = container.payroll_service

    @app.route("/api/payroll", methods=["GET"], endpoint="list_payroll")
    def list_payroll():
        return jsonify(to_json_list(payroll.list_all()))

    @app.route("/api/employees/<employee_id>/payroll", methods=["GET"], endpoint="employee_payroll")
    def employee_payroll(employee_id: str):
        return jsonify(to_json_list(payroll.list_by_employee(employee_id)))

    @app.route("/api/payroll", methods=["POST"], endpoint="create_payroll")
    def create_payroll():
        return jsonify(to_json(payroll.create(json_body()))), 201

    @app.route("/api/payroll/<payroll_id>", methods=["GET"], endpoint="get_payroll")
    def get_payroll(payroll_id: str):
        record = payroll.get(payroll_id)
        if not record:
            return not_found("Payroll record")
        return jsonify(to_json(record))

    @app.route("/api/payroll/<payroll_id>", methods=["PUT"], endpoint="update_payroll")
    def update_payroll(payroll_id: str):
        record = payroll.update(payroll_id, json_body())
        if not record:
            return not_found("Payroll record")
        return jsonify(to_json(record))
