from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_body, no_content, not_found
from ..common.serializers import to_json, to_json_list
from ..container import Container


def register(app: Flask, container: Container) -> None:
    employees = container.employee_service
    departments = container.department_service

    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        return jsonify(to_json_list(employees.list_all()))

    @app.route("/api/employees/search", methods=["GET"], endpoint="search_employees")
    def search_employees():
        return jsonify(to_json_list(employees.search(request.args.get("q"))))

    @app.route("/api/employees", methods=["POST"], endpoint="create_employee")
    def create_employee():
        employee = employees.create(json_body())
        return jsonify(to_json(employee)), 201

    @app.route("/api/employees/<employee_id>", methods=["GET"], endpoint="get_employee")
    def get_employee(employee_id: str):
        employee = employees.get(employee_id)
        if not employee:
            return not_found("Employee")
        return jsonify(to_json(employee))

    @app.route("/api/employees/<employee_id>", methods=["PUT"], endpoint="update_employee")
    def update_employee(employee_id: str):
        employee = employees.update(employee_id, json_body())
        if not employee:
            return not_found("Employee")
        return jsonify(to_json(employee))

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="delete_employee")
    def delete_employee(employee_id: str):
        if not employees.delete(employee_id):
            return not_found("Employee")
        return no_content()

    @app.route("/api/departments", methods=["GET"], endpoint="list_departments")
    def list_departments():
        return jsonify(to_json_list(departments.list_all()))

    @app.route("/api/departments", methods=["POST"], endpoint="create_department")
    def create_department():
        department = departments.create(json_body())
        return jsonify(to_json(department)), 201

    @app.route("/api/departments/<department_id>", methods=["GET"], endpoint="get_department")
    def get_department(department_id: str):
        department = departments.get(department_id)
        if not department:
            return not_found("Department")
        return jsonify(to_json(department))

    @app.route("/api/departments/<department_id>", methods=["PUT"], endpoint="update_department")
    def update_department(department_id: str):
        department = departments.update(department_id, json_body())
        if not department:
            return not_found("Department")
        return jsonify(to_json(department))

    @app.route("/api/departments/<department_id>", methods=["DELETE"], endpoint="delete_department")
    def delete_department(department_id: str):
        if not departments.delete(department_id):
            return not_found("Department")
        return no_content()
