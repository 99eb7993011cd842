from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_body, no_content, not_found
from ..common.serializers import to_json, to_json_list
from ..container import Container


def register(app: Flask, container: Container) -> None:
    projects = container.project_service

    @app.route("/api/projects", methods=["GET"], endpoint="list_projects")
    def list_projects():
        status = request.args.get("status")
        rows = projects.list_by_status(status) if status else projects.list_all()
        return jsonify(to_json_list(rows))

    @app.route("/api/projects/stats", methods=["GET"], endpoint="project_stats")
    def project_stats():
        return jsonify(projects.stats())

    @app.route("/api/projects", methods=["POST"], endpoint="create_project")
    def create_project():
        return jsonify(to_json(projects.create(json_body()))), 201

    @app.route("/api/projects/<project_id>", methods=["GET"], endpoint="get_project")
    def get_project(project_id: str):
        project = projects.get(project_id)
        if not project:
            return not_found("Project")
        return jsonify(to_json(project))

    @app.route("/api/projects/<project_id>", methods=["PUT"], endpoint="update_project")
    def update_project(project_id: str):
        project = projects.update(project_id, json_body())
        if not project:
            return not_found("Project")
        return jsonify(to_json(project))

    @app.route("/api/projects/<project_id>", methods=["DELETE"], endpoint="delete_project")
    def delete_project(project_id: str):
        if not projects.delete(project_id):
            return not_found("Project")
        return no_content()
