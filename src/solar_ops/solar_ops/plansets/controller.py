from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, no_content, not_found
from ..common.serializers import to_json, to_json_list
from ..container import Container


def register(app: Flask, container: Container) -> None:
    plansets = container.planset_service

    @app.route("/api/plansets", methods=["GET"], endpoint="list_plansets")
    def list_plansets():
        return jsonify(to_json_list(plansets.list_all()))

    @app.route("/api/projects/<project_id>/plansets", methods=["GET"], endpoint="list_project_plansets")
    def list_project_plansets(project_id: str):
        return jsonify(to_json_list(plansets.list_by_project(project_id)))

    @app.route("/api/plansets", methods=["POST"], endpoint="create_planset")
    def create_planset():
        planset = plansets.create(json_body())
        app.logger.debug("created planset %s for project %s", planset.id, planset.project_id)
        return jsonify(to_json(planset)), 201

    @app.route("/api/plansets/<planset_id>", methods=["GET"], endpoint="get_planset")
    def get_planset(planset_id: str):
        planset = plansets.get(planset_id)
        if not planset:
            return not_found("Planset")
        return jsonify(to_json(planset))

    @app.route("/api/plansets/<planset_id>", methods=["PUT"], endpoint="update_planset")
    def update_planset(planset_id: str):
        planset = plansets.update(planset_id, json_body())
        if not planset:
            return not_found("Planset")
        return jsonify(to_json(planset))

    @app.route("/api/plansets/<planset_id>", methods=["DELETE"], endpoint="delete_planset")
    def delete_planset(planset_id: str):
        if not plansets.delete(planset_id):
            return not_found("Planset")
        return no_content()
