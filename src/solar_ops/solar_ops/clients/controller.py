from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_body, no_content, not_found
from ..common.serializers import to_json, to_json_list
from ..container import Container


def register(app: Flask, container: Container) -> None:
    clients = container.client_service

    @app.route("/api/clients", methods=["GET"], endpoint="list_clients")
    def list_clients():
        return jsonify(to_json_list(clients.list_all()))

    @app.route("/api/clients/search", methods=["GET"], endpoint="search_clients")
    def search_clients():
        return jsonify(to_json_list(clients.search(request.args.get("q"))))

    @app.route("/api/clients", methods=["POST"], endpoint="create_client")
    def create_client():
        return jsonify(to_json(clients.create(json_body()))), 201

    @app.route("/api/clients/<client_id>", methods=["GET"], endpoint="get_client")
    def get_client(client_id: str):
        client = clients.get(client_id)
        if not client:
            return not_found("Client")
        return jsonify(to_json(client))

    @app.route("/api/clients/<client_id>", methods=["PUT"], endpoint="update_client")
    def update_client(client_id: str):
        client = clients.update(client_id, json_body())
        if not client:
            return not_found("Client")
        return jsonify(to_json(client))

    @app.route("/api/clients/<client_id>", methods=["DELETE"], endpoint="delete_client")
    def delete_client(client_id: str):
        if not clients.delete(client_id):
            return not_found("Client")
        return no_content()
