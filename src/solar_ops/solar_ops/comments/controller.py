from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body
from ..common.serializers import to_json, to_json_list
from ..container import Container


def register(app: Flask, container: Container) -> None:
    comments = container.comment_service

    @app.route("/api/comments", methods=["GET"], endpoint="list_comments")
    def list_comments():
        return jsonify(to_json_list(comments.list_all()))

    @app.route("/api/comments", methods=["POST"], endpoint="create_comment")
    def create_comment():
        return jsonify(to_json(comments.create(json_body()))), 201
