from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from .container import Container, build_container
from .core.exceptions import ConflictError, DomainError, InvariantViolation, ValidationError
from .storage.seed import seed_sample_data
from .attendance.controller import register as register_attendance
from .clients.controller import register as register_clients
from .comments.controller import register as register_comments
from .employees.controller import register as register_employees
from .leave.controller import register as register_leave
from .payroll.controller import register as register_payroll
from .plansets.controller import register as register_plansets
from .projects.controller import register as register_projects


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        body = {"message": str(e)}
        if e.errors:
            body["errors"] = e.errors
        return jsonify(body), 400

    @app.errorhandler(InvariantViolation)
    def handle_invariant_violation(e: InvariantViolation):
        return jsonify({"message": str(e)}), 400

    @app.errorhandler(ConflictError)
    def handle_conflict(e: ConflictError):
        return jsonify({"message": str(e)}), 409

    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        return jsonify({"message": str(e)}), 400

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return jsonify({"message": e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        app.logger.exception("Unhandled error")
        return jsonify({"message": "Internal server error"}), 500


def create_app(settings_module: Optional[str] = None, *, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.sort_keys = False

    app.logger.setLevel(getattr(logging, str(getattr(settings, "LOG_LEVEL", "INFO")).upper(), logging.INFO))

    if container is None:
        container = build_container()
        if bool(getattr(settings, "SEED_SAMPLE_DATA", False)):
            seed_sample_data(container)
            app.logger.info("sample data loaded")
    app.extensions["solar_ops.container"] = container

    if app.config["DEBUG"]:
        app.logger.info("[solar-ops] settings=%s", settings_module)

    register_error_handlers(app)
    register_employees(app, container)
    register_clients(app, container)
    register_projects(app, container)
    register_comments(app, container)
    register_plansets(app, container)
    register_attendance(app, container)
    register_leave(app, container)
    register_payroll(app, container)

    return app
