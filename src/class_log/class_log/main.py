from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from .container import Container, build_container
from .core.enums import DurationStyle
from .core.exceptions import DuplicateKeyError, NotFoundError, StoreUnavailableError, ValidationError
from .database.bootstrap import apply_schema, list_tables
from .logging_config import setup_logging
from .reports.controller import register as register_reports
from .sessions.controller import register as register_sessions
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def _register_error_handlers(app: Flask) -> None:
    def _json_error(e: Exception, code: int):
        return jsonify({"message": str(e)}), code

    @app.errorhandler(ValidationError)
    def _validation(e):
        logger.warning("Validation failed on %s: %s", request.path, e)
        return _json_error(e, 400)

    @app.errorhandler(NotFoundError)
    def _not_found(e):
        return _json_error(e, 404)

    @app.errorhandler(DuplicateKeyError)
    def _duplicate(e):
        return _json_error(e, 409)

    @app.errorhandler(StoreUnavailableError)
    def _store_unavailable(e):
        return _json_error(e, 503)

    @app.errorhandler(Exception)
    def _unexpected(e):
        if isinstance(e, HTTPException):
            return e
        logger.exception("Unhandled error on %s", request.path)
        return jsonify({"message": "Erro no servidor", "error": str(e)}), 500


def _register_cors(app: Flask) -> None:
    @app.after_request
    def _cors_headers(response):
        allowed = app.config.get("CORS_ORIGINS") or []
        origin = request.headers.get("Origin")
        if origin and ("*" in allowed or origin in allowed):
            response.headers["Access-Control-Allow-Origin"] = origin
            response.headers["Access-Control-Allow-Methods"] = "GET, POST, PUT, DELETE"
            response.headers["Access-Control-Allow-Headers"] = "Content-Type, Authorization"
            response.headers["Access-Control-Allow-Credentials"] = "true"
        return response


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    setup_logging(getattr(settings, "LOG_LEVEL", None))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["CORS_ORIGINS"] = list(getattr(settings, "CORS_ORIGINS", []))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
            apply_schema(db_config, schema_path=schema_path)
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))

        style = DurationStyle(getattr(settings, "REPORT_DURATION_STYLE", DurationStyle.VERBOSE.value))
        container = build_container(db_config=db_config, report_style=style)

    _register_error_handlers(app)
    _register_cors(app)

    register_users(app, container)
    register_sessions(app, container)
    register_reports(app, container)

    return app
