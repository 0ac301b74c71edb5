from __future__ import annotations

import importlib
import logging
from types import ModuleType
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException, MethodNotAllowed, NotFound

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.logging_utils import setup_logging
from .container import Container, build_container
from .core.constants import DEFAULT_CONNECT_TIMEOUT, DEFAULT_POOL_SIZE, DEFAULT_PORT, MSG_INTERNAL_ERROR, MSG_ROUTE_NOT_FOUND
from .database.bootstrap import apply_schema, list_tables
from .database.connection import DBConfig
from .employees.controller import register as register_employees

logger = logging.getLogger(__name__)


def load_settings() -> ModuleType:
    load_dotenv(override=False)
    return importlib.import_module(get_settings_module())


def db_config_from(settings: ModuleType) -> DBConfig:
    url = getattr(settings, "DATABASE_URL", None)
    if not url:
        raise RuntimeError("DATABASE_URL is not set")
    return DBConfig.from_url(
        url,
        pool_size=int(getattr(settings, "DB_POOL_SIZE", DEFAULT_POOL_SIZE)),
        connect_timeout=int(getattr(settings, "DB_CONNECT_TIMEOUT", DEFAULT_CONNECT_TIMEOUT)),
    )


def _register_core_routes(app: Flask) -> None:
    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    @app.errorhandler(NotFound)
    @app.errorhandler(MethodNotAllowed)
    def route_not_found(_e):
        return jsonify({"message": MSG_ROUTE_NOT_FOUND}), 404

    @app.errorhandler(Exception)
    def unexpected_error(e):
        if isinstance(e, HTTPException):
            return jsonify({"message": e.description}), e.code
        logger.exception("Unhandled error")
        return jsonify({"message": MSG_INTERNAL_ERROR}), 500


def create_app(container: Optional[Container] = None, settings: Optional[ModuleType] = None) -> Flask:
    settings = settings or load_settings()
    setup_logging(level=getattr(settings, "LOG_LEVEL", "INFO"))

    app = Flask(__name__)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.sort_keys = False

    if container is None:
        db_config = db_config_from(settings)
        logger.info("settings=%s db=%s", settings.__name__, db_config.describe())
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config)
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        container = build_container(db_config=db_config)

    _register_core_routes(app)
    register_employees(app, container)
    register_attendance(app, container)

    return app


def run() -> None:
    settings = load_settings()
    app = create_app(settings=settings)
    port = getattr(settings, "PORT", DEFAULT_PORT)
    if not port:
        raise RuntimeError("PORT is not set")
    port = int(port)
    logger.info("HRMS Lite backend running on port %d", port)
    app.run(host="0.0.0.0", port=port, debug=app.config["DEBUG"])


if __name__ == "__main__":
    run()
