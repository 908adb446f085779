from __future__ import annotations

import importlib
import logging
from typing import Optional

import mysql.connector
from dotenv import load_dotenv
from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import Container, build_container
from .core.constants import DEFAULT_DASHBOARD_WORKERS
from .database.bootstrap import apply_schema, list_tables, seed_demo_records
from .database.connection import DBConfig
from .health.controller import register as register_health
from .stats.controller import register as register_stats

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, str(level).upper(), logging.INFO), format=LOG_FORMAT)


def _bootstrap_database(db_config: dict, *, auto_init: bool, auto_seed: bool) -> None:
    # A store that is down at startup is logged, not fatal: requests will
    # fail one by one until it comes back.
    try:
        if auto_init:
            apply_schema(db_config)
            logger.info("Schema ready (tables=%s)", len(list_tables(db_config)))
        if auto_seed:
            seed_demo_records(db_config)
    except mysql.connector.Error as e:
        logger.error("Database bootstrap failed, continuing without it: %s", e)


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return jsonify({"error": e.description or e.name}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(e: Exception):
        logger.exception("Unhandled error")
        return jsonify({"error": "Internal server error"}), 500


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    _configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.sort_keys = False

    CORS(app, resources={r"/api/*": {"origins": getattr(settings, "CORS_ORIGINS", "*")}})

    if container is None:
        logger.info("settings=%s db=%s", settings_module, DBConfig.from_dict(db_config).describe())
        _bootstrap_database(
            db_config,
            auto_init=bool(getattr(settings, "AUTO_INIT_DB", False)),
            auto_seed=bool(getattr(settings, "AUTO_SEED_DB", False)),
        )
        container = build_container(
            db_config=db_config,
            dashboard_workers=int(getattr(settings, "DASHBOARD_WORKERS", DEFAULT_DASHBOARD_WORKERS)),
        )

    _register_error_handlers(app)
    register_health(app, container)
    register_attendance(app, container)
    register_stats(app, container)

    return app
