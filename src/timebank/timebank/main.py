from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from .absences.controller import register as register_absences
from .balance.controller import register as register_balance
from .container import Container, build_container
from .core.exceptions import ConflictError, DomainError, NotFoundError, PolicyViolation, ValidationError
from .database.bootstrap import apply_schema, missing_tables
from .database.connection import DBConfig
from .punches.controller import register as register_punches
from .schedules.controller import register as register_schedules

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (NotFoundError, 404),
    (ConflictError, 409),
    (PolicyViolation, 403),
)


def _status_for(exc: DomainError) -> int:
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status
    return 400


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(exc: DomainError):
        return jsonify({"error": str(exc)}), _status_for(exc)

    @app.errorhandler(Exception)
    def handle_unexpected(exc: Exception):
        if isinstance(exc, HTTPException):
            return jsonify({"error": exc.description}), exc.code
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return jsonify({"error": "Internal error while processing the request"}), 500

    @app.after_request
    def log_failed_request(response):
        if response.status_code >= 400:
            logger.warning("%s %s -> %s", request.method, request.full_path.rstrip("?"), response.status_code)
        return response


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info("settings=%s db=%s", settings_module, DBConfig.from_dict(db_config).describe())

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
            apply_schema(db_config, schema_path=schema_path)
            missing = missing_tables(db_config)
            if missing:
                logger.error("schema incomplete, missing tables: %s", ", ".join(missing))

        container = build_container(
            db_config=db_config,
            timezone=getattr(settings, "TIMEZONE"),
            first_weekday=getattr(settings, "FIRST_WEEKDAY"),
            default_lunch_break_minutes=getattr(settings, "DEFAULT_LUNCH_BREAK_MINUTES"),
        )

    _register_error_handlers(app)
    register_schedules(app, container)
    register_punches(app, container)
    register_absences(app, container)
    register_balance(app, container)

    return app
