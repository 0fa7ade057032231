from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from .core.exceptions import DataInconsistencyError, DataIntegrityError, DomainError, InvalidRangeError, ValidationError
from .database.bootstrap import apply_schema, apply_seed_sql, ensure_demo_employees, list_tables, missing_tables

from .container import Container, build_container
from .employees.controller import register as register_employees
from .expenses.controller import register as register_expenses
from .ledger.controller import register as register_ledger
from .notifications.controller import register as register_notifications
from .payments.controller import register as register_payments
from .payroll.controller import register as register_payroll

logger = logging.getLogger(__name__)

_DATABASE_DIR = Path(__file__).resolve().parents[3] / "database"


def _status_for(exc: DomainError) -> int:
    if isinstance(exc, (ValidationError, InvalidRangeError)):
        return 400
    if isinstance(exc, DataInconsistencyError):
        return 404
    return 500


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(exc: DomainError):
        status = _status_for(exc)
        if isinstance(exc, DataIntegrityError):
            logger.error("Stored data failed a computation: %s", exc)
        else:
            logger.info("Request rejected (%s): %s", status, exc)
        body = {"success": False, "message": str(exc), "error": type(exc).__name__}
        field = getattr(exc, "field", None)
        if field:
            body["field"] = field
        return jsonify(body), status

    @app.errorhandler(Exception)
    def handle_unexpected_error(exc: Exception):
        if isinstance(exc, HTTPException):
            return exc
        logger.exception("Unhandled error while serving request")
        return jsonify({"success": False, "message": "Internal server error", "error": type(exc).__name__}), 500


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module, db_config.get("user"), db_config.get("host"),
            db_config.get("port", 3306), db_config.get("database"),
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=_DATABASE_DIR / "schema.sql")
            missing = missing_tables(list_tables(db_config))
            if missing:
                logger.warning("Schema applied but tables are missing: %s", ", ".join(missing))
            else:
                logger.info("Schema ready")
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db_config, seed_path=_DATABASE_DIR / "seed.sql")
            ensure_demo_employees(db_config)

        container = build_container(db_config=db_config, settings=settings)

    app.extensions["payroll_container"] = container
    register_error_handlers(app)

    register_employees(app, container)
    register_ledger(app, container)
    register_payroll(app, container)
    register_expenses(app, container)
    register_payments(app, container)
    register_notifications(app, container)

    return app
