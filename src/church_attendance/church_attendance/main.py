from __future__ import annotations

import importlib
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify, request

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.http import json_error
from .container import Container, build_container
from .core.exceptions import StorageError
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables, ping, table_counts
from .ledger.controller import register as register_ledger
from .members.controller import register as register_members
from .visitors.controller import register as register_visitors

logger = logging.getLogger(__name__)

API_VERSION = "2.0.0"
REPO_ROOT = Path(__file__).resolve().parents[3]


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def _register_app_hooks(app: Flask, container: Container, *, frontend_origin: str) -> None:
    @app.before_request
    def log_request():
        logger.info("%s %s", request.method, request.path)
        if request.method == "OPTIONS":
            return app.response_class(status=204)

    @app.after_request
    def add_cors_headers(response):
        if frontend_origin:
            response.headers["Access-Control-Allow-Origin"] = frontend_origin
            response.headers["Access-Control-Allow-Methods"] = "GET, POST, PUT, DELETE"
            response.headers["Access-Control-Allow-Headers"] = "Content-Type, Authorization"
            response.headers["Access-Control-Allow-Credentials"] = "true"
        return response

    @app.route("/api/health", methods=["GET"], endpoint="health")
    def health():
        timestamp = datetime.now(timezone.utc).isoformat()
        try:
            ok = container.conn is not None and ping(container.conn)
        except StorageError as e:
            return jsonify({"status": "error", "db": "disconnected", "error": str(e)}), 503
        if not ok:
            return jsonify({"status": "error", "db": "disconnected"}), 503

        body = {"status": "ok", "db": "connected", "timestamp": timestamp}
        # Non-critical: counts are diagnostic only and never fail the health check.
        try:
            body["counts"] = table_counts(container.conn)
        except StorageError as e:
            logger.warning("Health check could not read table counts: %s", e)
        return jsonify(body)

    @app.route("/", methods=["GET"], endpoint="index")
    def index():
        return jsonify(
            {
                "name": "Church Attendance System API",
                "version": API_VERSION,
                "status": "running",
                "endpoints": {
                    "health": "/api/health",
                    "members": "/api/members",
                    "attendance": "/api/attendance",
                    "visitors": "/api/visitors",
                    "history": "/api/history",
                },
            }
        )

    @app.errorhandler(404)
    def not_found(_e):
        return json_error("Endpoint not found", 404, path=request.path)

    @app.errorhandler(405)
    def method_not_allowed(_e):
        return json_error("Method not allowed", 405, path=request.path)

    @app.errorhandler(500)
    def internal_error(e):
        logger.error("Unhandled error on %s %s: %s", request.method, request.path, e)
        extra = {"error": str(e)} if app.config.get("DEBUG") else {}
        return json_error("Internal server error", 500, **extra)


def create_app(container: Optional[Container] = None, *, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    db_config = getattr(settings, "DB_CONFIG")

    logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if container is None:
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
            logger.info("demo seed ready")

        container = build_container(
            db_config=db_config,
            ledger_pin=str(getattr(settings, "LEDGER_PIN")),
            pool_size=int(getattr(settings, "DB_POOL_SIZE", 10)),
            pool_name=str(getattr(settings, "DB_POOL_NAME", "church_attendance")),
            report_title=str(getattr(settings, "REPORT_TITLE", "RFP Ministries")),
            report_subtitle=str(getattr(settings, "REPORT_SUBTITLE", "Raised For a Purpose")),
        )

    _register_app_hooks(app, container, frontend_origin=str(getattr(settings, "FRONTEND_ORIGIN", "") or ""))
    register_members(app, container)
    register_attendance(app, container)
    register_visitors(app, container)
    register_ledger(app, container)

    return app
