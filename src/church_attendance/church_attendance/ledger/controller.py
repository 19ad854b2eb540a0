from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, jsonify, request

from ..common.http import json_body, json_error
from ..container import Container
from ..core.exceptions import AccessDenied, ReportRenderError, StorageError

logger = logging.getLogger(__name__)

PDF_FILENAME = "Attendance_History.pdf"


def register(app: Flask, container: Container) -> None:
    def pin_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            pin = request.args.get("pin") or json_body().get("pin") or request.form.get("pin")
            try:
                container.pin_gate.check(pin)
            except AccessDenied as e:
                logger.info("Rejected ledger access to %s", request.path)
                return json_error(str(e), 401)
            return view(*args, **kwargs)

        return wrapper

    @app.route("/api/history", methods=["GET"], endpoint="history_list")
    @pin_required
    def history_list():
        try:
            rows = container.ledger_service.list_ledger()
        except StorageError as e:
            logger.exception("History query failed")
            return json_error("Internal server error", 500, detail=str(e) or "Unknown error")
        return jsonify({"success": True, "records": [r.to_dict() for r in rows]}), 200

    @app.route("/api/history", methods=["DELETE"], endpoint="history_purge")
    @pin_required
    def history_purge():
        try:
            result = container.ledger_service.purge_ledger()
        except StorageError:
            logger.exception("History delete failed")
            return json_error("Failed to delete history", 500)
        return jsonify({"success": True, "deleted": result.to_dict()}), 200

    @app.route("/api/history/pdf", methods=["GET"], endpoint="history_pdf")
    @pin_required
    def history_pdf():
        # The whole document is built before the response starts, so a failure
        # here is always a clean JSON 500 rather than a truncated download.
        try:
            rows = container.ledger_service.list_ledger()
            pdf_bytes = container.report_renderer.render(rows)
        except (StorageError, ReportRenderError):
            logger.exception("History PDF failed")
            return json_error("PDF generation failed", 500)

        return app.response_class(
            pdf_bytes,
            mimetype="application/pdf",
            headers={"Content-Disposition": f'attachment; filename="{PDF_FILENAME}"'},
        )
