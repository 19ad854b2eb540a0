from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.http import json_body, json_error, validation_error
from ..common.validators import validate_check_in
from ..container import Container
from ..core.exceptions import DuplicateCheckIn, RegistrationFailed, StorageError, ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/register", methods=["POST"], endpoint="attendance_register")
    def attendance_register():
        try:
            req = validate_check_in(json_body())
            record = container.attendance_service.register_attendance(req.member_id, req.service)
        except ValidationError as e:
            return validation_error(e)
        except DuplicateCheckIn as e:
            return json_error(str(e), 409)
        except (RegistrationFailed, StorageError):
            logger.exception("Attendance registration failed")
            return json_error("Internal server error", 500)

        return jsonify({"success": True, "attendance": record.to_dict()}), 201
