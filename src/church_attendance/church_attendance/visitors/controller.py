from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.http import json_body, json_error, validation_error
from ..common.validators import validate_visitor
from ..container import Container
from ..core.exceptions import RegistrationFailed, ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/visitors/register", methods=["POST"], endpoint="visitor_register")
    def visitor_register():
        try:
            req = validate_visitor(json_body())
            registration = container.visitor_service.register_visitor(
                full_name=req.full_name,
                phone=req.phone,
                gender=req.gender,
                first_time=req.first_time,
                service=req.service,
            )
        except ValidationError as e:
            return validation_error(e)
        except RegistrationFailed:
            return json_error("Internal server error", 500)

        return (
            jsonify(
                {
                    "success": True,
                    "visitor": registration.visitor.to_dict(),
                    "attendance": registration.attendance.to_dict(),
                }
            ),
            201,
        )
