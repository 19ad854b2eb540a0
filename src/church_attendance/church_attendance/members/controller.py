from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.http import json_error, validation_error
from ..common.validators import validate_search_query
from ..container import Container
from ..core.exceptions import StorageError, ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/members/search", methods=["GET"], endpoint="member_search")
    def member_search():
        try:
            term = validate_search_query(request.args)
            member = container.member_search_service.resolve(term)
        except ValidationError as e:
            return validation_error(e)
        except StorageError:
            logger.exception("Member search failed")
            return json_error("Internal server error", 500)

        if member is None:
            return json_error(
                "No member found matching your search. Please check the details and try again.", 404
            )
        return jsonify({"success": True, "member": member.to_dict()}), 200
