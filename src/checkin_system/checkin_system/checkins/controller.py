from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import PersistenceError, ValidationError
from .service import build_payload

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/workers/<worker_id>/checkins/status", methods=["GET"], endpoint="checkin_status")
    def checkin_status(worker_id: str):
        try:
            status = container.checkin_service.get_status(worker_id)
            return jsonify(status.to_dict()), 200
        except PersistenceError:
            logger.exception("[GET checkins/status] worker=%s", worker_id)
            return jsonify({"success": False, "message": "Failed to load check-in status"}), 500

    @app.route("/api/workers/<worker_id>/checkins", methods=["POST"], endpoint="checkin_submit")
    def checkin_submit(worker_id: str):
        try:
            payload = build_payload(request.get_json(silent=True) or {})
            result = container.checkin_service.submit(worker_id, payload)
            return jsonify(result.to_dict()), 200
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except PersistenceError:
            logger.exception("[POST checkins] worker=%s", worker_id)
            return jsonify({"success": False, "message": "Failed to save check-in"}), 500
