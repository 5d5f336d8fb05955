from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..container import Container
from ..core.exceptions import PersistenceError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/workers/<worker_id>/streak", methods=["GET"], endpoint="worker_streak")
    def worker_streak(worker_id: str):
        try:
            summary = container.streak_service.get_streak(worker_id)
            return jsonify(summary.to_dict()), 200
        except PersistenceError:
            logger.exception("[GET streak] worker=%s", worker_id)
            return jsonify({"success": False, "message": "Failed to load streak"}), 500
