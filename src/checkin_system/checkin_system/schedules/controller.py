from __future__ import annotations

import logging
from datetime import timedelta

from flask import Flask, jsonify, request

from ..checkins.service import window_status
from ..common.datetime_utils import now_local, parse_iso_date
from ..container import Container
from ..core.exceptions import PersistenceError, ValidationError
from .service import no_shift_dict

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/workers/<worker_id>/shift-info", methods=["GET"], endpoint="shift_info")
    def shift_info(worker_id: str):
        try:
            now = now_local()
            date_s = request.args.get("date")
            target = parse_iso_date(date_s) if date_s else now.date()

            shift = container.shift_service.get_shift_info(worker_id, target)
            body = shift.to_dict()
            if target == now.date():
                status = window_status(shift, now)
                body.update(
                    {
                        "currentTime": status.current_time,
                        "isWithinWindow": status.is_within_window,
                        "isWithinRecommended": status.is_within_recommended,
                    }
                )
            return jsonify(body), 200
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except PersistenceError:
            logger.exception("[GET shift-info] worker=%s", worker_id)
            return jsonify({"success": False, "message": "Failed to load shift info"}), 500

    @app.route("/api/workers/<worker_id>/next-shift-info", methods=["GET"], endpoint="next_shift_info")
    def next_shift_info(worker_id: str):
        try:
            from_s = request.args.get("from")
            from_date = parse_iso_date(from_s) if from_s else now_local().date() + timedelta(days=1)

            shift = container.shift_service.get_next_shift_info(worker_id, from_date)
            return jsonify(shift.to_dict() if shift else no_shift_dict()), 200
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except PersistenceError:
            logger.exception("[GET next-shift-info] worker=%s", worker_id)
            return jsonify({"success": False, "message": "Failed to load next shift"}), 500

    @app.route("/api/workers/<worker_id>/dashboard", methods=["GET"], endpoint="worker_dashboard")
    def worker_dashboard(worker_id: str):
        try:
            now = now_local()
            overview = container.shift_service.get_shift_overview(worker_id, now.date())
            status = window_status(overview.today, now)

            body = {"shift": overview.to_dict()}
            body["shift"]["today"].update(
                {
                    "currentTime": status.current_time,
                    "isWithinWindow": status.is_within_window,
                    "isWithinRecommended": status.is_within_recommended,
                }
            )
            return jsonify(body), 200
        except PersistenceError:
            logger.exception("[GET dashboard] worker=%s", worker_id)
            return jsonify({"success": False, "message": "Failed to load dashboard"}), 500
