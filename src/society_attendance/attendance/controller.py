from __future__ import annotations

from flask import Flask, jsonify, render_template, request

from ..common.auth import login_required
from ..core.enums import AttendanceSession
from ..core.exceptions import DomainError
from ..container import Container
from .decoding import decode_card_image


def register(app: Flask, container: Container) -> None:
    def _event_id(value) -> int | None:
        try:
            return int(value) if value not in (None, "") else None
        except (TypeError, ValueError):
            return None

    def _scan(code: str, event_id, session):
        try:
            result = container.attendance_service.record_scan(code, event_id=_event_id(event_id), session=session)
            return jsonify(result.to_dict()), 200
        except DomainError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            app.logger.exception("Failed to record attendance for %r", code)
            return jsonify({"success": False, "message": "Failed to record attendance"}), 500

    @app.route("/scanner", endpoint="scanner")
    @login_required
    def scanner():
        return render_template(
            "attendance/scanner.html",
            events=container.event_service.list_events(),
            sessions=[s.value for s in AttendanceSession],
            active_page="scanner",
        )

    @app.route("/api/scan", methods=["POST"], endpoint="api_scan")
    @login_required
    def api_scan():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({"success": False, "message": "Expected a JSON object"}), 400
        return _scan(str(data.get("code") or ""), data.get("event_id"), data.get("session") or None)

    @app.route("/api/scan/image", methods=["POST"], endpoint="api_scan_image")
    @login_required
    def api_scan_image():
        if "image" not in request.files:
            return jsonify({"success": False, "message": "Missing image file"}), 400
        try:
            code = decode_card_image(request.files["image"].stream)
        except DomainError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            app.logger.exception("Failed to decode uploaded card image")
            return jsonify({"success": False, "message": "Failed to read the uploaded image"}), 500
        return _scan(code, request.form.get("event_id"), request.form.get("session") or None)
