from __future__ import annotations

import logging
from dataclasses import asdict
from functools import wraps

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import DomainError, MailDeliveryError, ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def json_errors(view):
        """Translate workflow errors into the JSON acknowledgement the UI shows."""

        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except ValidationError as e:
                return jsonify({"success": False, "message": str(e)}), 400
            except MailDeliveryError as e:
                return jsonify({"success": False, "title": "Email Error", "message": str(e)}), 502
            except DomainError as e:
                return jsonify({"success": False, "message": str(e)}), 400
            except Exception:
                logger.exception("Unhandled error in %s", view.__name__)
                return jsonify({"success": False, "message": "Internal error while processing the request"}), 500

        return wrapper

    @app.route("/api/status", methods=["GET"], endpoint="clock_status")
    @json_errors
    def clock_status():
        state = container.clock_service.status()
        return jsonify({"success": True, "isClockedIn": state.is_clocked_in, "isOnBreak": state.is_on_break})

    @app.route("/api/clock", methods=["POST"], endpoint="clock_toggle")
    @json_errors
    def clock_toggle():
        data = request.get_json(silent=True) or {}
        result = container.clock_service.record_time_log(data.get("time") or None)
        return jsonify({"success": True, **asdict(result)})

    @app.route("/api/break", methods=["POST"], endpoint="break_toggle")
    @json_errors
    def break_toggle():
        result = container.clock_service.toggle_break()
        return jsonify({"success": True, **asdict(result)})

    @app.route("/api/report/mark", methods=["POST"], endpoint="report_mark")
    @json_errors
    def report_mark():
        result = container.clock_service.mark_hours_reported()
        return jsonify({"success": True, **asdict(result)})

    @app.route("/api/report/send", methods=["POST"], endpoint="report_send")
    @json_errors
    def report_send():
        data = request.get_json(silent=True) or {}
        result = container.clock_service.clock_out_and_report(data.get("message"))
        return jsonify({"success": True, **asdict(result)})

    @app.route("/api/report", methods=["GET"], endpoint="report_data")
    @json_errors
    def report_data():
        summary = container.report_service.build_since_checkpoint()
        return jsonify({"success": True, **summary.to_dict()})

    @app.route("/report/preview", methods=["GET"], endpoint="report_preview")
    @json_errors
    def report_preview():
        email = container.clock_service.preview_report_email()
        return app.response_class(email.html_body, mimetype="text/html")

    @app.route("/api/sync/report", methods=["GET"], endpoint="synced_report")
    @json_errors
    def synced_report():
        rows = container.sync_service.calculate_report_from_synced_logs(
            request.args.get("start"),
            request.args.get("end"),
        )
        return jsonify({"success": True, "rows": rows})
