from __future__ import annotations

import json
import logging

from flask import Flask, jsonify, request

from ..common.validators import require_non_empty
from ..container import Container
from ..core.exceptions import DomainError
from .registry import build_registry, dispatch

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    registry = build_registry(container)

    @app.route("/api/rpc", methods=["POST"], endpoint="rpc_gateway")
    def rpc_gateway():
        """Dispatch ``{functionName, parameters}`` to a registered function.

        Clients send the envelope as text/plain, so the body is parsed by hand.
        Handled failures come back as ``{"status": "error"}`` with HTTP 200.
        """
        try:
            envelope = json.loads(request.get_data(as_text=True) or "{}")
        except ValueError as e:
            return jsonify({"status": "error", "message": f"Invalid JSON request: {e}"})

        try:
            if not isinstance(envelope, dict):
                raise DomainError("Request body must be a JSON object")

            function_name = require_non_empty(envelope.get("functionName"), "functionName")
            parameters = envelope.get("parameters") or []
            if not isinstance(parameters, list):
                raise DomainError("parameters must be a JSON array")

            result = dispatch(registry, function_name, parameters)
            return jsonify({"status": "success", "result": result})

        except DomainError as e:
            logger.info("Gateway call rejected: %s", e)
            return jsonify({"status": "error", "message": str(e)})
        except Exception:
            logger.exception("Gateway call failed")
            return jsonify({"status": "error", "message": "Internal error while executing function"}), 500
