from __future__ import annotations

import logging
from functools import wraps

from flask import jsonify, request

from ..core.exceptions import NotFoundError, ValidationError
from ..storage.warnings import PersistenceWarnings

logger = logging.getLogger(__name__)


def api_errors(failure_message: str):
    """Map domain errors to JSON responses (400 / 404, 500 for anything else)."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except ValidationError as e:
                return jsonify({"success": False, "message": str(e)}), 400
            except NotFoundError as e:
                return jsonify({"success": False, "message": str(e)}), 404
            except Exception:
                logger.exception(failure_message)
                return jsonify({"success": False, "message": failure_message}), 500

        return wrapper

    return decorator


def json_ok(warnings: PersistenceWarnings, message: str, status: int = 200, **payload):
    body = {"success": True, "message": message, **payload}
    pending = warnings.drain()
    if pending:
        body["warning"] = " ".join(pending)
    return jsonify(body), status


def form_data() -> dict:
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()
