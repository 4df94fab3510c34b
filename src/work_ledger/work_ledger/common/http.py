from __future__ import annotations

import logging
from datetime import date
from functools import wraps
from typing import Optional

from flask import jsonify, request

from ..core.exceptions import NotFoundError, ValidationError
from .datetime_utils import parse_iso_date

logger = logging.getLogger(__name__)


def json_endpoint(view):
    """Translate domain errors into JSON responses for API routes."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except Exception:
            logger.exception("Unhandled error in %s %s", request.method, request.path)
            return jsonify({"success": False, "message": "Internal server error"}), 500

    return wrapper


def json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def parse_date_arg(value: Optional[str], *, field_name: str = "date") -> date:
    try:
        return parse_iso_date((value or "").strip())
    except ValueError as e:
        raise ValidationError(f"{field_name} must be in YYYY-MM-DD format") from e


def parse_int_arg(value: Optional[str], *, field_name: str) -> int:
    try:
        return int(value or "")
    except ValueError as e:
        raise ValidationError(f"{field_name} must be an integer") from e
