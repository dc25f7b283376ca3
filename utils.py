"""Response envelope and pagination helpers shared by all blueprints."""

from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Any

from flask import jsonify

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def isoformat(value: datetime | None) -> str | None:
    """Render a timestamp as ISO-8601 UTC (naive values from SQLite are UTC)."""
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat().replace("+00:00", "Z")


def send_success(message: str, data: Any = None, status_code: int = 200,
                 pagination: dict | None = None):
    body: dict[str, Any] = {"success": True, "message": message}
    if data is not None:
        body["data"] = data
    if pagination is not None:
        body["pagination"] = pagination
    return jsonify(body), status_code


def send_error(message: str, status_code: int = 500, errors: list[dict] | None = None):
    body: dict[str, Any] = {"success": False, "message": message}
    if errors:
        body["errors"] = errors
    return jsonify(body), status_code


def parse_pagination(page: int | None = None, limit: int | None = None) -> dict[str, int]:
    """Clamp page to >= 1 and limit to [1, MAX_LIMIT]; compute skip/take."""
    page = max(1, page if page is not None else DEFAULT_PAGE)
    limit = min(MAX_LIMIT, max(1, limit if limit is not None else DEFAULT_LIMIT))
    return {
        "page": page,
        "limit": limit,
        "skip": (page - 1) * limit,
        "take": limit,
    }


def pagination_info(page: int, limit: int, total: int) -> dict[str, int]:
    return {
        "page": page,
        "limit": limit,
        "total": total,
        "totalPages": math.ceil(total / limit),
    }
