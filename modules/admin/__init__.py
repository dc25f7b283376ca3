"""Admin module package: cross-user views, ADMIN role only."""

from flask import Blueprint

bp = Blueprint("admin", __name__, url_prefix="/api/v1/admin")

from . import routes  # noqa: E402  pylint: disable=wrong-import-position

__all__ = ["bp", "routes"]
