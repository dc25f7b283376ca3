"""Authentication module package."""

from flask import Blueprint

bp = Blueprint("auth", __name__, url_prefix="/api/v1/auth")

from . import loader  # noqa: E402  pylint: disable=wrong-import-position
from . import routes  # noqa: E402  pylint: disable=wrong-import-position

__all__ = ["bp", "loader", "routes"]
