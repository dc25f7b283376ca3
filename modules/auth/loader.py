"""Resolves the request principal from a signed token for Flask-Login."""

from __future__ import annotations

import logging

from flask import current_app, g, request

from errors import UnauthorizedError
from extensions import db, login_manager
from models import User
from permissions import Principal

from .tokens import TokenError, TokenExpiredError, decode_token

logger = logging.getLogger(__name__)

DEFAULT_UNAUTHORIZED = "Authentication required. Please log in."


def extract_token(req) -> str | None:
    """Cookie first, then ``Authorization: Bearer``."""
    token = req.cookies.get(current_app.config["TOKEN_COOKIE_NAME"])
    if token:
        return token
    header = req.headers.get("Authorization", "")
    if header.startswith("Bearer "):
        return header.split(" ", 1)[1].strip() or None
    return None


@login_manager.request_loader
def load_principal(req) -> Principal | None:
    token = extract_token(req)
    if not token:
        return None

    try:
        claims = decode_token(token)
    except TokenExpiredError:
        g.auth_error = "Token expired"
        return None
    except TokenError as e:
        logger.debug("Rejected token: %s", e)
        g.auth_error = "Invalid token"
        return None

    # freshness: the account may have been deleted since the token was issued
    user = db.session.get(User, claims["sub"])
    if user is None:
        g.auth_error = "User no longer exists"
        return None
    return Principal.from_user(user)


@login_manager.unauthorized_handler
def unauthorized():
    raise UnauthorizedError(g.get("auth_error") or DEFAULT_UNAUTHORIZED)
