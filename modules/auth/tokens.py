"""Signed access tokens (PyJWT)."""

from __future__ import annotations

import re
from datetime import timedelta

import jwt
from flask import current_app

from utils import utc_now

_DURATION_RE = re.compile(r"^\s*(\d+)\s*([smhd]?)\s*$")
_UNIT_SECONDS = {"": 1, "s": 1, "m": 60, "h": 3600, "d": 86400}


class TokenError(Exception):
    """Base exception for token errors."""


class TokenExpiredError(TokenError):
    """Token has expired."""


class TokenInvalidError(TokenError):
    """Token is invalid or malformed."""


def parse_duration(value: str | int) -> int:
    """'7d' / '12h' / '30m' / '45s' / '3600' -> seconds."""
    if isinstance(value, int):
        return value
    match = _DURATION_RE.match(value or "")
    if not match:
        raise ValueError(f"Invalid duration: {value!r}")
    return int(match.group(1)) * _UNIT_SECONDS[match.group(2)]


def token_lifetime() -> int:
    return parse_duration(current_app.config["JWT_EXPIRES_IN"])


def issue_token(user) -> str:
    now = utc_now()
    payload = {
        "sub": user.id,
        "email": user.email,
        "name": user.name,
        "role": user.role.value,
        "iat": now,
        "exp": now + timedelta(seconds=token_lifetime()),
    }
    return jwt.encode(
        payload,
        current_app.config["JWT_SECRET"],
        algorithm=current_app.config["JWT_ALGORITHM"],
    )


def decode_token(token: str) -> dict:
    """
    Verify signature and expiry.

    Raises:
        TokenExpiredError: token has expired
        TokenInvalidError: anything else wrong with it
    """
    try:
        payload = jwt.decode(
            token,
            current_app.config["JWT_SECRET"],
            algorithms=[current_app.config["JWT_ALGORITHM"]],
            options={"require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError:
        raise TokenExpiredError("Token expired")
    except jwt.InvalidTokenError as e:
        raise TokenInvalidError(f"Invalid token: {e}")
    return payload
