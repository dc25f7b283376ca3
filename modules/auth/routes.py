"""HTTP routes for registration, login and the current profile."""

from flask import current_app, request
from flask_login import current_user, login_required

from errors import NotFoundError
from extensions import db
from utils import send_success

from . import bp
from .schemas import LoginInput, RegisterInput
from .services import AuthService
from .tokens import issue_token, token_lifetime


def _is_production() -> bool:
    return current_app.config.get("APP_ENV") == "production"


def _set_token_cookie(response, token: str) -> None:
    response.set_cookie(
        current_app.config["TOKEN_COOKIE_NAME"],
        token,
        max_age=token_lifetime(),
        httponly=True,
        secure=_is_production(),
        samesite="None" if _is_production() else "Lax",
    )


def _with_cookie(result, token: str):
    response, status = result
    _set_token_cookie(response, token)
    return response, status


@bp.route("/register", methods=["POST"])
def register():
    data = RegisterInput.model_validate(request.get_json(silent=True) or {})
    user = AuthService(db.session).register(data)
    token = issue_token(user)
    return _with_cookie(
        send_success("User registered successfully", {"user": user.to_dict(), "token": token}, 201),
        token,
    )


@bp.route("/login", methods=["POST"])
def login():
    data = LoginInput.model_validate(request.get_json(silent=True) or {})
    user = AuthService(db.session).login(data)
    token = issue_token(user)
    return _with_cookie(
        send_success("Login successful", {"user": user.to_dict(), "token": token}),
        token,
    )


@bp.route("/logout", methods=["POST"])
@login_required
def logout():
    response, status = send_success("Logout successful")
    response.delete_cookie(
        current_app.config["TOKEN_COOKIE_NAME"],
        httponly=True,
        secure=_is_production(),
        samesite="None" if _is_production() else "Lax",
    )
    return response, status


@bp.route("/me", methods=["GET"])
@login_required
def me():
    user = AuthService(db.session).get_user_by_id(current_user.id)
    if user is None:
        raise NotFoundError("User not found")
    return send_success("User profile retrieved", {"user": user.to_dict()})
