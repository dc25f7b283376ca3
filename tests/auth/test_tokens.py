import pytest

from models import Role, User
from modules.auth.tokens import TokenExpiredError, TokenInvalidError, decode_token, issue_token, parse_duration


@pytest.mark.parametrize("raw, seconds", [("7d", 604800), ("12h", 43200), ("30m", 1800), ("45s", 45),
                                          ("3600", 3600), (90, 90)])
def test_parse_duration(raw, seconds):
    assert parse_duration(raw) == seconds


def test_parse_duration_rejects_garbage():
    with pytest.raises(ValueError):
        parse_duration("soon")


def test_issue_and_decode(app):
    user = User(id="1f0e6c1e-0000-4000-8000-000000000001", email="t@example.com", name="T", role=Role.ADMIN)
    with app.app_context():
        claims = decode_token(issue_token(user))
    assert claims["sub"] == user.id
    assert claims["role"] == "ADMIN"
    assert claims["exp"] - claims["iat"] == 7 * 86400


def test_zero_lifetime_token_is_expired(app):
    app.config["JWT_EXPIRES_IN"] = "0s"
    user = User(id="u", email="t@example.com", name="T", role=Role.USER)
    with app.app_context():
        token = issue_token(user)
        app.config["JWT_EXPIRES_IN"] = "7d"
        with pytest.raises(TokenExpiredError):
            decode_token(token)


def test_decode_garbage(app):
    with app.app_context():
        with pytest.raises(TokenInvalidError):
            decode_token("garbage")
