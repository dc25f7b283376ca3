"""Account registration, login and admin user management."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session
from werkzeug.security import check_password_hash, generate_password_hash

from errors import ConflictError, NotFoundError, UnauthorizedError
from models import Role, User

from .schemas import LoginInput, RegisterInput

logger = logging.getLogger(__name__)


class AuthService:
    """Works against the SQLAlchemy session it is given."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_by_email(self, email: str) -> User | None:
        return self.session.scalar(select(User).where(User.email == email.lower()))

    def register(self, data: RegisterInput, role: Role = Role.USER) -> User:
        email = data.email.lower()
        if self.find_by_email(email) is not None:
            raise ConflictError("User with this email already exists")

        user = User(
            email=email,
            password=generate_password_hash(data.password),
            name=data.name,
            role=role,
        )
        self.session.add(user)
        self.session.commit()
        logger.info("Registered user %s (%s)", user.id, user.role.value)
        return user

    def login(self, data: LoginInput) -> User:
        user = self.find_by_email(data.email)
        if user is None or not check_password_hash(user.password, data.password):
            logger.info("Failed login for %s", data.email.lower())
            raise UnauthorizedError("Invalid email or password")
        return user

    def get_user_by_id(self, user_id: str) -> User | None:
        return self.session.get(User, user_id)

    def get_all_users(self) -> list[User]:
        return list(self.session.scalars(select(User).order_by(User.created_at.desc())))

    def delete_user(self, user_id: str) -> None:
        user = self.session.get(User, user_id)
        if user is None:
            raise NotFoundError("User not found")
        self.session.delete(user)
        self.session.commit()
        logger.info("Deleted user %s and their tasks", user_id)
