"""Shared SQLAlchemy models."""

import enum
import uuid

from extensions import db
from utils import isoformat, utc_now


def new_id() -> str:
    return str(uuid.uuid4())


class Role(str, enum.Enum):
    USER = "USER"
    ADMIN = "ADMIN"


class User(db.Model):
    """Represents a registered account; tasks are deleted along with it."""

    __tablename__ = "users"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password = db.Column(db.String(255), nullable=False)
    name = db.Column(db.String(100), nullable=False)
    role = db.Column(db.Enum(Role, name="role"), nullable=False, default=Role.USER)
    created_at = db.Column(db.DateTime, nullable=False, default=utc_now)
    updated_at = db.Column(db.DateTime, nullable=False, default=utc_now, onupdate=utc_now)

    tasks = db.relationship(
        "Task",
        back_populates="user",
        cascade="all, delete-orphan",
    )

    def to_dict(self) -> dict:
        """Public representation; never includes the password hash."""
        return {
            "id": self.id,
            "email": self.email,
            "name": self.name,
            "role": self.role.value,
            "createdAt": isoformat(self.created_at),
            "updatedAt": isoformat(self.updated_at),
        }

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<User {self.email}>"
