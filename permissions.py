# permissions.py
"""
Authorization policy.

- Principal             — the authenticated actor of one request (rebuilt per request).
- can_access(p, task)   — admin or owner; the same rule for read, update and delete.
- scope_for_list(p)     — owner filter for list queries (None = no restriction).
- role_required(*roles) — view decorator: 401 when anonymous, 403 when the role is missing.

Roles:
- USER  — own tasks only
- ADMIN — every task, user listing and deletion
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import wraps
from typing import Any

from flask_login import UserMixin, current_user, login_required

from errors import ForbiddenError
from models import Role


@dataclass(frozen=True)
class Principal(UserMixin):
    id: str
    email: str
    name: str
    role: Role

    @classmethod
    def from_user(cls, user: Any) -> "Principal":
        return cls(id=user.id, email=user.email, name=user.name, role=Role(user.role))

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


# ------------------------------- DECISIONS -------------------------------- #
def can_access(principal: Any, task: Any) -> bool:
    """True iff the principal is an admin or owns the task."""
    return principal.role == Role.ADMIN or task.user_id == principal.id


def scope_for_list(principal: Any) -> str | None:
    """Owner id to restrict a listing to; admins see everything by omission."""
    if principal.role == Role.ADMIN:
        return None
    return principal.id


# ------------------------------- DECORATORS ------------------------------- #
def role_required(*roles: Role | str):
    """
    Restrict a view to the given roles.

        @role_required(Role.ADMIN)
        def view(): ...

    Authentication is checked first, so an anonymous caller always gets 401
    and never reaches the role check.
    """
    allowed = {Role(r) for r in roles}

    def decorator(view_func):
        @wraps(view_func)
        @login_required
        def wrapped(*args, **kwargs):
            if current_user.role not in allowed:
                names = ", ".join(sorted(r.value for r in allowed))
                raise ForbiddenError(f"Access denied. Required roles: {names}")
            return view_func(*args, **kwargs)

        return wrapped
    return decorator


admin_required = role_required(Role.ADMIN)
