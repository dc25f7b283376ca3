"""Request bodies for the auth endpoints."""

import re

from pydantic import BaseModel, EmailStr, Field, field_validator

_PASSWORD_RE = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)")


class RegisterInput(BaseModel):
    email: EmailStr
    password: str = Field(min_length=8, max_length=100)
    name: str

    @field_validator("email")
    @classmethod
    def email_length(cls, v: str) -> str:
        if len(v) > 255:
            raise ValueError("Email is too long")
        return v

    @field_validator("password")
    @classmethod
    def password_strength(cls, v: str) -> str:
        if not _PASSWORD_RE.match(v):
            raise ValueError(
                "Password must contain at least one uppercase letter, "
                "one lowercase letter, and one number"
            )
        return v

    @field_validator("name")
    @classmethod
    def name_length(cls, v: str) -> str:
        v = v.strip()
        if len(v) < 2:
            raise ValueError("Name must be at least 2 characters")
        if len(v) > 100:
            raise ValueError("Name is too long")
        return v


class LoginInput(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)
