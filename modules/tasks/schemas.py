"""Request validation for the tasks endpoints."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from errors import BadRequestError

from .models import Priority, TaskStatus

SortField = Literal["createdAt", "updatedAt", "title", "dueDate", "priority", "status"]
SortOrder = Literal["asc", "desc"]


def parse_uuid(value: str, message: str = "Invalid ID") -> str:
    """Canonical lower-case UUID string, or 400."""
    try:
        return str(uuid.UUID(value))
    except (ValueError, AttributeError, TypeError):
        raise BadRequestError(message, errors=[{"field": "id", "message": message}])


def _clean_title(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("Title is required")
    if len(v) > 200:
        raise ValueError("Title is too long")
    return v


class _TaskFields(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("description", check_fields=False)
    @classmethod
    def description_length(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and len(v) > 2000:
            raise ValueError("Description is too long")
        return v

    @field_validator("due_date", check_fields=False)
    @classmethod
    def due_date_as_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        # stored naive, in UTC
        if v is not None and v.tzinfo is not None:
            v = v.astimezone(timezone.utc).replace(tzinfo=None)
        return v


class TaskCreate(_TaskFields):
    title: str
    description: Optional[str] = None
    status: TaskStatus = TaskStatus.PENDING
    priority: Priority = Priority.MEDIUM
    due_date: Optional[datetime] = Field(default=None, alias="dueDate")

    @field_validator("title")
    @classmethod
    def title_rules(cls, v: str) -> str:
        return _clean_title(v)


class TaskUpdate(_TaskFields):
    """Partial update: only fields present in the body are applied."""

    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    priority: Optional[Priority] = None
    due_date: Optional[datetime] = Field(default=None, alias="dueDate")

    @field_validator("title", "status", "priority")
    @classmethod
    def not_null(cls, v):
        # runs only for values actually sent; description/dueDate may be cleared
        if v is None:
            raise ValueError("Field may not be null")
        return v

    @field_validator("title")
    @classmethod
    def title_rules(cls, v: str) -> str:
        return _clean_title(v)

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class TaskQuery(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    page: Optional[int] = None
    limit: Optional[int] = None
    status: Optional[TaskStatus] = None
    priority: Optional[Priority] = None
    search: Optional[str] = None
    sort_by: SortField = Field(default="createdAt", alias="sortBy")
    order: SortOrder = "desc"

    @field_validator("search")
    @classmethod
    def empty_search_is_none(cls, v: Optional[str]) -> Optional[str]:
        # matched as given; only an empty term means no filter
        return v or None
