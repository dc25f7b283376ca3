"""
Task persistence.

The service only composes a TaskFilter / TaskSort and calls these methods;
SqlTaskStore is the SQLAlchemy implementation used by the app, tests swap
in an in-memory store with the same surface.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Protocol

from sqlalchemy import case, func, or_, select
from sqlalchemy.orm import Session, joinedload

from .models import PRIORITY_RANK, STATUS_RANK, Priority, Task, TaskStatus


@dataclass(frozen=True)
class TaskFilter:
    owner_id: Optional[str] = None        # None = every owner
    status: Optional[TaskStatus] = None
    priority: Optional[Priority] = None
    search: Optional[str] = None          # title OR description, case-insensitive


@dataclass(frozen=True)
class TaskSort:
    field: str = "createdAt"
    order: str = "desc"


class TaskStore(Protocol):
    def find_by_id(self, task_id: str) -> Optional[Task]: ...

    def find_many(self, task_filter: TaskFilter, sort: TaskSort, skip: int, take: int,
                  with_owner: bool = False) -> list[Task]: ...

    def count(self, task_filter: TaskFilter) -> int: ...

    def insert(self, task: Task) -> Task: ...

    def update(self, task: Task, changes: dict[str, Any]) -> Task: ...

    def delete(self, task: Task) -> None: ...

    def count_by_status(self, owner_id: str) -> dict[TaskStatus, int]: ...


class SqlTaskStore:
    """TaskStore over a SQLAlchemy session; every mutation commits."""

    def __init__(self, session: Session) -> None:
        self.session = session

    # ---------- query building ----------
    @staticmethod
    def _where(task_filter: TaskFilter) -> list:
        clauses = []
        if task_filter.owner_id is not None:
            clauses.append(Task.user_id == task_filter.owner_id)
        if task_filter.status is not None:
            clauses.append(Task.status == task_filter.status)
        if task_filter.priority is not None:
            clauses.append(Task.priority == task_filter.priority)
        if task_filter.search:
            term = task_filter.search
            clauses.append(or_(
                Task.title.icontains(term, autoescape=True),
                Task.description.icontains(term, autoescape=True),
            ))
        return clauses

    @staticmethod
    def _sort_key(field: str):
        if field == "priority":
            return case(PRIORITY_RANK, value=Task.priority)
        if field == "status":
            return case(STATUS_RANK, value=Task.status)
        return {
            "createdAt": Task.created_at,
            "updatedAt": Task.updated_at,
            "title": Task.title,
            "dueDate": Task.due_date,
        }[field]

    def _order_by(self, sort: TaskSort) -> list:
        key = self._sort_key(sort.field)
        # NULL due dates: last ascending, first descending
        if sort.order == "asc":
            return [key.asc().nulls_last(), Task.id.asc()]
        return [key.desc().nulls_first(), Task.id.desc()]

    # ---------- reads ----------
    def find_by_id(self, task_id: str) -> Optional[Task]:
        return self.session.get(Task, task_id)

    def find_many(self, task_filter: TaskFilter, sort: TaskSort, skip: int, take: int,
                  with_owner: bool = False) -> list[Task]:
        stmt = (select(Task)
                .where(*self._where(task_filter))
                .order_by(*self._order_by(sort))
                .offset(skip)
                .limit(take))
        if with_owner:
            stmt = stmt.options(joinedload(Task.user))
        return list(self.session.scalars(stmt))

    def count(self, task_filter: TaskFilter) -> int:
        stmt = select(func.count()).select_from(Task).where(*self._where(task_filter))
        return self.session.scalar(stmt) or 0

    def count_by_status(self, owner_id: str) -> dict[TaskStatus, int]:
        rows = self.session.execute(
            select(Task.status, func.count())
            .where(Task.user_id == owner_id)
            .group_by(Task.status)
        ).all()
        counts = {s: 0 for s in TaskStatus}
        counts.update({status: n for status, n in rows})
        return counts

    # ---------- writes ----------
    def insert(self, task: Task) -> Task:
        self.session.add(task)
        self.session.commit()
        return task

    def update(self, task: Task, changes: dict[str, Any]) -> Task:
        for name, value in changes.items():
            setattr(task, name, value)
        self.session.commit()
        return task

    def delete(self, task: Task) -> None:
        self.session.delete(task)
        self.session.commit()
