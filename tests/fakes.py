# tests/fakes.py

from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone
from typing import Any

from modules.tasks.models import PRIORITY_RANK, STATUS_RANK, Priority, Task, TaskStatus
from modules.tasks.store import TaskFilter, TaskSort

_EPOCH = datetime(2024, 1, 1, tzinfo=timezone.utc)

TEST_PASSWORD = "Passw0rd!"


class FakeTaskStore:
    """
    In-memory TaskStore for service tests.

    - No database, no app context
    - Records mutating calls for assertions
    """

    def __init__(self) -> None:
        self.tasks: dict[str, Task] = {}
        self.calls: list[tuple[str, str]] = []
        self._tick = 0

    def _now(self) -> datetime:
        self._tick += 1
        return _EPOCH + timedelta(seconds=self._tick)

    def add(self, owner_id: str, **fields: Any) -> Task:
        fields.setdefault("title", "Task")
        fields.setdefault("status", TaskStatus.PENDING)
        fields.setdefault("priority", Priority.MEDIUM)
        task = Task(user_id=owner_id, **fields)
        return self.insert(task)

    @staticmethod
    def _matches(task: Task, f: TaskFilter) -> bool:
        if f.owner_id is not None and task.user_id != f.owner_id:
            return False
        if f.status is not None and task.status != f.status:
            return False
        if f.priority is not None and task.priority != f.priority:
            return False
        if f.search:
            term = f.search.lower()
            haystacks = [task.title or "", task.description or ""]
            if not any(term in h.lower() for h in haystacks):
                return False
        return True

    @staticmethod
    def _key(task: Task, field: str):
        return {
            "createdAt": lambda: task.created_at,
            "updatedAt": lambda: task.updated_at,
            "title": lambda: task.title,
            # undated last ascending, first descending
            "dueDate": lambda: (task.due_date is None, task.due_date or datetime.min),
            "priority": lambda: PRIORITY_RANK[task.priority],
            "status": lambda: STATUS_RANK[task.status],
        }[field]()

    def find_by_id(self, task_id: str) -> Task | None:
        return self.tasks.get(task_id)

    def find_many(self, task_filter: TaskFilter, sort: TaskSort, skip: int, take: int,
                  with_owner: bool = False) -> list[Task]:
        rows = [t for t in self.tasks.values() if self._matches(t, task_filter)]
        rows.sort(key=lambda t: (self._key(t, sort.field), t.id), reverse=sort.order == "desc")
        return rows[skip:skip + take]

    def count(self, task_filter: TaskFilter) -> int:
        return sum(1 for t in self.tasks.values() if self._matches(t, task_filter))

    def count_by_status(self, owner_id: str) -> dict[TaskStatus, int]:
        counts = {s: 0 for s in TaskStatus}
        for t in self.tasks.values():
            if t.user_id == owner_id:
                counts[t.status] += 1
        return counts

    def insert(self, task: Task) -> Task:
        task.id = task.id or str(uuid.uuid4())
        task.created_at = task.updated_at = self._now()
        self.tasks[task.id] = task
        self.calls.append(("insert", task.id))
        return task

    def update(self, task: Task, changes: dict[str, Any]) -> Task:
        for name, value in changes.items():
            setattr(task, name, value)
        task.updated_at = self._now()
        self.calls.append(("update", task.id))
        return task

    def delete(self, task: Task) -> None:
        del self.tasks[task.id]
        self.calls.append(("delete", task.id))
