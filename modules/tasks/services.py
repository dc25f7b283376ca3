"""Task use cases: scope, authorize, then call the store."""

from __future__ import annotations

import logging
from typing import Any

from errors import ForbiddenError, NotFoundError
from permissions import can_access, scope_for_list
from utils import pagination_info, parse_pagination

from .models import Task, TaskStatus
from .schemas import TaskCreate, TaskQuery, TaskUpdate
from .store import TaskFilter, TaskSort, TaskStore

logger = logging.getLogger(__name__)


class TaskService:
    def __init__(self, store: TaskStore) -> None:
        self.store = store

    def resolve_and_authorize(self, task_id: str, principal: Any) -> Task:
        """
        Fetch a task the principal may act on.

        Existence is checked before permission: a missing id is always 404
        whatever the role, someone else's existing task is 403.
        """
        task = self.store.find_by_id(task_id)
        if task is None:
            raise NotFoundError("Task not found")
        if not can_access(principal, task):
            raise ForbiddenError("You do not have permission to access this task")
        return task

    def create(self, principal: Any, data: TaskCreate) -> Task:
        task = Task(
            title=data.title,
            description=data.description,
            status=data.status,
            priority=data.priority,
            due_date=data.due_date,
            user_id=principal.id,
        )
        task = self.store.insert(task)
        logger.info("User %s created task %s", principal.id, task.id)
        return task

    def list_for(self, principal: Any, query: TaskQuery,
                 with_owner: bool = False) -> tuple[list[Task], dict]:
        paging = parse_pagination(query.page, query.limit)
        task_filter = TaskFilter(
            owner_id=scope_for_list(principal),
            status=query.status,
            priority=query.priority,
            search=query.search,
        )
        sort = TaskSort(field=query.sort_by, order=query.order)

        tasks = self.store.find_many(task_filter, sort, paging["skip"], paging["take"],
                                     with_owner=with_owner)
        total = self.store.count(task_filter)
        return tasks, pagination_info(paging["page"], paging["limit"], total)

    def get(self, task_id: str, principal: Any) -> Task:
        return self.resolve_and_authorize(task_id, principal)

    def update(self, task_id: str, principal: Any, data: TaskUpdate) -> Task:
        task = self.resolve_and_authorize(task_id, principal)
        return self.store.update(task, data.changes())

    def delete(self, task_id: str, principal: Any) -> None:
        task = self.resolve_and_authorize(task_id, principal)
        self.store.delete(task)
        logger.info("User %s deleted task %s", principal.id, task_id)

    def stats(self, principal: Any) -> dict[str, int]:
        """Counts of the principal's own tasks, by status."""
        counts = self.store.count_by_status(principal.id)
        return {
            "total": sum(counts.values()),
            "pending": counts.get(TaskStatus.PENDING, 0),
            "inProgress": counts.get(TaskStatus.IN_PROGRESS, 0),
            "completed": counts.get(TaskStatus.COMPLETED, 0),
        }
