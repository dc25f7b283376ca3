"""HTTP routes for the tasks domain (owner-scoped)."""

from flask import request
from flask_login import current_user, login_required

from extensions import db
from utils import send_success

from . import bp
from .schemas import TaskCreate, TaskQuery, TaskUpdate, parse_uuid
from .services import TaskService
from .store import SqlTaskStore


def task_service() -> TaskService:
    return TaskService(SqlTaskStore(db.session))


def _task_id(raw: str) -> str:
    return parse_uuid(raw, "Invalid task ID")


@bp.route("", methods=["GET"])
@login_required
def list_tasks():
    query = TaskQuery.model_validate(request.args.to_dict())
    tasks, pagination = task_service().list_for(current_user, query)
    return send_success(
        "Tasks retrieved successfully",
        {"tasks": [t.to_dict() for t in tasks]},
        pagination=pagination,
    )


@bp.route("/stats", methods=["GET"])
@login_required
def task_stats():
    stats = task_service().stats(current_user)
    return send_success("Task statistics retrieved", {"stats": stats})


@bp.route("/<task_id>", methods=["GET"])
@login_required
def get_task(task_id):
    task = task_service().get(_task_id(task_id), current_user)
    return send_success("Task retrieved successfully", {"task": task.to_dict()})


@bp.route("", methods=["POST"])
@login_required
def create_task():
    data = TaskCreate.model_validate(request.get_json(silent=True) or {})
    task = task_service().create(current_user, data)
    return send_success("Task created successfully", {"task": task.to_dict()}, 201)


@bp.route("/<task_id>", methods=["PUT"])
@login_required
def update_task(task_id):
    task_id = _task_id(task_id)
    data = TaskUpdate.model_validate(request.get_json(silent=True) or {})
    task = task_service().update(task_id, current_user, data)
    return send_success("Task updated successfully", {"task": task.to_dict()})


@bp.route("/<task_id>", methods=["DELETE"])
@login_required
def delete_task(task_id):
    task_service().delete(_task_id(task_id), current_user)
    return send_success("Task deleted successfully")
