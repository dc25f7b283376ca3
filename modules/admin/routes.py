"""HTTP routes for administrators."""

from flask import request
from flask_login import current_user

from extensions import db
from modules.auth.services import AuthService
from modules.tasks.routes import task_service
from modules.tasks.schemas import TaskQuery, parse_uuid
from permissions import admin_required
from utils import send_success

from . import bp


@bp.route("/tasks", methods=["GET"])
@admin_required
def all_tasks():
    query = TaskQuery.model_validate(request.args.to_dict())
    # admin principal: scope_for_list imposes no owner restriction
    tasks, pagination = task_service().list_for(current_user, query, with_owner=True)
    return send_success(
        "All tasks retrieved successfully",
        {"tasks": [t.to_dict(with_owner=True) for t in tasks]},
        pagination=pagination,
    )


@bp.route("/users", methods=["GET"])
@admin_required
def all_users():
    users = AuthService(db.session).get_all_users()
    return send_success("All users retrieved successfully", {"users": [u.to_dict() for u in users]})


@bp.route("/users/<user_id>", methods=["DELETE"])
@admin_required
def delete_user(user_id):
    AuthService(db.session).delete_user(parse_uuid(user_id, "Invalid user ID"))
    return send_success("User deleted successfully")
