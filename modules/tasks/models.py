"""SQLAlchemy models for the tasks domain."""

import enum

from extensions import db
from models import new_id
from utils import isoformat, utc_now


class TaskStatus(str, enum.Enum):
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"


class Priority(str, enum.Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


# Sort rank follows declaration order, not the stored string
STATUS_RANK = {s: i for i, s in enumerate(TaskStatus)}
PRIORITY_RANK = {p: i for i, p in enumerate(Priority)}


class Task(db.Model):
    """A unit of work owned by exactly one user.

    ``status`` has no transition graph: any value may be set at any time.
    """

    __tablename__ = "tasks"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text)
    status = db.Column(db.Enum(TaskStatus, name="task_status"), nullable=False,
                       default=TaskStatus.PENDING)
    priority = db.Column(db.Enum(Priority, name="priority"), nullable=False,
                         default=Priority.MEDIUM)
    due_date = db.Column(db.DateTime)
    user_id = db.Column(db.String(36), db.ForeignKey("users.id", ondelete="CASCADE"),
                        nullable=False, index=True)
    created_at = db.Column(db.DateTime, nullable=False, default=utc_now)
    updated_at = db.Column(db.DateTime, nullable=False, default=utc_now, onupdate=utc_now)

    user = db.relationship("User", back_populates="tasks")

    def to_dict(self, with_owner: bool = False) -> dict:
        data = {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "status": self.status.value,
            "priority": self.priority.value,
            "dueDate": isoformat(self.due_date),
            "userId": self.user_id,
            "createdAt": isoformat(self.created_at),
            "updatedAt": isoformat(self.updated_at),
        }
        if with_owner and self.user is not None:
            data["user"] = {"name": self.user.name, "email": self.user.email}
        return data

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<Task {self.id}: {self.title}>"
