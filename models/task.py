"""Task model definition."""

from . import db, utcnow


TASK_STATUSES = ("pending", "in-progress", "completed")
TASK_PRIORITIES = ("low", "medium", "high")


class Task(db.Model):
    """A to-do item owned by exactly one user."""

    __tablename__ = "tasks"

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(100), nullable=False)
    description = db.Column(db.String(500), nullable=True)
    status = db.Column(
        db.Enum(*TASK_STATUSES, name="task_status"),
        nullable=False,
        default="pending",
        server_default=db.text("'pending'"),
    )
    priority = db.Column(
        db.Enum(*TASK_PRIORITIES, name="task_priority"),
        nullable=False,
        default="medium",
        server_default=db.text("'medium'"),
    )
    due_date = db.Column(db.DateTime, nullable=True)
    user_id = db.Column(
        db.Integer,
        db.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow, index=True)
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    owner = db.relationship("User", back_populates="tasks")

    def is_owned_by(self, user) -> bool:
        return user is not None and self.user_id == user.id

    def to_dict(self) -> dict:
        """Serialize the task into the shape the dashboard client consumes."""

        return {
            "_id": self.id,
            "title": self.title,
            "description": self.description,
            "status": self.status,
            "priority": self.priority,
            "dueDate": self.due_date.isoformat() if self.due_date else None,
            "user": self.user_id,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self) -> str:
        return f"<Task id={self.id} user_id={self.user_id} status={self.status}>"
