"""Seed a demo user with a handful of tasks."""

import sys
from datetime import timedelta
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from app import create_app
from models import db, utcnow
from models.task import Task
from models.user import User

DEMO_NAME = "Demo User"
DEMO_EMAIL = "demo@example.com"
DEMO_PASSWORD = "DemoPass123"


def get_or_create_user(name: str, email: str, password: str) -> User:
    user = User.query.filter_by(email=User.normalize_email(email)).first()
    if user is None:
        user = User(name=name, email=email, password=password)
        db.session.add(user)
    else:
        user.name = name
        user.password = password
    return user


def main() -> None:
    app = create_app()
    with app.app_context():
        db.create_all()
        user = get_or_create_user(DEMO_NAME, DEMO_EMAIL, DEMO_PASSWORD)
        db.session.flush()

        now = utcnow()
        tasks_data = [
            {
                "title": "Buy milk",
                "description": "Two litres, semi-skimmed.",
                "priority": "low",
                "due_date": now + timedelta(days=1),
            },
            {
                "title": "Prepare quarterly report",
                "description": "Collect numbers from finance and draft the summary.",
                "status": "in-progress",
                "priority": "high",
                "due_date": now + timedelta(days=7),
            },
            {
                "title": "Renew gym membership",
                "status": "completed",
            },
        ]

        created = 0
        for data in tasks_data:
            exists = Task.query.filter_by(user_id=user.id, title=data["title"]).first()
            if exists is not None:
                continue
            db.session.add(Task(user_id=user.id, **data))
            created += 1

        db.session.commit()
        print(f"Demo user {user.email} ready with {created} new task(s).")


if __name__ == "__main__":
    main()
