"""Seed an administrator user."""

import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from app import create_app
from models import db
from models.user import User

ADMIN_NAME = os.getenv("ADMIN_NAME", "Administrator")
ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "admin@example.com")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "AdminPass123")


def ensure_admin(name: str, email: str, password: str) -> tuple[User, str]:
    """Create the admin account, or promote and reset an existing one."""

    admin = User.query.filter_by(email=User.normalize_email(email)).first()
    if admin is None:
        admin = User(name=name, email=email, role="admin", password=password)
        db.session.add(admin)
        action = "created"
    else:
        admin.role = "admin"
        admin.password = password
        action = "updated"
    db.session.commit()
    return admin, action


def main() -> None:
    app = create_app()
    with app.app_context():
        db.create_all()
        admin, action = ensure_admin(ADMIN_NAME, ADMIN_EMAIL, ADMIN_PASSWORD)
        print(f"Admin user {action}: {admin.email}")


if __name__ == "__main__":
    main()
