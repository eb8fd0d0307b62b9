"""User model definition."""

from sqlalchemy.orm import validates
from werkzeug.security import check_password_hash, generate_password_hash

from . import db, utcnow


USER_ROLES = ("user", "admin")


class User(db.Model):
    """Represents an account that owns tasks."""

    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(50), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    role = db.Column(
        db.Enum(*USER_ROLES, name="user_role"),
        nullable=False,
        default="user",
        server_default=db.text("'user'"),
    )
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    tasks = db.relationship("Task", back_populates="owner")

    @staticmethod
    def normalize_email(raw_email: str | None) -> str:
        """Normalize an email string by stripping whitespace and lowering case."""

        return (raw_email or "").strip().lower()

    @validates("email")
    def _lowercase_email(self, key, value):
        return self.normalize_email(value)

    @property
    def password(self):
        raise AttributeError("password is write-only")

    @password.setter
    def password(self, plaintext: str) -> None:
        """Hash and store the password. Every assignment re-hashes."""

        self.password_hash = generate_password_hash(plaintext)

    def check_password(self, password: str) -> bool:
        """Verify a password against the stored hash."""

        if not self.password_hash:
            return False
        return check_password_hash(self.password_hash, password)

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"

    def to_public_dict(self, include_created: bool = False) -> dict:
        """Serialize the fields that are safe to return to clients."""

        data = {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "role": self.role,
        }
        if include_created:
            data["createdAt"] = self.created_at.isoformat() if self.created_at else None
        return data

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<User {self.email}>"
