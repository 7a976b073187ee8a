"""User model definitions."""

from sqlalchemy import Column, String
from diagnocare.database import Base
from diagnocare.models.document import DocumentMixin

ROLE_USER = "user"
ROLE_ADMIN = "admin"
ROLES = (ROLE_USER, ROLE_ADMIN)


class User(DocumentMixin, Base):
    """Represents a registered account and its profile fields."""
    __tablename__ = "users"

    document_fields = {"email": "email", "role": "role"}

    email = Column(String, unique=True, index=True, nullable=False)
    role = Column(String, nullable=False, default=ROLE_USER)  # user/admin

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN
