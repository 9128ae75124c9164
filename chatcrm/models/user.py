"""
Database models for user management.

Column and type names follow the Chat CRM migrations, which use
camelCase for a few user columns and a "Role" enum type.
"""
import enum

from sqlalchemy import Column, DateTime, Enum, String
from sqlalchemy.orm import relationship

from chatcrm.models.base import Base


class Role(str, enum.Enum):
    """User role enum."""
    ADMIN = "Admin"


class User(Base):
    """User model for authentication and authorization."""

    email = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)  # bcrypt hash, never plaintext
    first_name = Column("firstName", String, nullable=False)
    last_name = Column("lastName", String, nullable=False)
    role = Column(
        Enum(Role, name="Role", values_callable=lambda roles: [r.value for r in roles]),
        default=Role.ADMIN,
        nullable=False,
    )

    # Token state managed by the auth service
    refresh_token = Column(String, nullable=True)
    pending_email = Column(String, nullable=True)
    email_change_token = Column(String, nullable=True)
    email_change_token_expires_at = Column(DateTime(timezone=True), nullable=True)
    password_change_token = Column(String, nullable=True)

    # Relationships
    projects = relationship("Project", back_populates="user", passive_deletes="all")
