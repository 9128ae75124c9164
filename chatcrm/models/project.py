"""
Database model for projects owned by a user.
"""
from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from chatcrm.models.base import Base


class Project(Base):
    """Project owned by a single user."""

    name = Column(String, nullable=False)
    unique_id = Column(String, unique=True, index=True, nullable=False)  # business identifier, e.g. DEMO-001

    # Ownership
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="RESTRICT", onupdate="CASCADE"),
        nullable=False,
        index=True,
    )

    # Relationships
    user = relationship("User", back_populates="projects")
