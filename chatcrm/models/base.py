"""
Base database model with common fields and methods.
"""
from datetime import datetime, timezone
from typing import Any, Dict

from sqlalchemy import Column, DateTime, Integer, inspect
from sqlalchemy.orm import as_declarative, declared_attr


def utc_now() -> datetime:
    """Current UTC time as a timezone-aware datetime."""
    return datetime.now(timezone.utc)


@as_declarative()
class Base:
    """Base class for all database models."""

    # Pluralized table name from class name: User -> users
    @declared_attr
    def __tablename__(cls) -> str:
        return f"{cls.__name__.lower()}s"

    # Common columns for all models
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utc_now, onupdate=utc_now, nullable=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Base":
        """Create model instance from dictionary, ignoring unknown keys."""
        # Attribute keys, which differ from column names for camelCase columns
        keys = {attr.key for attr in inspect(cls).column_attrs}
        return cls(**{k: v for k, v in data.items() if k in keys})
