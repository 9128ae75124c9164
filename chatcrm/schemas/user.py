"""
Pydantic schemas for user and project records.
"""
from typing import Optional
from pydantic import BaseModel, Field, EmailStr

from chatcrm.models.user import Role as UserRole


class UserCreate(BaseModel):
    """Schema for creating a new user."""
    email: EmailStr = Field(..., description="User email address")
    hashed_password: str = Field(..., description="bcrypt hash of the user password")
    first_name: str = Field(..., description="User's first name")
    last_name: str = Field(..., description="User's last name")
    role: Optional[UserRole] = Field(UserRole.ADMIN, description="User role")


class ProjectCreate(BaseModel):
    """Schema for creating a new project."""
    name: str = Field(..., description="Human-readable project name")
    unique_id: str = Field(..., min_length=1, description="Unique business identifier")
    user_id: int = Field(..., description="ID of the owning user")
