"""
Pydantic schemas for the seed procedure's report.
"""
from pydantic import BaseModel, Field

from chatcrm.schemas.user import UserRole


class AdminSummary(BaseModel):
    """Identifying fields of the seeded admin user."""
    id: int = Field(..., description="Generated user ID")
    email: str = Field(..., description="Admin email address")
    role: UserRole = Field(..., description="Admin role")

    class Config:
        """Pydantic config."""
        from_attributes = True


class ProjectSummary(BaseModel):
    """Identifying fields of the seeded project."""
    id: int = Field(..., description="Generated project ID")
    name: str = Field(..., description="Project name")
    unique_id: str = Field(..., serialization_alias="uniqueId", description="Business identifier")

    class Config:
        """Pydantic config."""
        from_attributes = True


class SeedSummary(BaseModel):
    """Summary logged after a successful seed."""
    admin: AdminSummary
    project: ProjectSummary

    def to_log_json(self) -> str:
        """Render as a single JSON line using the public field names."""
        return self.model_dump_json(by_alias=True)
