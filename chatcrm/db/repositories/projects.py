"""
Project repository for database operations related to projects.
"""
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from chatcrm.db.repositories.base import BaseRepository
from chatcrm.models.project import Project
from chatcrm.schemas.user import ProjectCreate


class ProjectRepository(BaseRepository[Project, ProjectCreate]):
    """Project repository for database operations."""

    def __init__(self, session: AsyncSession):
        """Initialize with session and Project model."""
        super().__init__(session=session, model=Project)

    async def get_by_unique_id(self, unique_id: str) -> Optional[Project]:
        """Get a project by its business identifier."""
        return await self.get_by_attribute("unique_id", unique_id)

    async def list_by_user(self, user_id: int, *, skip: int = 0, limit: int = 100) -> List[Project]:
        """List projects owned by a user."""
        return await self.list(filters={"user_id": user_id}, skip=skip, limit=limit)

    async def create(self, *, name: str, unique_id: str, user_id: int) -> Project:
        """
        Create a new project owned by ``user_id``.

        The owner must already exist; the database rejects dangling
        references with an IntegrityError.
        """
        return await super().create(
            obj_in=ProjectCreate(name=name, unique_id=unique_id, user_id=user_id)
        )
