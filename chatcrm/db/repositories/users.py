"""
User repository for database operations related to users.
"""
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from chatcrm.db.repositories.base import BaseRepository
from chatcrm.models.user import Role, User
from chatcrm.schemas.user import UserCreate


class UserRepository(BaseRepository[User, UserCreate]):
    """User repository for database operations."""

    def __init__(self, session: AsyncSession):
        """Initialize with session and User model."""
        super().__init__(session=session, model=User)

    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Get a user by email.

        Args:
            email: User email

        Returns:
            User: Found user or None
        """
        return await self.get_by_attribute("email", email)

    async def create(
        self,
        *,
        email: str,
        hashed_password: str,
        first_name: str,
        last_name: str,
        role: Role = Role.ADMIN
    ) -> User:
        """
        Create a new user.

        Args:
            email: User email
            hashed_password: Hashed password
            first_name: User's first name
            last_name: User's last name
            role: User role

        Returns:
            User: Created user

        Raises:
            pydantic.ValidationError: If the email is malformed
            sqlalchemy.exc.IntegrityError: If the email is already taken
        """
        data = UserCreate(
            email=email,
            hashed_password=hashed_password,
            first_name=first_name,
            last_name=last_name,
            role=role
        )

        db_obj = User(
            email=data.email,
            password=data.hashed_password,
            first_name=data.first_name,
            last_name=data.last_name,
            role=data.role
        )

        self.session.add(db_obj)
        await self.session.commit()
        await self.session.refresh(db_obj)

        return db_obj
