"""
Seed the database with the initial admin user and a demo project.

Usage:
    python -m chatcrm.scripts.seed
"""
import asyncio
import logging
import sys
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.orm import sessionmaker

from chatcrm.core.config import settings
from chatcrm.core.exceptions import ChatCrmException, SeedingError
from chatcrm.core.security import get_password_hash
from chatcrm.db.repositories.projects import ProjectRepository
from chatcrm.db.repositories.users import UserRepository
from chatcrm.db.session import close_database_connections, get_session, initialize_database
from chatcrm.models.user import Role
from chatcrm.schemas.seed import AdminSummary, ProjectSummary, SeedSummary

logger = logging.getLogger("chatcrm.seed")

ADMIN_USER = {
    "email": "admin@chat-crm.com",
    "password": "admin123",
    "role": Role.ADMIN,
    "first_name": "Admin",
    "last_name": "User",
}

DEMO_PROJECT = {
    "name": "Demo Project",
    "unique_id": "DEMO-001",
}


@contextmanager
def seeding_step(step: str) -> Iterator[None]:
    """Re-raise any failure inside the block as a SeedingError tagged with ``step``."""
    try:
        yield
    except ChatCrmException:
        raise
    except Exception as e:
        raise SeedingError(f"Seeding failed during {step}: {e}", step=step) from e


async def seed_database(session_factory: Optional[sessionmaker] = None) -> Optional[SeedSummary]:
    """
    Create the admin user and its demo project.

    Both inserts commit on their own, so a failed project insert leaves
    the admin row behind.

    Returns:
        SeedSummary: IDs and identifying fields of the created rows, or
        None if SEED_SKIP_EXISTING is set and the admin already exists.

    Raises:
        SeedingError: If any step fails.
    """
    async with get_session(session_factory) as session:
        user_repo = UserRepository(session)
        project_repo = ProjectRepository(session)

        if settings.SEED_SKIP_EXISTING:
            with seeding_step("check_existing"):
                existing = await user_repo.get_by_email(ADMIN_USER["email"])
            if existing:
                logger.info(f"Admin user already exists (id: {existing.id}), skipping creation")
                return None

        with seeding_step("hash_password"):
            hashed_password = get_password_hash(ADMIN_USER["password"])

        with seeding_step("create_user"):
            admin = await user_repo.create(
                email=ADMIN_USER["email"],
                hashed_password=hashed_password,
                first_name=ADMIN_USER["first_name"],
                last_name=ADMIN_USER["last_name"],
                role=ADMIN_USER["role"],
            )
        logger.debug(f"Admin user created with ID: {admin.id}")

        with seeding_step("create_project"):
            project = await project_repo.create(
                name=DEMO_PROJECT["name"],
                unique_id=DEMO_PROJECT["unique_id"],
                user_id=admin.id,
            )
        logger.debug(f"Project created with ID: {project.id}")

        return SeedSummary(
            admin=AdminSummary.model_validate(admin),
            project=ProjectSummary.model_validate(project),
        )


async def run_seed(
    session_factory: Optional[sessionmaker] = None,
    engine: Optional[AsyncEngine] = None,
) -> int:
    """
    Run the seed procedure and always release the database connections.

    When only a session factory is given, the engine it is bound to is
    the one disposed.

    Returns:
        int: Process exit status, 0 on success and 1 on any failure
    """
    if engine is None and session_factory is not None:
        engine = session_factory.kw.get("bind")

    try:
        with seeding_step("connect"):
            await initialize_database(session_factory)

        summary = await seed_database(session_factory)
        if summary is not None:
            logger.info(f"Seed data created successfully: {summary.to_log_json()}")
        return 0
    except ChatCrmException as e:
        logger.error(f"Error during seeding: {e.message} (code={e.code}, details={e.details})")
        return 1
    except Exception as e:
        logger.exception(f"Error during seeding: {e}")
        return 1
    finally:
        await close_database_connections(engine)


def main() -> int:
    """Console entry point."""
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    return asyncio.run(run_seed())


if __name__ == "__main__":
    sys.exit(main())
