import pytest
from unittest.mock import MagicMock
from pydantic import ValidationError

from chatcrm.db.repositories.projects import ProjectRepository
from chatcrm.db.repositories.users import UserRepository
from chatcrm.models.project import Project
from chatcrm.models.user import Role, User


@pytest.fixture
def user_repository(mock_session):
    return UserRepository(mock_session)


@pytest.fixture
def project_repository(mock_session):
    return ProjectRepository(mock_session)


@pytest.mark.asyncio
async def test_create_user_adds_and_commits(user_repository, mock_session):
    user = await user_repository.create(
        email="owner@chat-crm.com",
        hashed_password="$2b$10$hash",
        first_name="Owner",
        last_name="Person",
    )

    assert isinstance(user, User)
    assert user.email == "owner@chat-crm.com"
    assert user.password == "$2b$10$hash"
    assert user.role == Role.ADMIN
    mock_session.add.assert_called_once_with(user)
    mock_session.commit.assert_awaited_once()
    mock_session.refresh.assert_awaited_once_with(user)


@pytest.mark.asyncio
async def test_create_user_rejects_malformed_email(user_repository, mock_session):
    with pytest.raises(ValidationError):
        await user_repository.create(
            email="not-an-email",
            hashed_password="$2b$10$hash",
            first_name="Owner",
            last_name="Person",
        )

    mock_session.add.assert_not_called()
    mock_session.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_get_by_email_returns_scalar(user_repository, mock_session):
    expected = User(email="owner@chat-crm.com")
    result = MagicMock()
    result.scalar_one_or_none.return_value = expected
    mock_session.execute.return_value = result

    assert await user_repository.get_by_email("owner@chat-crm.com") is expected
    mock_session.execute.assert_awaited_once()


@pytest.mark.asyncio
async def test_create_project_sets_owner(project_repository, mock_session):
    project = await project_repository.create(name="Demo Project", unique_id="DEMO-001", user_id=7)

    assert isinstance(project, Project)
    assert project.name == "Demo Project"
    assert project.unique_id == "DEMO-001"
    assert project.user_id == 7
    mock_session.add.assert_called_once_with(project)
    mock_session.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_create_project_requires_unique_id(project_repository, mock_session):
    with pytest.raises(ValidationError):
        await project_repository.create(name="Demo Project", unique_id="", user_id=7)

    mock_session.add.assert_not_called()


@pytest.mark.asyncio
async def test_delete_missing_record_returns_false(project_repository, mock_session):
    result = MagicMock()
    result.scalar_one_or_none.return_value = None
    mock_session.execute.return_value = result

    assert await project_repository.delete(id=42) is False
    mock_session.delete.assert_not_awaited()
