"""Shared fixtures for unit tests."""

from typing import Any
from unittest.mock import AsyncMock
from uuid import UUID, uuid4

import pytest

from domain.entities.profile import Profile
from domain.entities.user import User


class FakeUnitOfWork:
    """Fake Unit of Work with repository mocks for unit testing."""

    def __init__(self) -> None:
        self.profiles = AsyncMock()
        self.users = AsyncMock()
        self.committed = False
        self.rolled_back = False

        # Lookups find nothing unless a test says otherwise
        self.profiles.get_by_user.return_value = None
        self.profiles.get_by_handle.return_value = None
        self.profiles.get_all.return_value = []
        self.users.get.return_value = None
        self.users.get_many.return_value = {}
        # Writes echo the entity back, like the real repository
        self.profiles.create.side_effect = lambda profile: profile
        self.profiles.update.side_effect = lambda profile: profile

    async def commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        self.rolled_back = True

    async def __aenter__(self) -> "FakeUnitOfWork":
        return self

    async def __aexit__(self, *args: Any) -> None:
        pass


@pytest.fixture
def uow() -> FakeUnitOfWork:
    """Create a fresh FakeUnitOfWork."""
    return FakeUnitOfWork()


@pytest.fixture
def user_id() -> UUID:
    """A random user ID."""
    return uuid4()


@pytest.fixture
def owner(user_id: UUID) -> User:
    """The account owning ``profile``."""
    return User(id=user_id, name="Jane Doe", email="jane@example.com", avatar="https://a/jane")


@pytest.fixture
def profile(user_id: UUID) -> Profile:
    """An existing profile with empty sub-collections."""
    return Profile(
        user_id=user_id,
        handle="janedoe",
        status="Developer",
        skills=["python"],
        company="Acme",
        bio="Hello",
    )
