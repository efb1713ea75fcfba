"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Valid User values
- In-memory adapters for end-to-end service tests
"""

from datetime import date

import pytest

from src.adapters.events.console import InMemoryEventPublisher
from src.adapters.repository.memory import InMemoryUserRepository
from src.domain.management import UserManagementService
from src.domain.user import User


@pytest.fixture
def john() -> User:
    """A valid user that has never been stored."""
    return User(
        name="John Doe",
        email="john@example.com",
        phone="+5511999999999",
        birthday=date(1990, 1, 1),
    )


@pytest.fixture
def memory_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def memory_publisher() -> InMemoryEventPublisher:
    return InMemoryEventPublisher()


@pytest.fixture
def service(
    memory_repository: InMemoryUserRepository, memory_publisher: InMemoryEventPublisher
) -> UserManagementService:
    """Facade wired to in-memory adapters."""
    return UserManagementService.build(
        repository=memory_repository, event_publisher=memory_publisher
    )
