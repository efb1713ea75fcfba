"""
Use cases - The four user management operations.

Each use case composes repository calls with event emission and enforces
its own invariant. None of them hold state between calls.

Ordering
========

Create: exists_by_email -> save -> publish(UserCreated)
Update: find_by_id -> update -> publish(UserUpdated)
Delete: find_by_id -> delete_by_id -> publish(UserDeleted)

The check and the write are separate repository calls. A concurrent
writer can slip in between them; the store's own constraints (unique
email, primary key) are the final enforcement point.

Events are built from the value the repository returns, never from the
caller's input, so they describe what was actually committed. Publishing
happens after persistence and nothing here reverses a committed write.
"""

import logging
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from .events import UserCreated, UserDeleted, UserUpdated
from .exceptions import EmailAlreadyExists, UserNotFound
from .ports import EventPublisher, UserRepository
from .user import User

logger = logging.getLogger(__name__)


@dataclass
class CreateUser:
    """Create a user whose email is not already taken."""

    repository: UserRepository
    event_publisher: EventPublisher

    def execute(self, user: User) -> User:
        """
        Persist a new user and announce it.

        Args:
            user: Candidate user (its id is never checked against the store)

        Returns:
            The stored representation

        Raises:
            EmailAlreadyExists: If the email is already held by a stored user
        """
        if self.repository.exists_by_email(user.email):
            logger.warning("Create rejected, email already in use: %s", user.email)
            raise EmailAlreadyExists(user.email)

        stored = self.repository.save(user)

        self.event_publisher.publish(
            UserCreated(user_id=str(stored.id), name=stored.name, email=stored.email)
        )
        logger.info("User created: %s", stored.id)
        return stored


@dataclass
class GetUser:
    """Read users. Reads never emit events."""

    repository: UserRepository

    def execute(self, user_id: UUID) -> Optional[User]:
        """Return the stored user, or None if absent."""
        return self.repository.find_by_id(user_id)

    def execute_all(self) -> list[User]:
        """Return every stored user in store order (empty list if none)."""
        return list(self.repository.find_all())


@dataclass
class UpdateUser:
    """Overwrite an existing user's fields."""

    repository: UserRepository
    event_publisher: EventPublisher

    def execute(self, user: User) -> User:
        """
        Replace the stored fields of ``user.id`` with those of ``user``.

        Raises:
            UserNotFound: If no user is stored under ``user.id``
        """
        if self.repository.find_by_id(user.id) is None:
            logger.warning("Update rejected, user not found: %s", user.id)
            raise UserNotFound(user.id)

        stored = self.repository.update(user)

        self.event_publisher.publish(
            UserUpdated(user_id=str(stored.id), name=stored.name, email=stored.email)
        )
        logger.info("User updated: %s", stored.id)
        return stored


@dataclass
class DeleteUser:
    """Remove an existing user."""

    repository: UserRepository
    event_publisher: EventPublisher

    def execute(self, user_id: UUID) -> None:
        """
        Delete the user stored under ``user_id``.

        Raises:
            UserNotFound: If no user is stored under ``user_id``
        """
        if self.repository.find_by_id(user_id) is None:
            logger.warning("Delete rejected, user not found: %s", user_id)
            raise UserNotFound(user_id)

        self.repository.delete_by_id(user_id)

        self.event_publisher.publish(UserDeleted(user_id=str(user_id)))
        logger.info("User deleted: %s", user_id)
