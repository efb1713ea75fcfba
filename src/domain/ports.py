"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) the domain requires from
infrastructure (driven ports) and the single interface it offers to
callers (driver port). Adapters implement these protocols structurally.
"""

from typing import Optional, Protocol
from uuid import UUID

from .events import DomainEvent
from .user import User


class UserRepository(Protocol):
    """Port interface for user persistence."""

    def save(self, user: User) -> User:
        """
        Persist a new user.

        Args:
            user: User to store

        Returns:
            The stored representation (the store may assign or normalize fields)

        Raises:
            UserAlreadyExists: If a user is already stored under ``user.id``
            EmailAlreadyExists: If the store rejects a duplicate email
        """
        ...

    def find_by_id(self, user_id: UUID) -> Optional[User]:
        """Return the stored user, or None when no user has this id."""
        ...

    def find_all(self) -> list[User]:
        """Return every stored user in store-defined order."""
        ...

    def update(self, user: User) -> User:
        """
        Overwrite the stored fields of ``user.id``.

        Returns:
            The stored representation after the write

        Raises:
            UserNotFound: If no row matches (adapter-defined)
        """
        ...

    def delete_by_id(self, user_id: UUID) -> None:
        """
        Remove a stored user.

        Raises:
            UserNotFound: If no row matches (adapter-defined)
        """
        ...

    def exists_by_email(self, email: str) -> bool:
        """Return True if any stored user holds this email."""
        ...


class EventPublisher(Protocol):
    """Port interface for domain event delivery."""

    def publish(self, event: DomainEvent) -> None:
        """
        Emit a domain event.

        Delivery is best-effort. Adapters own their failure handling and
        should log rather than raise on delivery errors.

        Args:
            event: UserCreated, UserUpdated or UserDeleted
        """
        ...


class UserManagement(Protocol):
    """Driver port - the single entry point callers depend on."""

    def create_user(self, user: User) -> User: ...

    def get_user_by_id(self, user_id: UUID) -> Optional[User]: ...

    def get_all_users(self) -> list[User]: ...

    def update_user(self, user: User) -> User: ...

    def delete_user(self, user_id: UUID) -> None: ...
