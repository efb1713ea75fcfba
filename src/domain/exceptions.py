"""
Domain exceptions - Semantic error types for user management.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.
"""

from uuid import UUID


class UserManagementError(Exception):
    """Base class for user management domain errors."""

    pass


class EmailAlreadyExists(UserManagementError):
    """Another user already holds this email address."""

    def __init__(self, email: str) -> None:
        super().__init__(f"User with email {email} already exists")
        self.email = email


class UserNotFound(UserManagementError):
    """No user is stored under this id."""

    def __init__(self, user_id: UUID) -> None:
        super().__init__(f"User with id {user_id} not found")
        self.user_id = user_id


class InvalidUser(UserManagementError, ValueError):
    """A User field failed its construction check."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class UserAlreadyExists(UserManagementError):
    """A user is already stored under this id."""

    def __init__(self, user_id: UUID) -> None:
        super().__init__(f"User with id {user_id} already exists")
        self.user_id = user_id
