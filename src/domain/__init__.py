"""
Domain layer - Pure business logic with zero framework imports.

This package contains the user management core: the User aggregate, the
domain events, the port interfaces it requires from infrastructure, and
the use cases orchestrating them behind a single facade.
"""

from .events import DomainEvent, EventType, UserCreated, UserDeleted, UserUpdated, parse_event
from .exceptions import (
    EmailAlreadyExists,
    InvalidUser,
    UserAlreadyExists,
    UserManagementError,
    UserNotFound,
)
from .management import UserManagementService
from .ports import EventPublisher, UserManagement, UserRepository
from .use_cases import CreateUser, DeleteUser, GetUser, UpdateUser
from .user import User

__all__ = [
    "CreateUser",
    "DeleteUser",
    "DomainEvent",
    "EmailAlreadyExists",
    "EventPublisher",
    "EventType",
    "GetUser",
    "InvalidUser",
    "UpdateUser",
    "User",
    "UserAlreadyExists",
    "UserCreated",
    "UserDeleted",
    "UserManagement",
    "UserManagementError",
    "UserManagementService",
    "UserNotFound",
    "UserRepository",
    "UserUpdated",
    "parse_event",
]
