"""
In-memory repository adapter - Implements UserRepository protocol.

Dict-backed store for development and tests. Mirrors the guarantees of
the PostgreSQL adapter: unique id and unique email enforced at write
time, insertion order preserved, missing rows reported as UserNotFound.
"""

import threading
from typing import Optional
from uuid import UUID

from src.domain.exceptions import EmailAlreadyExists, UserAlreadyExists, UserNotFound
from src.domain.user import User


class InMemoryUserRepository:
    """
    Implements UserRepository protocol with a process-local dict.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All access is serialized by a lock so the uniqueness check inside a
    write is atomic.
    """

    def __init__(self) -> None:
        self._users: dict[UUID, User] = {}
        self._lock = threading.Lock()

    def _email_taken(self, email: str, exclude: Optional[UUID] = None) -> bool:
        return any(u.email == email and u.id != exclude for u in self._users.values())

    def save(self, user: User) -> User:
        with self._lock:
            if user.id in self._users:
                raise UserAlreadyExists(user.id)
            if self._email_taken(user.email):
                raise EmailAlreadyExists(user.email)
            self._users[user.id] = user
            return user

    def find_by_id(self, user_id: UUID) -> Optional[User]:
        with self._lock:
            return self._users.get(user_id)

    def find_all(self) -> list[User]:
        with self._lock:
            return list(self._users.values())

    def update(self, user: User) -> User:
        with self._lock:
            if user.id not in self._users:
                raise UserNotFound(user.id)
            if self._email_taken(user.email, exclude=user.id):
                raise EmailAlreadyExists(user.email)
            # Plain assignment keeps the original insertion position.
            self._users[user.id] = user
            return user

    def delete_by_id(self, user_id: UUID) -> None:
        with self._lock:
            if self._users.pop(user_id, None) is None:
                raise UserNotFound(user_id)

    def exists_by_email(self, email: str) -> bool:
        with self._lock:
            return self._email_taken(email)
