"""
Unit tests for InMemoryUserRepository.

Tests verify the adapter honors the repository port contract the same
way the PostgreSQL adapter does.
"""

import dataclasses
from uuid import uuid4

import pytest

from src.adapters.repository.memory import InMemoryUserRepository
from src.domain.exceptions import EmailAlreadyExists, UserAlreadyExists, UserNotFound
from src.domain.user import User


class TestSaveAndFind:
    """Tests for save, find_by_id and find_all."""

    def test_save_returns_stored_user(self, memory_repository: InMemoryUserRepository, john: User) -> None:
        assert memory_repository.save(john) == john

    def test_find_by_id(self, memory_repository: InMemoryUserRepository, john: User) -> None:
        memory_repository.save(john)
        assert memory_repository.find_by_id(john.id) == john

    def test_find_by_unknown_id_returns_none(self, memory_repository: InMemoryUserRepository) -> None:
        assert memory_repository.find_by_id(uuid4()) is None

    def test_find_all_empty(self, memory_repository: InMemoryUserRepository) -> None:
        assert memory_repository.find_all() == []

    def test_find_all_insertion_order(self, memory_repository: InMemoryUserRepository, john: User) -> None:
        jane = dataclasses.replace(john, id=uuid4(), name="Jane", email="jane@example.com")
        memory_repository.save(john)
        memory_repository.save(jane)
        assert memory_repository.find_all() == [john, jane]

    def test_save_duplicate_email_rejected(
        self, memory_repository: InMemoryUserRepository, john: User
    ) -> None:
        """The store enforces email uniqueness independently of the use case."""
        memory_repository.save(john)
        with pytest.raises(EmailAlreadyExists):
            memory_repository.save(dataclasses.replace(john, id=uuid4()))

    def test_save_duplicate_id_rejected(
        self, memory_repository: InMemoryUserRepository, john: User
    ) -> None:
        """Saving a second user under a stored id never overwrites the first."""
        memory_repository.save(john)
        mallory = dataclasses.replace(john, name="Mallory", email="mallory@example.com")

        with pytest.raises(UserAlreadyExists) as exc_info:
            memory_repository.save(mallory)

        assert exc_info.value.user_id == john.id
        assert memory_repository.find_by_id(john.id) == john
        assert memory_repository.find_all() == [john]


class TestExistsByEmail:
    def test_true_for_stored_email(self, memory_repository: InMemoryUserRepository, john: User) -> None:
        memory_repository.save(john)
        assert memory_repository.exists_by_email("john@example.com") is True

    def test_false_for_unknown_email(self, memory_repository: InMemoryUserRepository) -> None:
        assert memory_repository.exists_by_email("nobody@example.com") is False


class TestUpdate:
    """Tests for update."""

    def test_overwrites_fields(self, memory_repository: InMemoryUserRepository, john: User) -> None:
        memory_repository.save(john)
        changed = dataclasses.replace(john, phone="+5511777777777")

        assert memory_repository.update(changed) == changed
        assert memory_repository.find_by_id(john.id).phone == "+5511777777777"

    def test_keeps_position(self, memory_repository: InMemoryUserRepository, john: User) -> None:
        jane = dataclasses.replace(john, id=uuid4(), name="Jane", email="jane@example.com")
        memory_repository.save(john)
        memory_repository.save(jane)

        memory_repository.update(dataclasses.replace(john, name="John Updated"))

        assert [u.name for u in memory_repository.find_all()] == ["John Updated", "Jane"]

    def test_keeping_own_email_allowed(self, memory_repository: InMemoryUserRepository, john: User) -> None:
        memory_repository.save(john)
        memory_repository.update(dataclasses.replace(john, name="Johnny"))

    def test_taking_another_users_email_rejected(
        self, memory_repository: InMemoryUserRepository, john: User
    ) -> None:
        jane = dataclasses.replace(john, id=uuid4(), name="Jane", email="jane@example.com")
        memory_repository.save(john)
        memory_repository.save(jane)

        with pytest.raises(EmailAlreadyExists):
            memory_repository.update(dataclasses.replace(jane, email="john@example.com"))

    def test_unknown_id_raises(self, memory_repository: InMemoryUserRepository, john: User) -> None:
        with pytest.raises(UserNotFound):
            memory_repository.update(john)


class TestDelete:
    def test_removes_user(self, memory_repository: InMemoryUserRepository, john: User) -> None:
        memory_repository.save(john)
        memory_repository.delete_by_id(john.id)
        assert memory_repository.find_by_id(john.id) is None
        assert memory_repository.exists_by_email(john.email) is False

    def test_unknown_id_raises(self, memory_repository: InMemoryUserRepository) -> None:
        user_id = uuid4()
        with pytest.raises(UserNotFound) as exc_info:
            memory_repository.delete_by_id(user_id)
        assert exc_info.value.user_id == user_id
