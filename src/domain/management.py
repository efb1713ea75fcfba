"""
User management facade - one entry point over the four use cases.

The facade adds no behavior: every error and event guarantee of the
underlying use case passes through unchanged.
"""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from .ports import EventPublisher, UserRepository
from .use_cases import CreateUser, DeleteUser, GetUser, UpdateUser
from .user import User


@dataclass
class UserManagementService:
    """Implements the UserManagement driver port by delegation."""

    create: CreateUser
    get: GetUser
    update: UpdateUser
    delete: DeleteUser

    @classmethod
    def build(
        cls, repository: UserRepository, event_publisher: EventPublisher
    ) -> "UserManagementService":
        """Wire all four use cases against one repository and one publisher."""
        return cls(
            create=CreateUser(repository=repository, event_publisher=event_publisher),
            get=GetUser(repository=repository),
            update=UpdateUser(repository=repository, event_publisher=event_publisher),
            delete=DeleteUser(repository=repository, event_publisher=event_publisher),
        )

    def create_user(self, user: User) -> User:
        return self.create.execute(user)

    def get_user_by_id(self, user_id: UUID) -> Optional[User]:
        return self.get.execute(user_id)

    def get_all_users(self) -> list[User]:
        return self.get.execute_all()

    def update_user(self, user: User) -> User:
        return self.update.execute(user)

    def delete_user(self, user_id: UUID) -> None:
        self.delete.execute(user_id)
