"""
User aggregate - the managed person record.

Field checks run at construction time, so an invalid User can never
exist. The email check is syntactic only: it must contain an "@".
"""

from dataclasses import dataclass, field
from datetime import date
from uuid import UUID, uuid4

from .exceptions import InvalidUser


@dataclass(frozen=True)
class User:
    """
    A person managed by the system.

    Instances are immutable. To change a user, build a new value with the
    same id (``dataclasses.replace``) and hand it to the update operation.
    """

    name: str
    email: str
    phone: str
    birthday: date
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidUser("name", "Name cannot be blank")
        if not isinstance(self.email, str) or not self.email.strip() or "@" not in self.email:
            raise InvalidUser("email", "Invalid email format")
        if not isinstance(self.phone, str) or not self.phone.strip():
            raise InvalidUser("phone", "Phone cannot be blank")
        if not isinstance(self.birthday, date):
            raise InvalidUser("birthday", "Birthday must be a date")
        if not isinstance(self.id, UUID):
            raise InvalidUser("id", "Id must be a UUID")
