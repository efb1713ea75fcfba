"""
Domain events - Immutable facts describing completed user mutations.

The three variants form a closed set sharing the ``event_type``
discriminator. Events carry only identity, name and email; phone and
birthday never leave the aggregate through an event.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Literal, Union


class EventType(str, Enum):
    """Discriminator values for domain events."""

    USER_CREATED = "USER_CREATED"
    USER_UPDATED = "USER_UPDATED"
    USER_DELETED = "USER_DELETED"


@dataclass(frozen=True)
class UserCreated:
    """A user was persisted for the first time."""

    user_id: str
    name: str
    email: str
    event_type: Literal[EventType.USER_CREATED] = field(
        default=EventType.USER_CREATED, init=False
    )

    def to_dict(self) -> dict[str, Any]:
        return {
            "eventType": self.event_type.value,
            "userId": self.user_id,
            "name": self.name,
            "email": self.email,
        }


@dataclass(frozen=True)
class UserUpdated:
    """A stored user's fields were overwritten."""

    user_id: str
    name: str
    email: str
    event_type: Literal[EventType.USER_UPDATED] = field(
        default=EventType.USER_UPDATED, init=False
    )

    def to_dict(self) -> dict[str, Any]:
        return {
            "eventType": self.event_type.value,
            "userId": self.user_id,
            "name": self.name,
            "email": self.email,
        }


@dataclass(frozen=True)
class UserDeleted:
    """A stored user was removed."""

    user_id: str
    event_type: Literal[EventType.USER_DELETED] = field(
        default=EventType.USER_DELETED, init=False
    )

    def to_dict(self) -> dict[str, Any]:
        return {"eventType": self.event_type.value, "userId": self.user_id}


DomainEvent = Union[UserCreated, UserUpdated, UserDeleted]


def parse_event(data: dict[str, Any]) -> DomainEvent:
    """
    Rebuild a domain event from its ``to_dict()`` shape.

    Args:
        data: Mapping with an ``eventType`` discriminator and variant fields

    Returns:
        The matching event variant

    Raises:
        ValueError: If the discriminator is unknown
        KeyError: If a required field is missing
    """
    event_type = EventType(data.get("eventType"))

    if event_type is EventType.USER_CREATED:
        return UserCreated(user_id=data["userId"], name=data["name"], email=data["email"])
    if event_type is EventType.USER_UPDATED:
        return UserUpdated(user_id=data["userId"], name=data["name"], email=data["email"])
    return UserDeleted(user_id=data["userId"])
