"""Event adapters - Domain event delivery and consumption."""

from .console import InMemoryEventPublisher, LoggingEventPublisher
from .listener import UserEventListener

__all__ = ["InMemoryEventPublisher", "LoggingEventPublisher", "UserEventListener"]
