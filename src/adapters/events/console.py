"""
Console event publisher adapter - Implements EventPublisher protocol.

This module provides a logging-based implementation of the domain's
event sink port, writing each event as JSON to the log for demo and
development purposes.
"""

import json
import logging

from src.domain.events import DomainEvent

logger = logging.getLogger(__name__)


class LoggingEventPublisher:
    """
    Implements EventPublisher protocol via console logging.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Delivery is best-effort: a failure to serialize or log an event is
    reported at ERROR level and never raised back into the use case.
    """

    def __init__(self, topic: str = "user-events") -> None:
        """
        Args:
            topic: Logical channel name stamped on every published event
        """
        self.topic = topic

    def publish(self, event: DomainEvent) -> None:
        """
        Log the event payload (simulates a message broker send).

        The event type doubles as the message key, the JSON payload as the
        message body. Logged at INFO level to be visible in container logs.

        Args:
            event: UserCreated, UserUpdated or UserDeleted
        """
        try:
            payload = json.dumps(event.to_dict())
            logger.info(
                "[EVENT] topic=%s type=%s payload=%s",
                self.topic,
                event.event_type.value,
                payload,
            )
        except Exception:
            logger.exception("Failed to publish event: %r", event)


class InMemoryEventPublisher:
    """
    Implements EventPublisher protocol by recording events in a list.

    Useful for tests and local runs that need to inspect what was emitted.
    """

    def __init__(self) -> None:
        self.events: list[DomainEvent] = []

    def publish(self, event: DomainEvent) -> None:
        self.events.append(event)
