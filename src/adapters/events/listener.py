"""
User event listener - Consumer side of the user event stream.

Takes raw JSON messages as produced by LoggingEventPublisher, rebuilds
the domain event and dispatches on its type. Handlers only log today;
downstream reactions (welcome email, cache refresh) hook in here.
"""

import json
import logging
from typing import Optional

from src.domain.events import DomainEvent, UserCreated, UserDeleted, UserUpdated, parse_event

logger = logging.getLogger(__name__)


class UserEventListener:
    """Dispatches user event messages to per-type handlers."""

    def handle(self, message: str) -> Optional[DomainEvent]:
        """
        Parse and process one message.

        Malformed or unknown messages are logged and skipped so one bad
        message never stops the consumer.

        Args:
            message: JSON object with an ``eventType`` discriminator

        Returns:
            The processed event, or None if the message was skipped
        """
        logger.debug("Received event: %s", message)
        try:
            event = parse_event(json.loads(message))
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            logger.warning("Skipping unprocessable event message: %s (%s)", message, e)
            return None

        if isinstance(event, UserCreated):
            self._on_user_created(event)
        elif isinstance(event, UserUpdated):
            self._on_user_updated(event)
        else:
            self._on_user_deleted(event)
        return event

    def _on_user_created(self, event: UserCreated) -> None:
        logger.info(
            "Processing USER_CREATED - UserId: %s, Name: %s, Email: %s",
            event.user_id,
            event.name,
            event.email,
        )

    def _on_user_updated(self, event: UserUpdated) -> None:
        logger.info(
            "Processing USER_UPDATED - UserId: %s, Name: %s, Email: %s",
            event.user_id,
            event.name,
            event.email,
        )

    def _on_user_deleted(self, event: UserDeleted) -> None:
        logger.info("Processing USER_DELETED - UserId: %s", event.user_id)
