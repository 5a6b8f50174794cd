"""Outbox relay — publishes pending outbox rows to the message bus.

Rows are processed oldest first. A row is marked processed only after the
bus accepted it; a failed publish leaves the row pending for the next run,
so delivery is at-least-once. Rows whose event type is no longer registered
are parked as Failed so they do not hold back the rows behind them.
"""

import threading

import structlog
from protean.core.unit_of_work import UnitOfWork
from protean.utils.globals import current_domain

from delivery.config import get_settings
from delivery.messaging import get_message_bus
from delivery.messaging.port import MessageBusError
from delivery.outbox.message import OutboxMessage, UnknownEventType

logger = structlog.get_logger(__name__)


class OutboxRelay:
    def __init__(self, message_bus=None, batch_size: int | None = None):
        self.message_bus = message_bus
        self.batch_size = batch_size or get_settings().outbox_batch_size

    def run(self, cancellation: threading.Event | None = None) -> int:
        """Publish one batch of pending messages. Returns how many were published.

        Cancellation stops the batch early; rows already published are still
        committed as processed.
        """
        bus = self.message_bus or get_message_bus()
        published = 0

        with UnitOfWork():
            repo = current_domain.repository_for(OutboxMessage)
            for message in repo.find_unprocessed(self.batch_size):
                if cancellation is not None and cancellation.is_set():
                    logger.info("outbox_relay_cancelled", published=published)
                    break

                try:
                    event = message.to_event()
                except UnknownEventType as exc:
                    logger.error("outbox_unknown_event_type", message_id=str(message.id), type=message.type)
                    message.mark_failed(str(exc))
                    repo.add(message)
                    continue

                try:
                    bus.publish(event, message.message_id)
                except MessageBusError as exc:
                    logger.warning("outbox_publish_failed", message_id=str(message.id), error=str(exc))
                    continue

                message.mark_processed()
                repo.add(message)
                published += 1

        if published:
            logger.info("outbox_messages_published", count=published)
        return published
