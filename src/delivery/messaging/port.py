"""Message bus port — abstract interface for publishing integration events.

The outbox relay programs against the port; adapters are swapped via
configuration.
"""

from abc import ABC, abstractmethod


class MessageBusError(Exception):
    """The message bus did not accept a message."""


def build_message(event, message_id: str) -> dict:
    """Integration message for an order-status event.

    ``message_id`` is the recorded event's id, stable across redeliveries, so
    consumers can deduplicate on it.
    """
    data = {key: value for key, value in event.to_dict().items() if not key.startswith("_")}
    return {
        "message_id": message_id,
        "type": event.__class__.__name__,
        "key": str(data.get("order_id", "")),
        "data": data,
    }


class MessageBusPort(ABC):
    """Abstract interface for message bus adapters."""

    @abstractmethod
    def publish(self, event, message_id: str) -> None:
        """Publish a domain event.

        Raises:
            MessageBusError: if the bus rejected or could not receive the message.
        """
        ...
