"""Fake message bus — in-memory bus for testing and development.

Keeps every accepted message in ``published``. Configurable failure behavior
for exercising the relay's retry path.
"""

from delivery.messaging.port import MessageBusError, MessageBusPort, build_message


class FakeMessageBus(MessageBusPort):
    """Fake bus that always accepts messages by default."""

    def __init__(self):
        self.should_succeed = True
        self.failure_reason = "Message bus unavailable"
        self.published: list[dict] = []

    def configure(self, should_succeed: bool = True, failure_reason: str = "Message bus unavailable"):
        """Configure the fake bus behavior for testing."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def publish(self, event, message_id: str) -> None:
        if not self.should_succeed:
            raise MessageBusError(self.failure_reason)
        self.published.append(build_message(event, message_id))
