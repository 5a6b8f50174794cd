"""Message bus adapter abstraction — pluggable outbound transport."""

from delivery.config import get_settings

_message_bus_instance = None


def get_message_bus():
    """Return the configured message bus adapter (singleton).

    Uses FakeMessageBus by default. Set MESSAGE_BUS_ADAPTER=broker to publish
    through the domain's configured protean broker.
    """
    global _message_bus_instance
    if _message_bus_instance is None:
        settings = get_settings()
        adapter = settings.message_bus_adapter
        if adapter == "fake":
            from delivery.messaging.fake_adapter import FakeMessageBus

            _message_bus_instance = FakeMessageBus()
        elif adapter == "broker":
            from delivery.messaging.broker_adapter import BrokerMessageBus

            _message_bus_instance = BrokerMessageBus(stream=settings.message_bus_stream)
        else:
            raise ValueError(f"Unknown message bus adapter: {adapter}")
    return _message_bus_instance


def reset_message_bus():
    """Reset the message bus singleton (useful for testing)."""
    global _message_bus_instance
    _message_bus_instance = None
