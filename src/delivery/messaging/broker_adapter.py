"""Broker message bus — publishes through the active domain's protean broker.

The broker itself (in-memory, Redis Streams, ...) is chosen by the domain
configuration, so this adapter stays transport agnostic.
"""

from protean.utils.globals import current_domain

from delivery.messaging.port import MessageBusError, MessageBusPort, build_message


class BrokerMessageBus(MessageBusPort):
    def __init__(self, stream: str, broker_name: str = "default"):
        self.stream = stream
        self.broker_name = broker_name

    def publish(self, event, message_id: str) -> None:
        broker = current_domain.brokers.get(self.broker_name)
        if broker is None:
            raise MessageBusError(f"No broker named {self.broker_name!r} configured")
        try:
            broker.publish(self.stream, build_message(event, message_id))
        except Exception as exc:
            raise MessageBusError(str(exc)) from exc
