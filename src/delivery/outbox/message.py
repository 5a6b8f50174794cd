"""OutboxMessage — a durable record of a domain event awaiting delivery.

Rows are written in the same unit of work as the aggregate change that raised
the event, and marked processed by the relay once the message bus accepted
them. Rows are never deleted; the table doubles as a delivery ledger.
"""

import json
from datetime import UTC, datetime
from enum import Enum

from protean.fields import DateTime, String, Text
from protean.utils.globals import current_domain

from delivery.domain import delivery


class OutboxMessageStatus(Enum):
    PENDING = "Pending"
    PROCESSED = "Processed"
    FAILED = "Failed"


class UnknownEventType(Exception):
    """The stored type name does not match any registered domain event."""


@delivery.aggregate
class OutboxMessage:
    type = String(required=True, max_length=255)
    payload = Text(required=True)  # JSON-serialized event fields
    status = String(choices=OutboxMessageStatus, default=OutboxMessageStatus.PENDING.value)
    occurred_at_utc = DateTime(required=True)
    processed_at_utc = DateTime()
    event_id = String(max_length=255)
    error = Text()

    @classmethod
    def from_event(cls, event) -> "OutboxMessage":
        data = {key: value for key, value in event.to_dict().items() if not key.startswith("_")}
        headers = event._metadata.headers
        event_id = headers.id if headers else None
        return cls(
            event_id=str(event_id) if event_id else None,
            type=event.__class__.__name__,
            payload=json.dumps(data, default=str),
            status=OutboxMessageStatus.PENDING.value,
            occurred_at_utc=datetime.now(UTC),
        )

    @property
    def is_processed(self) -> bool:
        return self.processed_at_utc is not None

    def to_event(self):
        """Rebuild the domain event from its stored payload."""
        for _, record in current_domain.registry.events.items():
            if record.cls.__name__ == self.type:
                return record.cls(**json.loads(self.payload))
        raise UnknownEventType(f"No registered event named {self.type!r}")

    def mark_processed(self) -> None:
        self.processed_at_utc = datetime.now(UTC)
        self.status = OutboxMessageStatus.PROCESSED.value

    def mark_failed(self, reason: str) -> None:
        """Park a row that can never be published so it stops blocking the queue."""
        self.status = OutboxMessageStatus.FAILED.value
        self.error = reason

    @property
    def message_id(self) -> str:
        """Deduplication key for consumers: the event's own id when it has one."""
        return self.event_id or str(self.id)
