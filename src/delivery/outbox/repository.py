"""Repository for outbox messages."""

from delivery.domain import delivery
from delivery.outbox.message import OutboxMessage, OutboxMessageStatus


@delivery.repository(part_of=OutboxMessage)
class OutboxMessageRepository:
    def find_unprocessed(self, limit: int) -> list[OutboxMessage]:
        """Oldest pending messages first, at most ``limit`` of them."""
        return (
            self._dao.query.filter(status=OutboxMessageStatus.PENDING.value)
            .order_by("occurred_at_utc")
            .limit(limit)
            .all()
            .items
        )
