"""Outbox recorder — turns an aggregate's pending events into outbox rows.

Called by the delivery repositories on ``add``. Inside a unit of work the
outbox rows are committed together with the aggregate, so an event is stored
if and only if the change that raised it is stored.
"""

import structlog
from protean.utils.globals import current_domain

from delivery.outbox.message import OutboxMessage

logger = structlog.get_logger(__name__)


def record_events(aggregate) -> list[OutboxMessage]:
    """Persist one outbox row per pending event, then clear the aggregate's queue."""
    if not aggregate._events:
        return []

    repo = current_domain.repository_for(OutboxMessage)
    messages = []
    for event in aggregate._events:
        message = OutboxMessage.from_event(event)
        repo.add(message)
        messages.append(message)

    aggregate._events.clear()

    logger.debug(
        "Recorded domain events in outbox",
        aggregate=aggregate.__class__.__name__,
        aggregate_id=str(aggregate.id),
        count=len(messages),
    )
    return messages
