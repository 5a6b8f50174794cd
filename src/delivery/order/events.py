"""Order domain events — immutable facts about order state changes.

Events are past tense and versioned. They are staged in the outbox when the
order is persisted and relayed to the message bus afterwards.
"""

from protean.fields import Identifier, String

from delivery.domain import delivery


@delivery.event(part_of="Order")
class OrderCompleted:
    """A courier delivered the order to its destination."""

    __version__ = 1

    order_id = Identifier(required=True)
    status_name = String(required=True, max_length=50)
