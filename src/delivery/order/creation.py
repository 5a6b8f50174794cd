"""Order creation — command and handler.

The delivery address is resolved to a grid location through the geo adapter.
Creating an order that already exists is a no-op returning its id.
"""

import structlog
from protean import handle
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain

from delivery.domain import delivery
from delivery.geo import get_geo_client
from delivery.order.order import Order

logger = structlog.get_logger(__name__)


@delivery.command(part_of="Order")
class CreateOrder:
    """Accept a new delivery request."""

    order_id = Identifier(required=True)
    street = String(required=True, max_length=255)
    volume = Integer(default=1)


@delivery.command_handler(part_of=Order)
class CreateOrderHandler:
    @handle(CreateOrder)
    def create_order(self, command):
        repo = current_domain.repository_for(Order)
        existing = repo.find(command.order_id)
        if existing is not None:
            logger.info("order_already_exists", order_id=str(command.order_id))
            return str(existing.id)

        location = get_geo_client().get_location(command.street)
        order = Order.create(
            order_id=command.order_id,
            location=location,
            volume=command.volume,
        )
        repo.add(order)
        return str(order.id)
