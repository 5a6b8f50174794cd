"""Order aggregate — a delivery request travelling from creation to completion.

State Machine:
    CREATED → ASSIGNED → COMPLETED

Transitions are one-directional; an order is assigned to exactly one courier
and completed only by that courier's arrival.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.fields import DateTime, Identifier, Integer, String, ValueObject

from delivery.domain import delivery
from delivery.order.events import OrderCompleted
from delivery.shared.errors import DeliveryError, ErrorKind, missing_value
from delivery.shared.location import Location


class OrderStatus(Enum):
    CREATED = "Created"
    ASSIGNED = "Assigned"
    COMPLETED = "Completed"


@delivery.aggregate
class Order:
    id = Identifier(identifier=True)
    location = ValueObject(Location, required=True)
    volume = Integer(required=True, min_value=1)
    status = String(choices=OrderStatus, default=OrderStatus.CREATED.value)
    courier_id = Identifier()
    created_at = DateTime()

    @classmethod
    def create(cls, order_id: str, location: Location | None, volume: int) -> "Order":
        """Create a new order awaiting assignment."""
        if not order_id:
            raise missing_value("order_id")
        if location is None:
            raise missing_value("location")
        if volume is None or volume <= 0:
            raise missing_value("volume")

        return cls(
            id=order_id,
            location=location,
            volume=volume,
            status=OrderStatus.CREATED.value,
            created_at=datetime.now(UTC),
        )

    def assign(self, courier) -> None:
        if courier is None:
            raise missing_value("courier")
        if OrderStatus(self.status) != OrderStatus.CREATED:
            raise DeliveryError(
                ErrorKind.ALREADY_ASSIGNED,
                "status",
                f"Order {self.id} is already {self.status}",
            )

        self.courier_id = str(courier.id)
        self.status = OrderStatus.ASSIGNED.value

    def complete(self) -> None:
        if OrderStatus(self.status) != OrderStatus.ASSIGNED or not self.courier_id:
            raise DeliveryError(ErrorKind.NOT_ASSIGNED, "status", f"Order {self.id} is not assigned")

        self.status = OrderStatus.COMPLETED.value
        self.raise_(
            OrderCompleted(
                order_id=str(self.id),
                status_name=self.status,
            )
        )
