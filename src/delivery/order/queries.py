"""Read-side queries over orders."""

from dataclasses import dataclass

from protean.utils.globals import current_domain

from delivery.order.order import Order, OrderStatus


@dataclass(frozen=True)
class OrderView:
    id: str
    x: int
    y: int


def get_created_and_assigned_orders() -> list[OrderView]:
    """Orders that are not yet delivered, for the live map."""
    orders = current_domain.repository_for(Order).get_all_in_statuses(OrderStatus.CREATED, OrderStatus.ASSIGNED)
    return [OrderView(id=str(order.id), x=order.location.x, y=order.location.y) for order in orders]
