"""Repository for the Order aggregate."""

from protean.core.repository import BaseRepository

from delivery.domain import delivery
from delivery.order.order import Order, OrderStatus
from delivery.outbox.recorder import record_events


@delivery.repository(part_of=Order)
class OrderRepository(BaseRepository):
    """Order persistence with status lookups used by the dispatch cycles."""

    def add(self, order: Order) -> Order:
        record_events(order)
        return super().add(order)

    def find(self, order_id: str) -> Order | None:
        return self._dao.query.filter(id=order_id).all().first

    def get_first_in_created_status(self) -> Order | None:
        """Oldest order still waiting for a courier."""
        return self._dao.query.filter(status=OrderStatus.CREATED.value).order_by("created_at").all().first

    def get_all_in_assigned_status(self) -> list[Order]:
        return self._dao.query.filter(status=OrderStatus.ASSIGNED.value).all().items

    def get_all_in_statuses(self, *statuses: OrderStatus) -> list[Order]:
        return self._dao.query.filter(status__in=[status.value for status in statuses]).all().items
