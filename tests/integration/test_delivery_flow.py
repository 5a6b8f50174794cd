"""End-to-end flow: create, assign, move, complete, relay."""

from protean import current_domain

from delivery.courier.courier import Courier
from delivery.courier.creation import CreateCourier
from delivery.courier.movement import move_couriers
from delivery.dispatch.assignment import assign_orders
from delivery.messaging import get_message_bus
from delivery.order.creation import CreateOrder
from delivery.order.order import Order, OrderStatus
from delivery.outbox.message import OutboxMessage
from delivery.outbox.relay import OutboxRelay

MAX_TICKS = 20


def _run_until_completed(order_id):
    repo = current_domain.repository_for(Order)
    for _ in range(MAX_TICKS):
        move_couriers()
        if repo.get(order_id).status == OrderStatus.COMPLETED.value:
            return True
    return False


class TestDeliveryFlow:
    def test_order_is_delivered_and_published(self):
        courier_id = current_domain.process(CreateCourier(name="Anna", speed=2), asynchronous=False)
        order_id = current_domain.process(
            CreateOrder(order_id="ord-e2e", street="Tverskaya", volume=3), asynchronous=False
        )

        assert assign_orders() == courier_id
        assert _run_until_completed(order_id)

        courier = current_domain.repository_for(Courier).get(courier_id)
        order = current_domain.repository_for(Order).get(order_id)
        assert courier.is_free is True
        assert courier.location == order.location

        assert OutboxRelay().run() == 1

        published = get_message_bus().published
        assert len(published) == 1
        assert published[0]["type"] == "OrderCompleted"
        assert published[0]["key"] == order_id

        rows = current_domain.repository_for(OutboxMessage)._dao.query.all().items
        assert all(row.is_processed for row in rows)

    def test_freed_courier_takes_next_order(self):
        courier_id = current_domain.process(CreateCourier(name="Anna", speed=5), asynchronous=False)
        for order_id, street in (("ord-1", "Arbat"), ("ord-2", "Tverskaya")):
            current_domain.process(CreateOrder(order_id=order_id, street=street), asynchronous=False)

        assert assign_orders() == courier_id
        assert assign_orders() is None
        assert _run_until_completed("ord-1")

        assert assign_orders() == courier_id
        assert current_domain.repository_for(Order).get("ord-2").status == OrderStatus.ASSIGNED.value

    def test_relay_redelivers_after_bus_outage(self):
        current_domain.process(CreateCourier(name="Anna", speed=2), asynchronous=False)
        current_domain.process(CreateOrder(order_id="ord-1", street="Arbat"), asynchronous=False)
        assign_orders()
        assert _run_until_completed("ord-1")

        bus = get_message_bus()
        bus.configure(should_succeed=False)
        assert OutboxRelay().run() == 0

        bus.configure(should_succeed=True)
        assert OutboxRelay().run() == 1
        assert len(bus.published) == 1
