"""Application tests for the order assignment cycle."""

import threading

import pytest
from protean import current_domain

from delivery.courier.courier import Courier
from delivery.dispatch.assignment import assign_orders
from delivery.order.order import Order, OrderStatus
from delivery.shared.cancellation import CycleCancelled
from delivery.shared.location import Location


def _add_courier(name, x, y, speed=2):
    courier = Courier.create(name=name, speed=speed, location=Location.create(x, y))
    current_domain.repository_for(Courier).add(courier)
    return courier


def _add_order(order_id, x=9, y=9, volume=1):
    order = Order.create(order_id=order_id, location=Location.create(x, y), volume=volume)
    current_domain.repository_for(Order).add(order)
    return order


class TestAssignOrders:
    def test_assigns_to_nearest_free_courier(self):
        _add_courier("Far", 1, 1)
        near = _add_courier("Near", 8, 8)
        _add_order("ord-001")

        assert assign_orders() == str(near.id)

        order = current_domain.repository_for(Order).get("ord-001")
        assert order.status == OrderStatus.ASSIGNED.value
        assert str(order.courier_id) == str(near.id)
        assert current_domain.repository_for(Courier).get(near.id).is_busy is True

    def test_assigns_one_order_per_run(self):
        _add_courier("A", 1, 1)
        _add_courier("B", 2, 2)
        _add_order("ord-001")
        _add_order("ord-002")

        assign_orders()

        statuses = {
            str(o.id): o.status for o in current_domain.repository_for(Order)._dao.query.all().items
        }
        assert list(statuses.values()).count(OrderStatus.ASSIGNED.value) == 1

    def test_oldest_order_first(self):
        _add_courier("A", 1, 1)
        _add_order("ord-old")
        _add_order("ord-new")

        assign_orders()

        repo = current_domain.repository_for(Order)
        assert repo.get("ord-old").status == OrderStatus.ASSIGNED.value
        assert repo.get("ord-new").status == OrderStatus.CREATED.value

    def test_no_orders_is_noop(self):
        _add_courier("A", 1, 1)
        assert assign_orders() is None

    def test_no_free_courier_is_noop(self):
        _add_order("ord-001")
        assert assign_orders() is None
        assert current_domain.repository_for(Order).get("ord-001").status == OrderStatus.CREATED.value

    def test_busy_couriers_are_not_considered(self):
        _add_courier("A", 1, 1)
        _add_order("ord-001")
        _add_order("ord-002")

        assign_orders()
        assert assign_orders() is None

        assert current_domain.repository_for(Order).get("ord-002").status == OrderStatus.CREATED.value

    def test_oversized_order_is_noop(self):
        _add_courier("A", 1, 1)
        _add_order("ord-001", volume=50)
        assert assign_orders() is None

    def test_cancelled_before_start(self):
        _add_courier("A", 1, 1)
        _add_order("ord-001")
        stop = threading.Event()
        stop.set()

        with pytest.raises(CycleCancelled):
            assign_orders(stop)

        assert current_domain.repository_for(Order).get("ord-001").status == OrderStatus.CREATED.value
