"""Courier movement cycle.

Every busy courier takes one step towards the order in its first occupied
storage place. A courier that reaches the order location completes it and
frees the storage place.
"""

import threading

import structlog
from protean.core.unit_of_work import UnitOfWork
from protean.utils.globals import current_domain

from delivery.courier.courier import Courier
from delivery.order.order import Order
from delivery.shared.cancellation import raise_if_cancelled
from delivery.shared.errors import DeliveryError

logger = structlog.get_logger(__name__)


def move_couriers(cancellation: threading.Event | None = None) -> int:
    """Advance all busy couriers one tick. Returns the number of completed orders."""
    raise_if_cancelled(cancellation, "move_couriers")

    completed = 0
    with UnitOfWork():
        courier_repo = current_domain.repository_for(Courier)
        order_repo = current_domain.repository_for(Order)

        for courier in courier_repo.get_all_busy():
            raise_if_cancelled(cancellation, "move_couriers")

            place = courier.occupied_storage_place()
            order = order_repo.find(str(place.order_id))
            if order is None:
                logger.warning(
                    "carried_order_not_found",
                    courier_id=str(courier.id),
                    order_id=str(place.order_id),
                )
                continue

            try:
                courier.move(order.location)
                if courier.location == order.location:
                    order.complete()
                    courier.complete_order(order)
                    completed += 1
            except DeliveryError as exc:
                logger.warning(
                    "courier_move_failed",
                    courier_id=str(courier.id),
                    order_id=str(order.id),
                    reason=exc.kind.value,
                )
                continue

            order_repo.add(order)
            courier_repo.add(courier)

    if completed:
        logger.info("orders_completed", count=completed)
    return completed
