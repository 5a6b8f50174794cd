"""Order assignment cycle.

Picks the oldest created order and hands it to the best free courier. At most
one order is assigned per run; the scheduler calls this repeatedly.
"""

import threading

import structlog
from protean.core.unit_of_work import UnitOfWork
from protean.utils.globals import current_domain

from delivery.courier.courier import Courier
from delivery.dispatch.service import DispatchService
from delivery.order.order import Order
from delivery.shared.cancellation import raise_if_cancelled
from delivery.shared.errors import DeliveryError, ErrorKind

logger = structlog.get_logger(__name__)


def assign_orders(cancellation: threading.Event | None = None) -> str | None:
    """Assign one pending order. Returns the selected courier's id, if any."""
    raise_if_cancelled(cancellation, "assign_orders")

    with UnitOfWork():
        order_repo = current_domain.repository_for(Order)
        courier_repo = current_domain.repository_for(Courier)

        order = order_repo.get_first_in_created_status()
        if order is None:
            return None

        couriers = courier_repo.get_all_free()
        raise_if_cancelled(cancellation, "assign_orders")

        try:
            courier = DispatchService().dispatch(order, couriers)
        except DeliveryError as exc:
            log = logger.info if exc.kind is ErrorKind.NO_AVAILABLE_COURIER else logger.warning
            log("order_not_assigned", order_id=str(order.id), reason=exc.kind.value)
            return None

        courier_repo.add(courier)
        order_repo.add(order)

    logger.info("order_assigned", order_id=str(order.id), courier_id=str(courier.id))
    return str(courier.id)
