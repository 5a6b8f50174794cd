"""DispatchService — matches one created order to the best available courier.

Stateless: it only mutates the aggregates it is given. The caller persists
both the selected courier and the order in one unit of work.
"""

from delivery.courier.courier import Courier
from delivery.order.order import Order, OrderStatus
from delivery.shared.errors import DeliveryError, ErrorKind, missing_value


class DispatchService:
    def dispatch(self, order: Order | None, couriers: list[Courier] | None) -> Courier:
        """Assign ``order`` to the courier that reaches it fastest.

        Only couriers with a free storage place large enough are considered.
        Ties keep input order: the first courier with the lowest score wins.

        Raises:
            DeliveryError: ``MissingValue`` for absent arguments,
                ``AlreadyAssigned`` if the order left the Created state,
                ``NoAvailableCourier`` if nobody can carry the order.
        """
        if order is None:
            raise missing_value("order")
        if couriers is None:
            raise missing_value("couriers")
        if OrderStatus(order.status) != OrderStatus.CREATED:
            raise DeliveryError(ErrorKind.ALREADY_ASSIGNED, "status", f"Order {order.id} is already {order.status}")

        candidates = [courier for courier in couriers if courier.can_take_order(order)]
        if not candidates:
            raise DeliveryError(
                ErrorKind.NO_AVAILABLE_COURIER,
                "couriers",
                f"No courier can take order {order.id}",
            )

        selected = min(candidates, key=lambda courier: courier.calculate_time_to_location(order.location))

        selected.take_order(order)
        order.assign(selected)
        return selected
