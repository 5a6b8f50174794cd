"""Read-side queries over couriers."""

from dataclasses import dataclass

from protean.utils.globals import current_domain

from delivery.courier.courier import Courier


@dataclass(frozen=True)
class CourierView:
    id: str
    name: str
    x: int
    y: int


def _view(courier: Courier) -> CourierView:
    return CourierView(id=str(courier.id), name=courier.name, x=courier.location.x, y=courier.location.y)


def get_couriers() -> list[CourierView]:
    return [_view(courier) for courier in current_domain.repository_for(Courier).get_all()]


def get_busy_couriers() -> list[CourierView]:
    return [_view(courier) for courier in current_domain.repository_for(Courier).get_all_busy()]
