"""Courier creation — command and handler.

New couriers start on a random grid cell with the default bag.
"""

from protean import handle
from protean.fields import Integer, String
from protean.utils.globals import current_domain

from delivery.courier.courier import Courier
from delivery.domain import delivery
from delivery.shared.location import Location


@delivery.command(part_of="Courier")
class CreateCourier:
    """Register a new courier."""

    name = String(required=True, max_length=100)
    speed = Integer(required=True)


@delivery.command_handler(part_of=Courier)
class CreateCourierHandler:
    @handle(CreateCourier)
    def create_courier(self, command):
        courier = Courier.create(
            name=command.name,
            speed=command.speed,
            location=Location.create_random(),
        )
        current_domain.repository_for(Courier).add(courier)
        return str(courier.id)
