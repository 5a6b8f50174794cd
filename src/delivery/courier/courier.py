"""Courier aggregate — the carrier side of the dispatch domain.

A courier owns an ordered list of storage places (each holds at most one
order), travels at a fixed speed over the grid and accepts orders that fit
into one of its free storage places.

Free/Busy:
    FREE  — every storage place is empty
    BUSY  — at least one storage place holds an order
"""

from protean.fields import HasMany, Identifier, Integer, String, ValueObject

from delivery.domain import delivery
from delivery.shared.errors import DeliveryError, ErrorKind, invalid_value, missing_value
from delivery.shared.location import Location

BAG_NAME = "Bag"
BAG_VOLUME = 10


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@delivery.entity(part_of="Courier")
class StoragePlace:
    """A single-slot capacity unit (bag, trunk, ...) carried by a courier."""

    name = String(required=True, max_length=100)
    total_volume = Integer(required=True, min_value=1)
    order_id = Identifier()

    @classmethod
    def create(cls, name: str, volume: int) -> "StoragePlace":
        if not name:
            raise invalid_value("name")
        if volume is None or volume <= 0:
            raise invalid_value("volume")
        return cls(name=name, total_volume=volume)

    @property
    def is_occupied(self) -> bool:
        return self.order_id is not None

    def can_store(self, volume: int) -> bool:
        if volume is None or volume <= 0:
            raise invalid_value("volume")
        return not self.is_occupied and volume <= self.total_volume

    def store(self, order_id: str, volume: int) -> None:
        if not self.can_store(volume):
            raise DeliveryError(
                ErrorKind.OCCUPIED_OR_TOO_SMALL,
                "storage_place",
                f"Storage place {self.name} is occupied or too small for volume {volume}",
            )
        self.order_id = order_id

    def clear(self, order_id: str) -> None:
        if not self.is_occupied:
            raise DeliveryError(ErrorKind.EMPTY, "storage_place", f"Storage place {self.name} holds no order")
        if str(self.order_id) != str(order_id):
            raise DeliveryError(
                ErrorKind.HOLDS_DIFFERENT_ORDER,
                "storage_place",
                f"Storage place {self.name} holds order {self.order_id}, not {order_id}",
            )
        self.order_id = None


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@delivery.aggregate
class Courier:
    name = String(required=True, max_length=100)
    speed = Integer(required=True, min_value=1)
    location = ValueObject(Location, required=True)
    storage_places = HasMany(StoragePlace)

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, name: str, speed: int, location: Location | None) -> "Courier":
        """Create a courier carrying the default bag."""
        if not name:
            raise missing_value("name")
        if speed is None or speed <= 0:
            raise invalid_value("speed")
        if location is None:
            raise missing_value("location")

        courier = cls(name=name, speed=speed, location=location)
        courier.add_storage_places(StoragePlace.create(BAG_NAME, BAG_VOLUME))
        return courier

    # -------------------------------------------------------------------
    # Capacity
    # -------------------------------------------------------------------
    @property
    def is_busy(self) -> bool:
        return any(place.is_occupied for place in self.storage_places or [])

    @property
    def is_free(self) -> bool:
        return not self.is_busy

    def add_storage_place(self, name: str, volume: int) -> None:
        self.add_storage_places(StoragePlace.create(name, volume))

    def can_take_order(self, order) -> bool:
        if order is None:
            raise missing_value("order")
        return any(place.can_store(order.volume) for place in self.storage_places or [])

    def take_order(self, order) -> None:
        """Store the order in the first storage place that fits it."""
        if not self.can_take_order(order):
            raise DeliveryError(
                ErrorKind.ALL_STORAGE_PLACES_FULL,
                "storage_places",
                f"Courier {self.name} has no free storage place for volume {order.volume}",
            )
        place = next(p for p in self.storage_places if p.can_store(order.volume))
        place.store(str(order.id), order.volume)

    def complete_order(self, order) -> None:
        if order is None:
            raise missing_value("order")
        place = next(
            (p for p in self.storage_places or [] if p.is_occupied and str(p.order_id) == str(order.id)),
            None,
        )
        if place is None:
            raise DeliveryError(
                ErrorKind.STORAGE_PLACE_DOES_NOT_STORE_THIS_ORDER,
                "storage_places",
                f"No storage place of courier {self.name} holds order {order.id}",
            )
        place.clear(str(order.id))

    def occupied_storage_place(self) -> StoragePlace | None:
        """First occupied storage place, in list order."""
        return next((p for p in self.storage_places or [] if p.is_occupied), None)

    # -------------------------------------------------------------------
    # Movement
    # -------------------------------------------------------------------
    def calculate_time_to_location(self, target: Location | None) -> float:
        """Ticks needed to reach ``target``; used for ranking only.

        Any non-zero distance within one tick's reach scores 1.
        """
        if target is None:
            raise missing_value("target")
        distance = self.location.distance_to(target)
        if distance == 0:
            return 0.0
        if distance <= self.speed:
            return 1.0
        return distance / self.speed

    def move(self, target: Location | None) -> None:
        """Advance at most ``speed`` grid units towards ``target``, X axis first."""
        if target is None:
            raise missing_value("target")

        budget = self.speed
        move_x = max(-budget, min(budget, target.x - self.location.x))
        budget -= abs(move_x)
        move_y = max(-budget, min(budget, target.y - self.location.y))

        self.location = Location.create(self.location.x + move_x, self.location.y + move_y)
