"""Location value object — a point on the 10x10 delivery grid."""

import random

from protean.fields import Integer

from delivery.domain import delivery
from delivery.shared.errors import invalid_value, missing_value

MIN_COORDINATE = 1
MAX_COORDINATE = 10


def _in_bounds(value) -> bool:
    return value is not None and MIN_COORDINATE <= value <= MAX_COORDINATE


@delivery.value_object
class Location:
    """An immutable grid coordinate. Shared by couriers and orders.

    Both axes are bounded to [1, 10]. Distances are Manhattan distances,
    since couriers move along grid lines only.
    """

    x: Integer(required=True, min_value=MIN_COORDINATE, max_value=MAX_COORDINATE)
    y: Integer(required=True, min_value=MIN_COORDINATE, max_value=MAX_COORDINATE)

    @classmethod
    def create(cls, x: int, y: int) -> "Location":
        if not _in_bounds(x):
            raise invalid_value("x")
        if not _in_bounds(y):
            raise invalid_value("y")
        return cls(x=x, y=y)

    @classmethod
    def create_random(cls, rng=random) -> "Location":
        """Pick a uniformly random in-bounds location.

        ``rng`` is anything exposing ``randint`` (the ``random`` module by
        default); pass a seeded ``random.Random`` for reproducible results.
        """
        return cls(
            x=rng.randint(MIN_COORDINATE, MAX_COORDINATE),
            y=rng.randint(MIN_COORDINATE, MAX_COORDINATE),
        )

    def distance_to(self, other: "Location | None") -> int:
        if other is None:
            raise missing_value("other")
        return abs(self.x - other.x) + abs(self.y - other.y)
