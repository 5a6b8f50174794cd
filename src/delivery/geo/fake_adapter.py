"""Fake geo client — deterministic address resolution for testing and development.

Hashes the normalized street name onto the grid, so the same street always
lands on the same location.
"""

import hashlib

from delivery.geo.port import GeoPort, GeoServiceError
from delivery.shared.location import MAX_COORDINATE, MIN_COORDINATE, Location

_GRID_SIZE = MAX_COORDINATE - MIN_COORDINATE + 1


class FakeGeoClient(GeoPort):
    """Fake geo client that always resolves by default."""

    def __init__(self):
        self.should_succeed = True
        self.failure_reason = "Geo service unavailable"

    def configure(self, should_succeed: bool = True, failure_reason: str = "Geo service unavailable"):
        """Configure the fake geo client behavior for testing."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def get_location(self, street: str) -> Location:
        if not self.should_succeed:
            raise GeoServiceError(self.failure_reason)
        if not street or not street.strip():
            raise GeoServiceError("Street is required")

        digest = hashlib.sha256(street.strip().lower().encode("utf-8")).digest()
        return Location.create(
            MIN_COORDINATE + digest[0] % _GRID_SIZE,
            MIN_COORDINATE + digest[1] % _GRID_SIZE,
        )
