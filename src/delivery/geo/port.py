"""Geo port — abstract interface for address-to-grid resolution."""

from abc import ABC, abstractmethod

from delivery.shared.location import Location


class GeoServiceError(Exception):
    """The geo service could not resolve an address."""


class GeoPort(ABC):
    """Abstract interface for geo adapters."""

    @abstractmethod
    def get_location(self, street: str) -> Location:
        """Resolve a street address to a grid location.

        Raises:
            GeoServiceError: if the address cannot be resolved.
        """
        ...
