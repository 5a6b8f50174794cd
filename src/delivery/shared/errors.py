"""Domain error taxonomy shared by the Courier and Order aggregates.

Aggregates raise ``DeliveryError`` carrying an ``ErrorKind``. Because it is a
protean ``ValidationError`` it surfaces through ``domain.process()`` exactly
like field validation failures, while use cases can still branch on ``kind``.
"""

from enum import Enum

from protean.exceptions import ValidationError


class ErrorKind(Enum):
    MISSING_VALUE = "MissingValue"
    INVALID_VALUE = "InvalidValue"
    ALREADY_ASSIGNED = "AlreadyAssigned"
    NOT_ASSIGNED = "NotAssigned"
    ALL_STORAGE_PLACES_FULL = "AllStoragePlacesFull"
    OCCUPIED_OR_TOO_SMALL = "OccupiedOrTooSmall"
    EMPTY = "Empty"
    HOLDS_DIFFERENT_ORDER = "HoldsDifferentOrder"
    STORAGE_PLACE_DOES_NOT_STORE_THIS_ORDER = "StoragePlaceDoesNotStoreThisOrder"
    NO_AVAILABLE_COURIER = "NoAvailableCourier"


class DeliveryError(ValidationError):
    """A domain rule was violated."""

    def __init__(self, kind: ErrorKind, field: str, message: str):
        self.kind = kind
        super().__init__({field: [message]})


def missing_value(field: str) -> DeliveryError:
    return DeliveryError(ErrorKind.MISSING_VALUE, field, f"{field} is required")


def invalid_value(field: str) -> DeliveryError:
    return DeliveryError(ErrorKind.INVALID_VALUE, field, f"{field} is invalid")
