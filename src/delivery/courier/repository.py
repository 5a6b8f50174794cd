"""Repository for the Courier aggregate."""

from protean.core.repository import BaseRepository

from delivery.courier.courier import Courier
from delivery.domain import delivery
from delivery.outbox.recorder import record_events


@delivery.repository(part_of=Courier)
class CourierRepository(BaseRepository):
    """Courier persistence with free/busy lookups.

    ``add`` is both the insert and the update path; pending domain events are
    moved to the outbox before the courier is handed to the unit of work.
    """

    def add(self, courier: Courier) -> Courier:
        record_events(courier)
        return super().add(courier)

    def find(self, courier_id: str) -> Courier | None:
        return self._dao.query.filter(id=courier_id).all().first

    def get_all(self) -> list[Courier]:
        return self._dao.query.all().items

    def get_all_free(self) -> list[Courier]:
        return [courier for courier in self.get_all() if courier.is_free]

    def get_all_busy(self) -> list[Courier]:
        return [courier for courier in self.get_all() if courier.is_busy]
