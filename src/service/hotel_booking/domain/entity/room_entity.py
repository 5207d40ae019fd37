from datetime import datetime
from typing import Optional

import attrs


def _validate_capacity(instance: object, attribute: attrs.Attribute, value: int) -> None:
    # Rooms are only read from storage, so this is a corrupt row: plain ValueError,
    # reported as an unclassified 500 rather than a booking error
    if value < 0:
        raise ValueError(f'Room {attribute.name} cannot be negative')


@attrs.define
class Room:
    id: int
    name: str
    capacity: int = attrs.field(validator=_validate_capacity)
    hotel_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def has_free_slot(self, *, occupancy: int) -> bool:
        """
        A room with capacity N holds at most N bookings.

        Occupancy at or above capacity means full, so a room that was
        overbooked before this rule existed never reports a free slot.
        """
        return occupancy < self.capacity
