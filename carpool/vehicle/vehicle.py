from typing import Any, Mapping

from pydantic import BaseModel

from carpool.errors.errors import InvalidInput
from carpool.utils.utils import require_id, require_int

MIN_SEATS = 4
MAX_SEATS = 6


class Vehicle(BaseModel):
    id: int
    seats: int
    # seats still free, not part of the wire payload
    available: int = 0

    def is_empty(self):
        return self.available == self.seats

    def can_seat(self, people: int):
        return self.available >= people


def validate_vehicle(record: Any) -> Vehicle:
    """
    Build a fresh Vehicle (all seats free) from a Vehicle or a mapping with
    `id` and `seats`, raising InvalidInput for anything out of range.
    """
    if isinstance(record, Vehicle):
        vehicle_id, seats = record.id, record.seats
    elif isinstance(record, Mapping):
        vehicle_id, seats = record.get('id'), record.get('seats')
    else:
        raise InvalidInput('car', 'expected an object with id and seats')

    vehicle_id = require_id(vehicle_id)
    seats = require_int(seats, 'seats', vehicle_id)

    if seats < MIN_SEATS or seats > MAX_SEATS:
        raise InvalidInput('seats', f'must be between {MIN_SEATS} and {MAX_SEATS}, got {seats}', vehicle_id)

    return Vehicle(id=vehicle_id, seats=seats, available=seats)


