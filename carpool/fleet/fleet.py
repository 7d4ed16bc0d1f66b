import logging
from typing import Dict, Iterable, List, Optional

from pydantic import BaseModel

from carpool.errors.errors import CapacityViolation, InvalidInput
from carpool.vehicle.vehicle import Vehicle, validate_vehicle

logger = logging.getLogger(__name__)


class Fleet(BaseModel):
    # keyed by car id, dict order is load order
    vehicles: Dict[int, Vehicle] = {}

    def __len__(self):
        return len(self.vehicles)

    def replace_all(self, vehicles: Iterable):
        """
        Swap in a new set of cars with every seat free.

        Either every car is valid and the whole list is installed, or the
        fleet is left empty and InvalidInput is raised.
        """
        self.vehicles = {}

        loaded = {}
        for record in vehicles:
            vehicle = validate_vehicle(record)
            if vehicle.id in loaded:
                raise InvalidInput('id', 'duplicated car id', vehicle.id)
            loaded[vehicle.id] = vehicle

        self.vehicles = loaded
        logger.info('Loaded %d cars', len(loaded))

    def lookup(self, vehicle_id: int) -> Optional[Vehicle]:
        return self.vehicles.get(vehicle_id)

    def in_load_order(self) -> List[Vehicle]:
        return list(self.vehicles.values())

    def commit_assignment(self, vehicle_id: int, people: int):
        vehicle = self._get(vehicle_id)
        if people > vehicle.available:
            raise CapacityViolation(
                f'car {vehicle_id} has {vehicle.available} free seats, cannot seat {people}'
            )
        vehicle.available -= people

    def release(self, vehicle_id: int, people: int):
        vehicle = self._get(vehicle_id)
        vehicle.available = min(vehicle.seats, vehicle.available + people)

    def _get(self, vehicle_id):
        try:
            return self.vehicles[vehicle_id]
        except KeyError:
            raise CapacityViolation(f'car {vehicle_id} is not part of the fleet')
