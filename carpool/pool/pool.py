import logging
import threading
from typing import Iterable, List, Optional

from pydantic import BaseModel, PrivateAttr

from carpool.allocator.allocator import Allocator, Assignment
from carpool.errors.errors import CapacityViolation, NotFound
from carpool.fleet.fleet import Fleet
from carpool.group.group import Group
from carpool.ledger.ledger import Ledger
from carpool.vehicle.vehicle import Vehicle

logger = logging.getLogger(__name__)


class PoolSnapshot(BaseModel):
    vehicles: List[Vehicle] = []
    groups: List[Group] = []

    @property
    def pending(self):
        return [group for group in self.groups if group.is_pending()]

    @property
    def seated(self):
        return [group for group in self.groups if not group.is_pending()]


class Pool(BaseModel):
    """
    Owns the fleet and the journeys and applies every change under a single
    lock, running an allocation pass whenever seats may have become usable.
    """
    _fleet: Fleet = PrivateAttr(default_factory=Fleet)
    _ledger: Ledger = PrivateAttr(default_factory=Ledger)
    _allocator: Allocator = PrivateAttr(default_factory=Allocator)
    _lock: threading.Lock = PrivateAttr(default_factory=threading.Lock)

    def load_fleet(self, vehicles: Iterable):
        # read the input outside the lock
        vehicles = list(vehicles)
        with self._lock:
            # a reload always starts from scratch, even when it is rejected
            self._ledger.replace_all()
            logger.info('Journeys cleared for fleet reload')
            self._fleet.replace_all(vehicles)

    def request_ride(self, group) -> List[Assignment]:
        with self._lock:
            self._ledger.enqueue(group)
            return self._allocator.run(self._fleet, self._ledger)

    def drop_off(self, group_id: int) -> Group:
        with self._lock:
            group = self._ledger.remove(group_id)
            if group.car_id is None:
                # nothing was freed so nobody new can be seated
                return group

            self._fleet.release(group.car_id, group.people)
            logger.info('Group %d dropped off, %d seats freed in car %d', group.id, group.people, group.car_id)
            self._allocator.run(self._fleet, self._ledger)
            return group

    def locate(self, group_id: int) -> Optional[Vehicle]:
        """
        Return a copy of the car the group rides in, None while the group
        waits. Raises NotFound for unknown groups.
        """
        with self._lock:
            group = self._ledger.find(group_id)
            if group is None:
                raise NotFound(group_id)
            if group.car_id is None:
                return None
            return self._fleet.lookup(group.car_id).model_copy()

    def snapshot(self) -> PoolSnapshot:
        with self._lock:
            return PoolSnapshot(
                vehicles=[vehicle.model_copy() for vehicle in self._fleet.in_load_order()],
                groups=[group.model_copy() for group in self._ledger.groups.values()],
            )

    def check_invariants(self):
        with self._lock:
            for vehicle in self._fleet.in_load_order():
                seated = sum(group.people for group in self._ledger.assigned_to(vehicle.id))
                if vehicle.available + seated != vehicle.seats:
                    raise CapacityViolation(
                        f'car {vehicle.id}: {vehicle.available} free + {seated} seated != {vehicle.seats} seats'
                    )
            for group in self._ledger.groups.values():
                if group.car_id is not None and self._fleet.lookup(group.car_id) is None:
                    raise CapacityViolation(f'group {group.id} rides in unknown car {group.car_id}')
