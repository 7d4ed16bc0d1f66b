import logging
from typing import List, NamedTuple

from carpool.fleet.fleet import Fleet
from carpool.ledger.ledger import Ledger

logger = logging.getLogger(__name__)


class Assignment(NamedTuple):
    group_id: int
    car_id: int


class Allocator:
    """
    Seats waiting groups in cars.

    Cars are tried smallest first (stable on load order) so the larger cars
    stay free for the larger groups. Groups are served oldest first and a
    group that fits nowhere waits for the next pass. Seated groups are never
    moved.
    """

    @classmethod
    def sort_vehicles_fewest_seats_first(cls, fleet: Fleet):
        # sorted() is stable, cars with the same seats keep their load order
        return sorted(fleet.in_load_order(), key=lambda vehicle: vehicle.seats)

    def run(self, fleet: Fleet, ledger: Ledger) -> List[Assignment]:
        assignments = []

        pending = ledger.pending_in_arrival_order()
        if len(pending) == 0 or len(fleet) == 0:
            return assignments

        vehicles = self.sort_vehicles_fewest_seats_first(fleet)

        for group in pending:
            for vehicle in vehicles:
                if vehicle.can_seat(group.people):
                    fleet.commit_assignment(vehicle.id, group.people)
                    group.car_id = vehicle.id
                    assignments.append(Assignment(group.id, vehicle.id))
                    logger.info('Group %d has been assigned to car %d', group.id, vehicle.id)
                    break
                else:
                    logger.debug('Group %d can not be assigned to car %d', group.id, vehicle.id)

        return assignments
