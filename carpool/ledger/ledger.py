import logging
from typing import Dict, List, Optional

from pydantic import BaseModel

from carpool.errors.errors import InvalidInput, NotFound
from carpool.group.group import Group, validate_group

logger = logging.getLogger(__name__)


class Ledger(BaseModel):
    # keyed by group id, dict order is arrival order
    groups: Dict[int, Group] = {}

    def __len__(self):
        return len(self.groups)

    def enqueue(self, record) -> Group:
        group = validate_group(record)
        if group.id in self.groups:
            raise InvalidInput('id', 'journey already registered', group.id)
        self.groups[group.id] = group
        logger.info('Group %d of %d people registered', group.id, group.people)
        return group

    def remove(self, group_id: int) -> Group:
        try:
            group = self.groups.pop(group_id)
        except KeyError:
            raise NotFound(group_id)
        logger.info('Group %d removed', group_id)
        return group

    def find(self, group_id: int) -> Optional[Group]:
        return self.groups.get(group_id)

    def pending_in_arrival_order(self) -> List[Group]:
        return [group for group in self.groups.values() if group.is_pending()]

    def assigned_to(self, vehicle_id: int) -> List[Group]:
        return [group for group in self.groups.values() if group.car_id == vehicle_id]

    def replace_all(self):
        self.groups = {}
