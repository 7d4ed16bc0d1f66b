from typing import Any, Mapping, Optional

from pydantic import BaseModel

from carpool.errors.errors import InvalidInput
from carpool.utils.utils import require_id, require_int

MIN_PEOPLE = 1
MAX_PEOPLE = 6


class Group(BaseModel):
    id: int
    people: int
    # id of the car the group rides in, None while waiting
    car_id: Optional[int] = None

    def is_pending(self):
        return self.car_id is None


def validate_group(record: Any) -> Group:
    if isinstance(record, Group):
        group_id, people = record.id, record.people
    elif isinstance(record, Mapping):
        group_id, people = record.get('id'), record.get('people')
    else:
        raise InvalidInput('journey', 'expected an object with id and people')

    group_id = require_id(group_id)
    people = require_int(people, 'people', group_id)

    if people < MIN_PEOPLE or people > MAX_PEOPLE:
        raise InvalidInput('people', f'must be between {MIN_PEOPLE} and {MAX_PEOPLE}, got {people}', group_id)

    return Group(id=group_id, people=people)
