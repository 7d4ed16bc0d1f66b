from typing import Optional

from carpool.errors.errors import InvalidInput


def require_int(value, field, entity_id: Optional[int] = None):
    # bool is an int subclass but never a valid id or count
    if value is None:
        raise InvalidInput(field, 'is required', entity_id)
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInput(field, f'must be an integer, got {value!r}', entity_id)
    return value


def require_id(value, field='id'):
    # 0 is the unset value of an id, the same as leaving it out
    value = require_int(value, field)
    if value == 0:
        raise InvalidInput(field, 'is required')
    return value
