class CarPoolError(Exception):
    pass


class InvalidInput(CarPoolError):
    """Rejected input: bad range, missing field or duplicate id.

    Nothing is applied when this is raised.
    """

    def __init__(self, field, reason, entity_id=None):
        self.field = field
        self.reason = reason
        self.entity_id = entity_id
        super().__init__(self.describe())

    def describe(self):
        if self.entity_id is None:
            return f"{self.field}: {self.reason}"
        return f"{self.field} (id={self.entity_id}): {self.reason}"


class NotFound(CarPoolError):

    def __init__(self, entity_id):
        self.entity_id = entity_id
        super().__init__(f"group {entity_id} not found")


class CapacityViolation(AssertionError):
    # seat accounting broken, a bug in the allocator or fleet, never a user error
    pass
