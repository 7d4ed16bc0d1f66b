from pydantic import BaseModel, StrictInt


# Wire shapes only; seat and people ranges are checked by the pool
class CarSchema(BaseModel):
    id: StrictInt
    seats: StrictInt


class JourneySchema(BaseModel):
    id: StrictInt
    people: StrictInt


class LocatedCarSchema(BaseModel):
    id: int
    seats: int
