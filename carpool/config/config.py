import json
from typing import Dict

from pydantic import BaseModel, Field, field_validator

from carpool.vehicle.vehicle import MAX_SEATS, MIN_SEATS


class ServiceConfig(BaseModel):
    host: str = '0.0.0.0'
    port: int = 9091
    log_level: str = 'INFO'

    @classmethod
    def from_file(cls, path):
        with open(path) as f:
            config = json.load(f)
        return cls(**config)


class SimulatorConfig(BaseModel):
    n_intervals: int = 96
    # number of cars to load per seat count
    vehicles: Dict[int, int] = {4: 10, 5: 6, 6: 4}

    mean_journeys_per_interval: float = 4
    stdev_journeys_per_interval: float = 2
    mean_dropoffs_per_interval: float = 3
    stdev_dropoffs_per_interval: float = 1.5

    seed: int = Field(
        description='seed for the random generator, the same seed replays the same run',
        default=42
    )

    @field_validator('vehicles')
    @classmethod
    def seats_in_range(cls, vehicles):
        for seats, n in vehicles.items():
            if seats < MIN_SEATS or seats > MAX_SEATS:
                raise ValueError(f'cars must have between {MIN_SEATS} and {MAX_SEATS} seats, got {seats}')
            if n < 0:
                raise ValueError(f'number of {seats} seat cars can not be negative, got {n}')
        return vehicles

    @classmethod
    def from_file(cls, path):
        with open(path) as f:
            config = json.load(f)
        return cls(**config)
