import logging
from typing import Dict, List

import numpy as np
import pandas as pd
from pydantic import BaseModel, PrivateAttr

from carpool.config.config import SimulatorConfig
from carpool.group.group import MAX_PEOPLE, MIN_PEOPLE
from carpool.pool.pool import Pool

logger = logging.getLogger(__name__)


class DemandSimulator(BaseModel):
    """
    Drives a pool with random journeys and drop-offs.

    Every interval draws a normally distributed number of new journeys (each
    with 1 to 6 people) and of drop-offs among the known groups, then records
    how many groups wait, how many ride and how many seats are in use.
    """
    config: SimulatorConfig
    pool: Pool
    interval_snapshot: Dict[str, List] = {}
    _rng: np.random.Generator = PrivateAttr()
    _next_group_id: int = PrivateAttr(default=1)

    def model_post_init(self, __context):
        self._rng = np.random.default_rng(self.config.seed)

    def build_fleet(self):
        vehicles = []
        vehicle_id = 0
        for seats, n in sorted(self.config.vehicles.items()):
            for _ in range(0, n):
                vehicle_id += 1
                vehicles.append({'id': vehicle_id, 'seats': seats})
        self.pool.load_fleet(vehicles)
        self._next_group_id = 1
        return vehicles

    def get_n_samples(self, mean, stdev):
        n = self._rng.normal(loc=mean, scale=stdev)
        # negative draws mean nothing happens this interval
        return max(0, int(round(n)))

    def request_journeys(self):
        n_journeys = self.get_n_samples(
            self.config.mean_journeys_per_interval,
            self.config.stdev_journeys_per_interval
        )
        for _ in range(0, n_journeys):
            people = int(self._rng.integers(MIN_PEOPLE, MAX_PEOPLE + 1))
            self.pool.request_ride({'id': self._next_group_id, 'people': people})
            self._next_group_id += 1
        return n_journeys

    def drop_off_groups(self):
        n_dropoffs = self.get_n_samples(
            self.config.mean_dropoffs_per_interval,
            self.config.stdev_dropoffs_per_interval
        )
        group_ids = [group.id for group in self.pool.snapshot().groups]
        n_dropoffs = min(n_dropoffs, len(group_ids))
        if n_dropoffs == 0:
            return 0

        for group_id in self._rng.choice(group_ids, size=n_dropoffs, replace=False):
            self.pool.drop_off(int(group_id))
        return n_dropoffs

    def capture_interval_snapshot(self, interval, n_journeys, n_dropoffs):
        snapshot = self.pool.snapshot()
        total_seats = sum(vehicle.seats for vehicle in snapshot.vehicles)
        free_seats = sum(vehicle.available for vehicle in snapshot.vehicles)

        row = {
            'interval': interval,
            'journeys': n_journeys,
            'dropoffs': n_dropoffs,
            'pending': len(snapshot.pending),
            'seated': len(snapshot.seated),
            'free_seats': free_seats,
            'utilisation': (total_seats - free_seats) / total_seats if total_seats else 0.0,
        }

        # initialize columns on first capture
        if len(self.interval_snapshot) == 0:
            for key in row.keys():
                self.interval_snapshot[key] = []

        for key, value in row.items():
            self.interval_snapshot[key].append(value)

    def run_interval(self, interval):
        n_journeys = self.request_journeys()
        n_dropoffs = self.drop_off_groups()
        self.pool.check_invariants()
        self.capture_interval_snapshot(interval, n_journeys, n_dropoffs)

    def run(self) -> pd.DataFrame:
        self.interval_snapshot = {}
        self.build_fleet()
        for interval in range(0, self.config.n_intervals):
            self.run_interval(interval)

        df = pd.DataFrame.from_dict(self.interval_snapshot)
        logger.info('Simulated %d intervals, mean utilisation %.2f',
                    self.config.n_intervals, df['utilisation'].mean() if len(df) else 0.0)
        return df
