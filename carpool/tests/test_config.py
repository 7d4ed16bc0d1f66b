import json
import os
import tempfile
import unittest

from pydantic import ValidationError

from carpool.config.config import ServiceConfig, SimulatorConfig


class TestConfig(unittest.TestCase):

    def test_defaults(self):
        config = ServiceConfig()
        assert config.port == 9091
        assert config.log_level == 'INFO'

    def test_from_file(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = os.path.join(tmp_dir, 'service.json')
            with open(path, 'w') as f:
                json.dump({'port': 8080, 'log_level': 'DEBUG'}, f)

            config = ServiceConfig.from_file(path)
            assert config.port == 8080
            assert config.host == '0.0.0.0'
            assert config.log_level == 'DEBUG'

    def test_simulator_vehicle_keys_are_seat_counts(self):
        config = SimulatorConfig(vehicles={'5': 2})
        assert config.vehicles == {5: 2}

    def test_simulator_seat_counts_out_of_range(self):
        for vehicles in ({'3': 2}, {7: 1}, {4: -1}):
            with self.assertRaises(ValidationError):
                SimulatorConfig(vehicles=vehicles)
