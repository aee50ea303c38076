"""Shared fixtures for the bus verification test suite."""

import pytest

from i2c_verif.config import SimulationConfig
from i2c_verif.models.bus_driver import BusDriver
from i2c_verif.models.signal_model import SignalBank
from i2c_verif.monitors.monitors import PropertyMonitor
from i2c_verif.sim.scheduler import run_simulation

# Reference scenario timing (clock period 5, reset released at 10)
START_TIME = 10
BIT_HOLD_TIMES = [20, 30, 40, 50, 60, 70, 80, 90]
STOP_TIME = 105
STEPS_PER_TRANSFER = 20  # START + 8 * (setup, hold) + stop setup/hold/release


@pytest.fixture
def default_config():
    """Return the reference configuration {0xA5, 5, 10, 200}."""
    return SimulationConfig(
        payload=0xA5, clock_period=5, reset_pulse_width=10, simulation_duration=200
    )


@pytest.fixture
def default_run(default_config):
    """Return a completed run of the reference configuration."""
    return run_simulation(default_config)


@pytest.fixture
def signals():
    """Return a fresh, idle signal bank."""
    return SignalBank()


@pytest.fixture
def driver(signals):
    """Return a driver for 0xA5 on the ``signals`` bank."""
    return BusDriver(signals, payload=0xA5)


@pytest.fixture
def monitor():
    """Return a fresh monitor for 8-bit frames."""
    return PropertyMonitor()
