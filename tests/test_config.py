"""Tests for SimulationConfig validation and environment overrides."""

import pytest

from i2c_verif.config import (
    DEFAULT_CLOCK_PERIOD,
    DEFAULT_PAYLOAD,
    DEFAULT_RESET_PULSE_WIDTH,
    DEFAULT_SIMULATION_DURATION,
    SimulationConfig,
)
from i2c_verif.exceptions import ConfigurationError, VerificationError


class TestDefaults:
    def test_reference_values(self):
        config = SimulationConfig()
        assert config.payload == DEFAULT_PAYLOAD == 0xA5
        assert config.clock_period == DEFAULT_CLOCK_PERIOD == 5
        assert config.reset_pulse_width == DEFAULT_RESET_PULSE_WIDTH == 10
        assert config.simulation_duration == DEFAULT_SIMULATION_DURATION == 200
        assert config.frame_bits == 8

    def test_frozen(self):
        config = SimulationConfig()
        with pytest.raises(AttributeError):
            config.payload = 0x00


class TestValidation:
    """Each invalid field is rejected before any simulation runs."""

    @pytest.mark.parametrize(
        "field,value",
        [
            ("payload", 0x100),
            ("payload", -1),
            ("clock_period", 0),
            ("clock_period", 1),
            ("clock_period", -5),
            ("reset_pulse_width", 0),
            ("simulation_duration", 0),
            ("frame_bits", 0),
        ],
    )
    def test_rejected(self, field, value):
        with pytest.raises(ConfigurationError) as exc_info:
            SimulationConfig(**{field: value})

        assert exc_info.value.field == field
        assert exc_info.value.value == value
        assert field in str(exc_info.value)

    def test_non_integer_rejected(self):
        with pytest.raises(ConfigurationError):
            SimulationConfig(clock_period=2.5)

    def test_is_verification_error(self):
        with pytest.raises(VerificationError):
            SimulationConfig(payload=0x1FF)

    @pytest.mark.parametrize("payload", [0x00, 0x01, 0x7F, 0x80, 0xFF])
    def test_payload_boundaries_accepted(self, payload):
        assert SimulationConfig(payload=payload).payload == payload

    def test_minimum_period_accepted(self):
        assert SimulationConfig(clock_period=2).clock_period == 2


class TestFromEnv:
    def test_no_overrides(self):
        assert SimulationConfig.from_env({}) == SimulationConfig()

    def test_overrides(self):
        config = SimulationConfig.from_env(
            {
                "I2C_PAYLOAD": "0x3C",
                "I2C_CLOCK_PERIOD": "8",
                "I2C_RESET_WIDTH": "0b1100",
                "I2C_DURATION": "400",
            }
        )
        assert config == SimulationConfig(
            payload=0x3C, clock_period=8, reset_pulse_width=12, simulation_duration=400
        )

    def test_unrelated_variables_ignored(self):
        assert SimulationConfig.from_env({"PATH": "/usr/bin"}) == SimulationConfig()

    def test_unparseable_value(self):
        with pytest.raises(ConfigurationError) as exc_info:
            SimulationConfig.from_env({"I2C_PAYLOAD": "A5h"})
        assert exc_info.value.field == "payload"
        assert "I2C_PAYLOAD" in str(exc_info.value)

    def test_out_of_range_value(self):
        with pytest.raises(ConfigurationError) as exc_info:
            SimulationConfig.from_env({"I2C_CLOCK_PERIOD": "1"})
        assert exc_info.value.field == "clock_period"

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("I2C_PAYLOAD", "0x5A")
        assert SimulationConfig.from_env().payload == 0x5A
