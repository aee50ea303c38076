#    Copyright 2026 Two Sigma Open Source, LLC
#
#    Licensed under the Apache License, Version 2.0 (the "License");
#    you may not use this file except in compliance with the License.
#    You may obtain a copy of the License at
#
#        http://www.apache.org/licenses/LICENSE-2.0
#
#    Unless required by applicable law or agreed to in writing, software
#    distributed under the License is distributed on an "AS IS" BASIS,
#    WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#    See the License for the specific language governing permissions and
#    limitations under the License.

"""Central configuration for the bus verification framework.

Configuration
=============

Module-level constants describe the bus itself (frame width, idle levels).
SimulationConfig bundles the per-run parameters and validates them up front,
so an invalid configuration fails before any simulation time elapses.

Environment overrides (used by the cocotb Makefile flow)::

    I2C_PAYLOAD=0x3C I2C_CLOCK_PERIOD=8 make SIM=icarus
"""

import os
from dataclasses import dataclass

from i2c_verif.exceptions import ConfigurationError
from i2c_verif.utils.validation import (
    ValidationError,
    assert_bit_width,
    assert_in_range,
)

# Bus constants
FRAME_BITS = 8
"""Data bits per transfer frame."""

IDLE_LEVEL = 1
"""Both bus lines idle high."""

MASK8 = 0xFF

# Defaults for a single-transfer run
DEFAULT_PAYLOAD = 0xA5
DEFAULT_CLOCK_PERIOD = 5
DEFAULT_RESET_PULSE_WIDTH = 10
DEFAULT_SIMULATION_DURATION = 200

# The falling edge sits at period // 2, so a period below 2 would put it on
# top of the rising edge.
MIN_CLOCK_PERIOD = 2

ENV_OVERRIDES = {
    "payload": "I2C_PAYLOAD",
    "clock_period": "I2C_CLOCK_PERIOD",
    "reset_pulse_width": "I2C_RESET_WIDTH",
    "simulation_duration": "I2C_DURATION",
}


@dataclass(frozen=True)
class SimulationConfig:
    """Parameters of one simulation run.

    Attributes:
        payload: 8-bit value sent by the driver, MSB first
        clock_period: Full period of the source clock in time units
        reset_pulse_width: Time units the reset line is held asserted from t=0
        simulation_duration: Time at which the run stops
        frame_bits: Data bits per frame, as expected by the monitor
    """

    payload: int = DEFAULT_PAYLOAD
    clock_period: int = DEFAULT_CLOCK_PERIOD
    reset_pulse_width: int = DEFAULT_RESET_PULSE_WIDTH
    simulation_duration: int = DEFAULT_SIMULATION_DURATION
    frame_bits: int = FRAME_BITS

    def __post_init__(self) -> None:
        """Validate every field, raising ConfigurationError on the first bad one."""
        checks = (
            ("payload", lambda v: assert_bit_width(v, FRAME_BITS, "payload")),
            (
                "clock_period",
                lambda v: assert_in_range(v, MIN_CLOCK_PERIOD, name="clock_period"),
            ),
            (
                "reset_pulse_width",
                lambda v: assert_in_range(v, 1, name="reset_pulse_width"),
            ),
            (
                "simulation_duration",
                lambda v: assert_in_range(v, 1, name="simulation_duration"),
            ),
            ("frame_bits", lambda v: assert_in_range(v, 1, name="frame_bits")),
        )
        for field_name, check in checks:
            value = getattr(self, field_name)
            try:
                check(value)
            except ValidationError as err:
                raise ConfigurationError(
                    f"Invalid {field_name}: {value!r}", field=field_name, value=value
                ) from err

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "SimulationConfig":
        """Build a configuration from ``I2C_*`` environment variables.

        Integer values accept any base prefix understood by ``int(x, 0)``
        (``0xA5``, ``0b1010_0101``, ``165``). Unset variables keep defaults.

        Args:
            environ: Mapping to read from (defaults to ``os.environ``)

        Returns:
            Validated configuration

        Raises:
            ConfigurationError: If a variable is set but cannot be parsed
        """
        environ = os.environ if environ is None else environ
        overrides: dict[str, int] = {}
        for field_name, variable in ENV_OVERRIDES.items():
            raw = environ.get(variable)
            if raw is None:
                continue
            try:
                overrides[field_name] = int(raw, 0)
            except ValueError as err:
                raise ConfigurationError(
                    f"{variable} is not an integer: {raw!r}",
                    field=field_name,
                    value=raw,
                ) from err
        return cls(**overrides)
