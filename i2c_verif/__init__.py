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


"""Two-wire serial bus verification framework.

This package simulates a single bus master bit-banging one transfer onto a
clock line (SCL) and a data line (SDA), and checks the resulting waveform
against the bus handshaking rules: START, STOP and data stability while the
clock is high.

Package Structure
-----------------

Subpackages:
    models
        Software models of the bus lines and the bus master state machine

    monitors
        Protocol properties and the runtime PropertyMonitor

    sim
        Periodic clock and reset stimulus, and the Scheduler dispatch loop

    utils
        Bit helpers, trace decoding, structured logging and validation

    cocotb_tests
        cocotb testbench replaying the driver onto an HDL bus

Modules:
    config
        Bus constants and the validated SimulationConfig

    verification_types
        SignalId, Edge, TimingEvent, Outcome and PropertyResult

    exceptions
        Custom exception hierarchy for configuration and protocol failures

Quick Start
-----------
Run the reference transfer and check it::

    from i2c_verif import SimulationConfig, run_simulation

    run = run_simulation(SimulationConfig(payload=0xA5))
    assert run.passed
    for result in run.results:
        print(result)
"""

from i2c_verif.config import SimulationConfig
from i2c_verif.exceptions import (
    ConfigurationError,
    ProtocolViolationError,
    VerificationError,
)
from i2c_verif.sim.scheduler import (
    FaultInjection,
    Scheduler,
    SimulationRun,
    run_simulation,
)
from i2c_verif.verification_types import (
    Edge,
    Outcome,
    PropertyResult,
    SignalId,
    TimingEvent,
)

__all__ = [
    "SimulationConfig",
    "ConfigurationError",
    "ProtocolViolationError",
    "VerificationError",
    "FaultInjection",
    "Scheduler",
    "SimulationRun",
    "run_simulation",
    "Edge",
    "Outcome",
    "PropertyResult",
    "SignalId",
    "TimingEvent",
]
