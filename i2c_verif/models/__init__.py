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


"""Software models of the bus.

This package contains the models that produce the bus waveform. The
PropertyMonitor judges what these models drive.

Modules
-------
signal_model
    Boolean bus lines with change timestamps:
    - Signal: one owned line, drive() / force() return TimingEvents
    - SignalBank: the SCL, SDA and RESET lines of one run

bus_driver
    Bus master state machine for one transfer:
    - Idle → Start → BitCell(7..0, Setup/Hold) → Stop → Idle
    - One micro-step per rising edge of the source clock
    - Reset to Idle from any state

Usage
-----
The driver is normally stepped by the Scheduler, but can be driven by hand::

    from i2c_verif.models.signal_model import SignalBank
    from i2c_verif.models.bus_driver import BusDriver
    from i2c_verif.verification_types import Edge

    driver = BusDriver(SignalBank(), payload=0xA5)
    events = driver.on_clock_edge(Edge.RISING, time=10)  # START
"""

from i2c_verif.models.signal_model import Signal, SignalBank
from i2c_verif.models.bus_driver import (
    BitPhase,
    BusDriver,
    TransferPhase,
    TransferState,
)

__all__ = [
    "Signal",
    "SignalBank",
    "BitPhase",
    "BusDriver",
    "TransferPhase",
    "TransferState",
]
