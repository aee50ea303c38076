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

"""DUT signal access for the bus testbench.

Bus Interface
=============

Wraps the cocotb handles of the ``i2c_bus_wires`` wrapper so the tests deal
in model types: the driver's SignalBank goes in, TimingEvents for the
PropertyMonitor come out.

    i_clk          source clock (started by the test)
    i_rst          reset, driven from the test loop
    i_scl, i_sda   master drive, copied from the model's SignalBank
    o_scl, o_sda   bus as observed, turned into TimingEvents
"""

from typing import Any

from cocotb.utils import get_sim_time

from i2c_verif.config import IDLE_LEVEL
from i2c_verif.models.signal_model import SignalBank
from i2c_verif.verification_types import Edge, SignalId, SimTime, TimingEvent


class BusInterface:
    """cocotb-side view of the bus wrapper.

    Attributes:
        dut: cocotb handle of the toplevel
        clock: Source clock handle
    """

    def __init__(self, dut: Any) -> None:
        self.dut = dut
        self.clock = dut.i_clk
        self._observed = {
            SignalId.RESET: 0,
            SignalId.SCL: IDLE_LEVEL,
            SignalId.SDA: IDLE_LEVEL,
        }

    def initialize(self) -> None:
        """Hold the bus idle with reset asserted."""
        self.dut.i_rst.value = 1
        self.dut.i_scl.value = IDLE_LEVEL
        self.dut.i_sda.value = IDLE_LEVEL

    def now(self) -> SimTime:
        """Current simulation time in ns."""
        return int(get_sim_time(unit="ns"))

    def set_reset(self, asserted: bool) -> None:
        self.dut.i_rst.value = int(asserted)

    def drive(self, signals: SignalBank) -> None:
        """Copy the model's SCL/SDA levels onto the DUT inputs."""
        self.dut.i_scl.value = signals.scl.value
        self.dut.i_sda.value = signals.sda.value

    def force_sda(self, level: int) -> None:
        """Override the data line from the testbench (fault injection)."""
        self.dut.i_sda.value = level

    def sample_changes(self, time: SimTime) -> list[TimingEvent]:
        """Read the observed lines and report what changed since last call.

        Must be called in a read-only phase. Changes are reported reset
        first, then clock line, then data line.

        Args:
            time: Timestamp to stamp the events with

        Returns:
            One TimingEvent per line whose level changed
        """
        levels = {
            SignalId.RESET: int(self.dut.i_rst.value),
            SignalId.SCL: int(self.dut.o_scl.value),
            SignalId.SDA: int(self.dut.o_sda.value),
        }
        events = []
        for signal_id, level in levels.items():
            previous = self._observed[signal_id]
            if level != previous:
                events.append(
                    TimingEvent(time, signal_id, Edge.between(previous, level))
                )
                self._observed[signal_id] = level
        return events
