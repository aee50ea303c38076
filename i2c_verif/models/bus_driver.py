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

"""Cycle-accurate model of the bus master for a single transfer.

Bus Driver
==========

The driver bit-bangs one frame onto SCL/SDA as an explicit state machine.
Every rising edge of the source clock advances it by exactly one micro-step,
so every intermediate state can be inspected and replayed:

    ┌──────────────────────┬────────────────────────────────────────────┐
    │ Transition           │ Bus action                                 │
    ├──────────────────────┼────────────────────────────────────────────┤
    │ Idle → Start         │ SDA low while SCL high (START)             │
    │ → BitCell(i, Setup)  │ SCL low, then SDA = payload bit i          │
    │ → BitCell(i, Hold)   │ SCL high, bit i latched                    │
    │ BitCell(0, Hold)     │                                            │
    │   → Stop(Setup)      │ SCL low, SDA low                           │
    │ → Stop(Hold)         │ SCL high                                   │
    │ Stop(Hold) → Idle    │ SDA high while SCL high (STOP)             │
    └──────────────────────┴────────────────────────────────────────────┘

Bits go out MSB first (i = 7 .. 0). After STOP the driver stays Idle until
the next reset re-arms it. Reset may arrive in any state and always returns
the bus to SCL=1, SDA=1.
"""

from dataclasses import dataclass
from enum import Enum

from i2c_verif.config import DEFAULT_PAYLOAD, FRAME_BITS, IDLE_LEVEL
from i2c_verif.exceptions import ConfigurationError
from i2c_verif.models.signal_model import SignalBank
from i2c_verif.utils.bit_utils import bit_at
from i2c_verif.utils.bus_logger import BusLogger
from i2c_verif.verification_types import Edge, SimTime, TimingEvent


class TransferPhase(Enum):
    IDLE = "Idle"
    START = "Start"
    BIT_CELL = "BitCell"
    STOP = "Stop"


class BitPhase(Enum):
    SETUP = "Setup"
    HOLD = "Hold"


@dataclass(frozen=True)
class TransferState:
    """Position of the driver inside a transfer.

    Attributes:
        phase: Coarse phase of the transfer
        bit_index: Bit being transmitted (BitCell only, 7 down to 0)
        bit_phase: Setup or Hold (BitCell and Stop only)
    """

    phase: TransferPhase
    bit_index: int | None = None
    bit_phase: BitPhase | None = None

    @classmethod
    def bit_cell(cls, index: int, bit_phase: BitPhase) -> "TransferState":
        return cls(TransferPhase.BIT_CELL, index, bit_phase)

    @classmethod
    def stop(cls, bit_phase: BitPhase) -> "TransferState":
        return cls(TransferPhase.STOP, None, bit_phase)

    def __str__(self) -> str:
        if self.phase is TransferPhase.BIT_CELL:
            return f"BitCell({self.bit_index}, {self.bit_phase.value})"
        if self.phase is TransferPhase.STOP:
            return f"Stop({self.bit_phase.value})"
        return self.phase.value


IDLE = TransferState(TransferPhase.IDLE)
START = TransferState(TransferPhase.START)


class BusDriver:
    """Timed state machine emitting the SCL/SDA transitions of one transfer.

    The driver owns the SCL and SDA lines of the signal bank it is given.
    Each call to on_clock_edge returns the TimingEvents it produced, clock
    line first, so the caller can hand them to a monitor in order.

    Attributes:
        signals: Signal bank whose SCL/SDA lines this driver owns
        payload: Byte sent on each transfer
        frame_bits: Number of data bits per transfer
        state: Current TransferState
        transfer_complete: True once STOP has been driven
        transmitted_bits: Bits latched so far in the current transfer
    """

    def __init__(
        self,
        signals: SignalBank,
        payload: int = DEFAULT_PAYLOAD,
        frame_bits: int = FRAME_BITS,
    ) -> None:
        if not 0 <= payload < (1 << frame_bits):
            raise ConfigurationError(
                f"payload 0x{payload:X} does not fit in {frame_bits} bits",
                field="payload",
                value=payload,
            )
        self.signals = signals
        self.payload = payload
        self.frame_bits = frame_bits
        self.state = IDLE
        self.transfer_complete = False
        self.transmitted_bits: list[int] = []

    def reset(self, time: SimTime = 0) -> list[TimingEvent]:
        """Force the bus idle and abandon any transfer in progress.

        Idempotent: calling it on an idle bus produces no events.

        Args:
            time: Simulation time of the reset

        Returns:
            Transitions needed to bring SCL and SDA back high
        """
        events = self._drive(time, scl=IDLE_LEVEL, sda=IDLE_LEVEL)
        self._enter(IDLE, time)
        self.transfer_complete = False
        self.transmitted_bits = []
        return events

    def on_clock_edge(
        self, edge: Edge, time: SimTime, reset_asserted: bool = False
    ) -> list[TimingEvent]:
        """Advance by one micro-step on a rising edge of the source clock.

        Args:
            edge: Edge of the source clock (only RISING advances the driver)
            time: Simulation time of the edge
            reset_asserted: Level of the reset line at this edge

        Returns:
            Transitions produced by this step (possibly empty)
        """
        if edge is not Edge.RISING:
            return []
        if reset_asserted:
            return self.reset(time)
        if self.transfer_complete:
            return []
        return self._step(time)

    def _step(self, time: SimTime) -> list[TimingEvent]:
        state = self.state
        top_bit = self.frame_bits - 1

        if state.phase is TransferPhase.IDLE:
            # START: SDA falls under a high clock
            events = self._drive(time, sda=0)
            self._enter(START, time)
        elif state.phase is TransferPhase.START:
            events = self._drive(time, scl=0, sda=bit_at(self.payload, top_bit))
            self._enter(TransferState.bit_cell(top_bit, BitPhase.SETUP), time)
        elif state.phase is TransferPhase.BIT_CELL and state.bit_phase is BitPhase.SETUP:
            events = self._drive(time, scl=1)
            self.transmitted_bits.append(bit_at(self.payload, state.bit_index))
            self._enter(TransferState.bit_cell(state.bit_index, BitPhase.HOLD), time)
        elif state.phase is TransferPhase.BIT_CELL and state.bit_index > 0:
            next_bit = state.bit_index - 1
            events = self._drive(time, scl=0, sda=bit_at(self.payload, next_bit))
            self._enter(TransferState.bit_cell(next_bit, BitPhase.SETUP), time)
        elif state.phase is TransferPhase.BIT_CELL:
            # Last bit latched; pull SDA low under a low clock for STOP
            events = self._drive(time, scl=0, sda=0)
            self._enter(TransferState.stop(BitPhase.SETUP), time)
        elif state.bit_phase is BitPhase.SETUP:
            events = self._drive(time, scl=1)
            self._enter(TransferState.stop(BitPhase.HOLD), time)
        else:
            # STOP: SDA rises under a high clock
            events = self._drive(time, sda=1)
            self._enter(IDLE, time)
            self.transfer_complete = True
        return events

    def _drive(
        self, time: SimTime, scl: int | None = None, sda: int | None = None
    ) -> list[TimingEvent]:
        """Assign SCL then SDA, collecting the transitions that occurred."""
        events = []
        if scl is not None:
            events.append(self.signals.scl.drive(scl, time))
        if sda is not None:
            events.append(self.signals.sda.drive(sda, time))
        return [event for event in events if event is not None]

    def _enter(self, new_state: TransferState, time: SimTime) -> None:
        if new_state != self.state:
            BusLogger.log_state_change(time, self.state, new_state)
        self.state = new_state
