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

"""Post-hoc decoding of a bus trace into frames.

Trace Decoder
=============

Walks a sequence of TimingEvents the way a logic-analyzer protocol decoder
walks samples:

    START   SDA falling while SCL is high
    bit     SDA level sampled on each SCL rising edge inside a frame
    STOP    SDA rising while SCL is high

Decoding is independent of the PropertyMonitor, which makes it useful for
cross-checking what the driver actually put on the wires. Bits clocked after
the frame's data bits (the clock pulse that precedes STOP) are kept apart as
trailing bits.
"""

from dataclasses import dataclass, field
from typing import Iterable

from i2c_verif.config import FRAME_BITS, IDLE_LEVEL
from i2c_verif.utils.bit_utils import pack_msb_first
from i2c_verif.verification_types import Edge, SignalId, SimTime, TimingEvent


@dataclass
class DecodedFrame:
    """One START ... STOP sequence recovered from a trace.

    Attributes:
        start_time: Time of the START condition
        bits: (time, value) for every SCL rising edge inside the frame
        stop_time: Time of the STOP condition, None if the trace ended first
        frame_bits: Number of leading bits that carry data
    """

    start_time: SimTime
    bits: list[tuple[SimTime, int]] = field(default_factory=list)
    stop_time: SimTime | None = None
    frame_bits: int = FRAME_BITS

    @property
    def data_bits(self) -> list[int]:
        return [value for _, value in self.bits[: self.frame_bits]]

    @property
    def trailing_bits(self) -> list[int]:
        return [value for _, value in self.bits[self.frame_bits :]]

    @property
    def payload(self) -> int | None:
        """Data bits packed MSB first, or None if the frame is short."""
        if len(self.bits) < self.frame_bits:
            return None
        return pack_msb_first(self.data_bits)

    @property
    def complete(self) -> bool:
        return self.stop_time is not None and len(self.bits) >= self.frame_bits


class TraceDecoder:
    """Rebuilds frames from SCL/SDA transitions.

    Usage:
        frames = TraceDecoder().decode(run.trace)
        assert frames[0].payload == 0xA5
    """

    def __init__(self, frame_bits: int = FRAME_BITS) -> None:
        self.frame_bits = frame_bits

    def decode(self, events: Iterable[TimingEvent]) -> list[DecodedFrame]:
        """Decode every frame found in ``events``.

        A RESET rising edge abandons the frame in progress (it is still
        returned, with no stop time).

        Args:
            events: Trace in dispatch order

        Returns:
            Frames in the order their START conditions occurred
        """
        frames: list[DecodedFrame] = []
        current: DecodedFrame | None = None
        scl = sda = IDLE_LEVEL

        for event in events:
            if event.edge is Edge.LEVEL_STABLE:
                continue
            level = 1 if event.edge is Edge.RISING else 0

            if event.signal is SignalId.RESET:
                if level:
                    current = None
            elif event.signal is SignalId.SCL:
                scl = level
                if level and current is not None:
                    current.bits.append((event.time, sda))
            elif event.signal is SignalId.SDA:
                sda = level
                if not scl:
                    continue
                if not level:
                    # START, or a repeated START inside an open frame
                    current = DecodedFrame(event.time, frame_bits=self.frame_bits)
                    frames.append(current)
                elif current is not None:
                    current.stop_time = event.time
                    current = None

        return frames
