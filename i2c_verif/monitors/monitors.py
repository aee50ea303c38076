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

"""Runtime protocol monitor for the simulated bus.

Property Monitor
================

The monitor is driven by two inputs, always in this order for a timestamp:

    1. observe(event) for every SCL/SDA/RESET transition, as it happens
    2. sample(time) on every rising edge of the source clock, once the driver
       has updated the bus and any injected fault has been applied

From those it evaluates three independent properties:

    START           sampled on the source clock; recorded only when it holds
                    and no frame is open
    STOP            sampled on the source clock; recorded only when it holds
                    after the frame's data bits
    DATA_STABILITY  checked on every SCL rising edge of a data bit cell and on
                    every SDA edge while SCL is high inside one

Only DATA_STABILITY can produce a Violation. The monitor never raises: all
outcomes go to the append-only result log, and the caller decides whether a
violation is fatal (see utils.validation.assert_no_violations).

While RESET is asserted nothing is evaluated and the frame context is
dropped, like an assertion with ``disable iff (reset)``.

History is bounded: the previous sample, the current line levels and the
last SDA change time. No trace is retained here.
"""

from i2c_verif.config import FRAME_BITS, IDLE_LEVEL
from i2c_verif.monitors.properties import (
    DATA_CHANGED,
    STABILITY_PROPERTY,
    START_DETECTED,
    START_PROPERTY,
    STOP_DETECTED,
    STOP_PROPERTY,
    BusSample,
    data_stable,
    start_condition,
    stop_condition,
)
from i2c_verif.utils.bus_logger import BusLogger
from i2c_verif.verification_types import (
    Edge,
    Outcome,
    PropertyResult,
    SignalId,
    SimTime,
    TimingEvent,
)


class Monitor:
    """Base class for monitors that record results into a log.

    Attributes:
        results: Append-only log of every evaluation that fired
    """

    def __init__(self) -> None:
        self.results: list[PropertyResult] = []

    @property
    def violations(self) -> list[PropertyResult]:
        return [result for result in self.results if result.is_violation]

    @property
    def passed(self) -> bool:
        """True if no violation has been recorded."""
        return not self.violations

    def _record(
        self, property_name: str, time: SimTime, outcome: Outcome, message: str
    ) -> PropertyResult:
        result = PropertyResult(property_name, time, outcome, message)
        self.results.append(result)
        BusLogger.log_result(result)
        return result


class PropertyMonitor(Monitor):
    """Checks START, STOP and data stability on an SCL/SDA bus.

    Attributes:
        frame_bits: Data bits expected between START and STOP
    """

    def __init__(self, frame_bits: int = FRAME_BITS) -> None:
        super().__init__()
        self.frame_bits = frame_bits
        self._scl = IDLE_LEVEL
        self._sda = IDLE_LEVEL
        self._sda_changed_at: SimTime = 0
        self._reset_asserted = False
        self._previous_sample: BusSample | None = None
        self._in_frame = False
        self._clock_pulses = 0

    @property
    def in_frame(self) -> bool:
        """True between a detected START and the matching STOP."""
        return self._in_frame

    def observe(self, event: TimingEvent) -> None:
        """Track a bus or reset transition and check stability if relevant.

        Args:
            event: Transition of SCL, SDA or RESET (others are ignored)
        """
        if event.edge is Edge.LEVEL_STABLE:
            return
        level = 1 if event.edge is Edge.RISING else 0

        if event.signal is SignalId.RESET:
            self._reset_asserted = bool(level)
            if self._reset_asserted:
                self._end_frame()
        elif event.signal is SignalId.SCL:
            self._scl = level
            if level:
                self._on_clock_rise(event.time)
        elif event.signal is SignalId.SDA:
            self._sda = level
            self._sda_changed_at = event.time
            self._on_data_edge(event)

    def sample(self, time: SimTime) -> None:
        """Evaluate START and STOP at a rising edge of the source clock.

        Args:
            time: Simulation time of the source-clock edge
        """
        current = BusSample(time, self._scl, self._sda)
        previous = self._previous_sample
        self._previous_sample = current
        if self._reset_asserted or previous is None:
            return

        if not self._in_frame and start_condition(previous, current):
            self._record(START_PROPERTY, time, Outcome.PASS, START_DETECTED)
            self._in_frame = True
            self._clock_pulses = 0
        elif (
            self._in_frame
            and self._clock_pulses > self.frame_bits
            and stop_condition(previous, current)
        ):
            self._record(STOP_PROPERTY, time, Outcome.PASS, STOP_DETECTED)
            self._end_frame()

    def _on_clock_rise(self, time: SimTime) -> None:
        if self._reset_asserted or not self._in_frame:
            return
        self._clock_pulses += 1
        if self._clock_pulses > self.frame_bits:
            return

        bit_index = self.frame_bits - self._clock_pulses
        if data_stable(self._sda_changed_at, time):
            self._record(
                STABILITY_PROPERTY,
                time,
                Outcome.PASS,
                f"Data stable during clock high: bit {bit_index} = {self._sda}",
            )
        else:
            self._record(STABILITY_PROPERTY, time, Outcome.VIOLATION, DATA_CHANGED)

    def _on_data_edge(self, event: TimingEvent) -> None:
        if self._reset_asserted or not self._in_frame or not self._scl:
            return
        # A rise after the data bits is the STOP edge, judged at the next sample
        if self._clock_pulses > self.frame_bits and event.edge is Edge.RISING:
            return
        self._record(STABILITY_PROPERTY, event.time, Outcome.VIOLATION, DATA_CHANGED)

    def _end_frame(self) -> None:
        self._in_frame = False
        self._clock_pulses = 0
