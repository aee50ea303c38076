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

"""Periodic clock and one-shot reset stimulus.

Clock Source
============

The source clock starts low at t=0. For a period P it rises at P, 2P, 3P, ...
and falls half a period later (P // 2 after each rise). Both generators are
lazy and can be iterated any number of times.
"""

from typing import Iterator

from i2c_verif.config import MIN_CLOCK_PERIOD
from i2c_verif.exceptions import ConfigurationError
from i2c_verif.verification_types import Edge, SignalId, SimTime, TimingEvent


class ClockSource:
    """Strictly periodic source clock.

    Attributes:
        period: Full clock period in time units
    """

    def __init__(self, period: int) -> None:
        if period < MIN_CLOCK_PERIOD:
            raise ConfigurationError(
                f"clock period must be at least {MIN_CLOCK_PERIOD}, got {period}",
                field="clock_period",
                value=period,
            )
        self.period = period

    def edges(self, duration: SimTime) -> Iterator[TimingEvent]:
        """Yield every clock edge up to and including ``duration``.

        Args:
            duration: Last simulation time to cover

        Yields:
            Alternating RISING and FALLING TimingEvents on the CLOCK signal
        """
        half = self.period // 2
        for rise in range(self.period, duration + 1, self.period):
            yield TimingEvent(rise, SignalId.CLOCK, Edge.RISING)
            if rise + half <= duration:
                yield TimingEvent(rise + half, SignalId.CLOCK, Edge.FALLING)


class ResetPulse:
    """Reset asserted at t=0 and released ``width`` time units later."""

    def __init__(self, width: int) -> None:
        if width <= 0:
            raise ConfigurationError(
                f"reset pulse width must be positive, got {width}",
                field="reset_pulse_width",
                value=width,
            )
        self.width = width

    def levels(self) -> Iterator[tuple[SimTime, int]]:
        """Yield (time, level) pairs for the reset line."""
        yield 0, 1
        yield self.width, 0
