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

"""Type aliases and value types for the bus verification framework.

Types
=====

This module defines the NewTypes and immutable records shared by the driver,
the monitor and the scheduler: signal identifiers, edge kinds, timing events
and property results.
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType

SimTime = NewType("SimTime", int)
"""Abstract simulation time (integer time units, never wall-clock)."""

BitValue = NewType("BitValue", int)
"""Logic level of a bus line (0 or 1)."""


class SignalId(Enum):
    """Identifies one line of the simulated bus."""

    CLOCK = "clock"
    """Shared source clock driving the scheduler (not a bus line)."""

    SCL = "clockLine"
    SDA = "dataLine"
    RESET = "resetLine"


class Edge(Enum):
    """Kind of change recorded by a TimingEvent."""

    RISING = "rising"
    FALLING = "falling"
    LEVEL_STABLE = "stable"

    @classmethod
    def between(cls, old: int, new: int) -> "Edge":
        """Return the edge that takes a line from ``old`` to ``new``."""
        if old == new:
            return cls.LEVEL_STABLE
        return cls.RISING if new else cls.FALLING


@dataclass(frozen=True)
class TimingEvent:
    """A single signal change or clock edge at a point in simulated time.

    Attributes:
        time: Simulation time of the change
        signal: Line that changed
        edge: Direction of the change (LEVEL_STABLE marks the end of a run)
    """

    time: SimTime
    signal: SignalId
    edge: Edge

    def __str__(self) -> str:
        return f"[t={self.time:6d}] {self.signal.value:9s} {self.edge.value}"


class Outcome(Enum):
    """Outcome of one property evaluation."""

    PASS = "PASS"
    VIOLATION = "VIOLATION"


@dataclass(frozen=True)
class PropertyResult:
    """One entry in the monitor's append-only result log.

    Attributes:
        property_name: Name of the evaluated property ("START", "STOP", ...)
        time: Simulation time of the evaluation
        outcome: Pass or Violation
        message: Human-readable description of the evaluation
    """

    property_name: str
    time: SimTime
    outcome: Outcome
    message: str

    @property
    def is_violation(self) -> bool:
        return self.outcome is Outcome.VIOLATION

    def __str__(self) -> str:
        return (
            f"[t={self.time:6d}] {self.property_name:14s} "
            f"{self.outcome.value:9s} {self.message}"
        )
