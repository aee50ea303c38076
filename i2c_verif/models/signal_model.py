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

"""Software model of the bus lines.

Signal Model
============

Each line of the bus is a Signal: a boolean level plus the time of its last
change. A line has exactly one owner that drives it (the bus driver owns
SCL/SDA, the reset source owns RESET). Test harnesses may additionally
force a line to inject faults; the owner's next drive overrides the forced
level.

Every actual change produces a TimingEvent; assigning the level a line
already has produces nothing.

Usage:
    bank = SignalBank()
    event = bank.sda.drive(0, time=15)   # TimingEvent(15, SDA, FALLING)
    bank.sda.drive(0, time=20)           # None, level unchanged
"""

from i2c_verif.config import IDLE_LEVEL
from i2c_verif.verification_types import Edge, SignalId, SimTime, TimingEvent


class Signal:
    """A named boolean line with a current value and change timestamp.

    Attributes:
        signal_id: Which bus line this is
        value: Current level (0 or 1)
        changed_at: Time of the most recent transition
        owner: Name of the component allowed to drive the line
    """

    def __init__(
        self, signal_id: SignalId, initial: int, owner: str, time: SimTime = 0
    ) -> None:
        self.signal_id = signal_id
        self.value = initial & 0x1
        self.changed_at = time
        self.owner = owner

    def drive(self, value: int, time: SimTime) -> TimingEvent | None:
        """Set the line to ``value`` on behalf of its owner.

        Args:
            value: New level (truthy values are treated as 1)
            time: Simulation time of the assignment

        Returns:
            The resulting TimingEvent, or None if the level did not change
        """
        value = 1 if value else 0
        if value == self.value:
            return None
        edge = Edge.between(self.value, value)
        self.value = value
        self.changed_at = time
        return TimingEvent(time=time, signal=self.signal_id, edge=edge)

    def force(self, value: int, time: SimTime) -> TimingEvent | None:
        """Override the line from outside its owner (fault injection)."""
        return self.drive(value, time)

    def changed_since(self, time: SimTime) -> bool:
        """True if the line transitioned strictly after ``time``."""
        return self.changed_at > time

    def __repr__(self) -> str:
        return (
            f"Signal({self.signal_id.value}={self.value}, "
            f"changed_at={self.changed_at}, owner={self.owner!r})"
        )


class SignalBank:
    """The set of lines owned by one simulation run.

    Each run builds its own bank, so independent runs never share state.
    """

    def __init__(self) -> None:
        self.scl = Signal(SignalId.SCL, IDLE_LEVEL, owner="driver")
        self.sda = Signal(SignalId.SDA, IDLE_LEVEL, owner="driver")
        self.reset = Signal(SignalId.RESET, 0, owner="reset_source")

    def __getitem__(self, signal_id: SignalId) -> Signal:
        lines = {
            SignalId.SCL: self.scl,
            SignalId.SDA: self.sda,
            SignalId.RESET: self.reset,
        }
        try:
            return lines[signal_id]
        except KeyError:
            raise KeyError(f"{signal_id} is not a bus line") from None

    def levels(self) -> tuple[int, int]:
        """Current (SCL, SDA) levels."""
        return self.scl.value, self.sda.value
