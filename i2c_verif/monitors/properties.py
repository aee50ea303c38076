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

"""Bus protocol properties as pure functions.

Properties
==========

Each property is a pure function over a short rolling history of the bus:
the previous sample and the current one, or the last change time of a line.
Nothing here keeps state, so the same functions can back the simulation
monitor and the cocotb testbench alike.

    START           SCL high, SDA 1 → 0 since the previous sample
    STOP            SCL high, SDA 0 → 1 since the previous sample
    DATA_STABILITY  SDA unchanged when SCL rises and while it stays high
"""

from dataclasses import dataclass

from i2c_verif.verification_types import SimTime

START_PROPERTY = "START"
STOP_PROPERTY = "STOP"
STABILITY_PROPERTY = "DATA_STABILITY"

START_DETECTED = "START condition detected"
STOP_DETECTED = "STOP condition detected"
DATA_CHANGED = "Data changed during clock high"


@dataclass(frozen=True)
class BusSample:
    """Levels of both bus lines at one sampling point."""

    time: SimTime
    scl: int
    sda: int


def start_condition(previous: BusSample, current: BusSample) -> bool:
    """SDA fell while SCL is high."""
    return current.scl == 1 and previous.sda == 1 and current.sda == 0


def stop_condition(previous: BusSample, current: BusSample) -> bool:
    """SDA rose while SCL is high."""
    return current.scl == 1 and previous.sda == 0 and current.sda == 1


def data_stable(sda_changed_at: SimTime, clock_rise_time: SimTime) -> bool:
    """SDA did not move at the instant SCL rose.

    A change at the same timestamp as the rising clock edge lands inside the
    clock-high window, so only changes strictly before the edge are stable.

    Args:
        sda_changed_at: Time of the most recent SDA transition
        clock_rise_time: Time of the SCL rising edge opening the window
    """
    return sda_changed_at < clock_rise_time
