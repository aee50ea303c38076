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


"""Simulation stimulus and dispatch.

Modules
-------
clock_source
    ClockSource (periodic rising/falling edges) and ResetPulse (reset held
    from t=0 for a fixed width)

scheduler
    Scheduler merging reset, clock and fault streams; SimulationRun holding
    one run's signals, driver, monitor, trace and results; run_simulation
    convenience wrapper
"""

from i2c_verif.sim.clock_source import ClockSource, ResetPulse
from i2c_verif.sim.scheduler import (
    FaultInjection,
    Scheduler,
    SimulationRun,
    run_simulation,
)

__all__ = [
    "ClockSource",
    "ResetPulse",
    "FaultInjection",
    "Scheduler",
    "SimulationRun",
    "run_simulation",
]
