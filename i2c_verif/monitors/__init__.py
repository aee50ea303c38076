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


"""Runtime protocol monitors for bus checking.

This package contains the property functions and the monitor that applies
them to the live bus.

Monitors
--------
PropertyMonitor
    Observes every SCL/SDA/RESET transition and samples the bus on each rising
    edge of the source clock. Evaluates START, STOP and DATA_STABILITY and
    appends a PropertyResult for every evaluation that fires.

How Monitors Work
-----------------
The Scheduler feeds the monitor in a fixed order for each timestamp:

1. Driver updates SCL/SDA for the clock edge
2. Monitor observes each resulting transition
3. Harness-injected faults are applied and observed
4. Monitor samples the bus for START/STOP

Violations are recorded, never raised. Harnesses that want a hard failure
call utils.validation.assert_no_violations on the result log.

Usage
-----
::

    from i2c_verif.monitors import PropertyMonitor

    monitor = PropertyMonitor()
    monitor.observe(event)
    monitor.sample(time)
    assert monitor.passed
"""

from i2c_verif.monitors.properties import (
    BusSample,
    data_stable,
    start_condition,
    stop_condition,
)
from i2c_verif.monitors.monitors import Monitor, PropertyMonitor

__all__ = [
    "BusSample",
    "data_stable",
    "start_condition",
    "stop_condition",
    "Monitor",
    "PropertyMonitor",
]
