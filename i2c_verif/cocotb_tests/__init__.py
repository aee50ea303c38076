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


"""cocotb testbench for the bus wrapper.

This package replays the software bus driver onto ``hw/i2c_bus_wires.sv``
and checks the simulator's output with the PropertyMonitor.

Test Modules
------------
test_i2c_bus
    Single-transfer replay and SDA glitch detection.

Infrastructure:
    bus_interface
        BusInterface mapping DUT handles to SignalBank / TimingEvent

Running Tests
-------------
From the repository root::

    make
    make COCOTB_TEST_FILTER=test_data_glitch_is_reported
"""

from i2c_verif.cocotb_tests.bus_interface import BusInterface

__all__ = [
    "BusInterface",
]
