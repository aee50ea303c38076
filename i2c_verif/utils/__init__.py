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


"""Utility functions for the verification framework.

This package provides helpers used throughout the framework for bit
ordering, trace decoding, logging, and validation.

Modules
-------
bit_utils
    Payload bit ordering:
    - MSB-first expansion of a byte
    - Packing a bit sequence back into an integer

trace_decoder
    Logic-analyzer style decoding of a trace into START / bits / STOP frames

bus_logger
    Structured logging for bus activity:
    - Timestamped transitions and driver state changes
    - Property results (violations at ERROR level)
    - Per-property pass/violation summary

validation
    Enhanced assertion utilities:
    - ValidationError carrying a context dict
    - Range and bit-width checks used by configuration
    - assert_no_violations for harnesses

Usage
-----
Import utilities as needed::

    from i2c_verif.utils.bit_utils import msb_first_bits
    from i2c_verif.utils.validation import assert_no_violations

    msb_first_bits(0xA5)  # [1, 0, 1, 0, 0, 1, 0, 1]
    assert_no_violations(run.results)
"""

from i2c_verif.utils.validation import (
    ValidationError,
    assert_no_violations,
)

# Note: bit_utils, trace_decoder and bus_logger are not imported at package
# level because config depends on validation. Import them directly.

__all__ = [
    "ValidationError",
    "assert_no_violations",
]
