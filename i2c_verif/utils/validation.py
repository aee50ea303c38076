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

"""Validation utilities and improved assertions for testing.

Validation Utilities
====================

This module provides enhanced assertion and validation functions with
rich error reporting. Unlike standard Python assertions, these provide
detailed context to help debug failures quickly.

Provided Utilities:

    ValidationError: Enhanced AssertionError with context dict
        - Stores context as attributes
        - Formats context in error message

    Assertion Functions:
        - assert_equals(): Compare values with detailed mismatch info
        - assert_in_range(): Check value bounds
        - assert_bit_width(): Ensure value fits in bit width
        - assert_no_violations(): Turn recorded violations into a failure

Example:
    >>> try:
    ...     assert_in_range(0, 1, 1000, "clock_period")
    ... except ValidationError as e:
    ...     print(e.context['min'])  # 1
"""

import logging
from typing import Any, Iterable

from i2c_verif.exceptions import ProtocolViolationError
from i2c_verif.verification_types import PropertyResult

log = logging.getLogger(__name__)


class ValidationError(AssertionError):
    """Enhanced assertion error with context."""

    def __init__(self, message: str, **context: Any) -> None:
        """Initialize with message and context."""
        self.context = context
        context_str = "\n".join(f"  {k}: {v}" for k, v in context.items())
        super().__init__(f"{message}\nContext:\n{context_str}" if context else message)


def assert_equals(
    actual: Any, expected: Any, message: str = "", **context: Any
) -> None:
    """Assert equality with enhanced error reporting."""
    if actual != expected:
        base_msg = message or f"Expected {expected}, got {actual}"
        raise ValidationError(
            base_msg,
            actual=actual,
            expected=expected,
            difference=actual - expected if isinstance(actual, int | float) else None,
            **context,
        )


def assert_in_range(
    value: int, min_val: int, max_val: int | None = None, name: str = "value"
) -> None:
    """Assert value is within range (no upper bound when max_val is None)."""
    upper_ok = max_val is None or value <= max_val
    if not (isinstance(value, int) and min_val <= value and upper_ok):
        raise ValidationError(
            f"{name} out of range",
            value=value,
            min=min_val,
            max=max_val,
        )


def assert_bit_width(value: int, bits: int, name: str = "value") -> None:
    """Assert value fits in specified bit width."""
    max_val = (1 << bits) - 1
    if not isinstance(value, int) or value < 0 or value > max_val:
        raise ValidationError(
            f"{name} exceeds {bits}-bit width",
            value=hex(value) if isinstance(value, int) else value,
            bits=bits,
            max_value=hex(max_val),
        )


def assert_no_violations(results: Iterable[PropertyResult]) -> None:
    """Raise ProtocolViolationError if the result log holds any Violation.

    The monitor never raises on its own; harnesses call this once a run has
    completed so that every violation of the run is reported together.

    Args:
        results: Result log produced by a PropertyMonitor

    Raises:
        ProtocolViolationError: If at least one Violation was recorded
    """
    violations = [result for result in results if result.is_violation]
    if violations:
        details = "\n".join(f"  - {violation}" for violation in violations)
        log.error("Protocol verification failed:\n%s", details)
        raise ProtocolViolationError(
            f"{len(violations)} protocol violation(s) recorded:\n{details}",
            violations=violations,
        )
