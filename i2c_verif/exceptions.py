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

"""Custom exceptions for bus verification errors.

Exceptions
==========

This module defines the exception types raised by the framework. Protocol
violations observed on the bus are *not* exceptions: the monitor records them
as data. ProtocolViolationError exists only for harnesses that want to turn
recorded violations into a hard failure.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from i2c_verif.verification_types import PropertyResult


class VerificationError(Exception):
    """Base exception for all verification-related failures.

    All framework-specific exceptions inherit from this base class,
    allowing callers to catch all verification errors with a single handler.
    """

    pass


class ConfigurationError(VerificationError):
    """Invalid simulation configuration.

    Raised before any simulation starts when a configuration field is out of
    range, e.g. a zero or negative clock period or a payload wider than
    8 bits.
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any = None,
    ):
        """Initialize configuration error with the offending field.

        Args:
            message: Error description
            field: Name of the configuration field that failed validation
            value: The rejected value
        """
        super().__init__(message)
        self.field = field
        self.value = value


class ProtocolViolationError(VerificationError):
    """Bus protocol violation surfaced as a hard failure.

    Raised by harness helpers when the result log holds one or more
    Violation outcomes and the caller has asked for violations to be fatal.
    """

    def __init__(
        self, message: str, violations: list[PropertyResult] | None = None
    ):
        """Initialize protocol violation error with the offending results.

        Args:
            message: Error description
            violations: Violation entries taken from the result log
        """
        super().__init__(message)
        self.violations = violations or []
