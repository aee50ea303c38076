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

"""Structured logging for bus activity and property results.

Bus Logger
==========

Provides utilities for logging bus transitions, driver state changes and
property evaluations with a timestamp prefix, making it easy to line a log
up against a waveform viewer.

Messages go to the ``i2c_verif`` logger hierarchy. Under cocotb the
framework's root handler picks them up alongside ``cocotb.log``.
"""

import logging
from collections import Counter
from typing import Any, Iterable

from i2c_verif.verification_types import Outcome, PropertyResult, TimingEvent

log = logging.getLogger("i2c_verif.bus")


class BusLogger:
    """Structured logging for bus simulation runs."""

    @staticmethod
    def log_transition(event: TimingEvent) -> None:
        """Log one signal transition at DEBUG level.

        Args:
            event: Transition to record
        """
        log.debug(str(event))

    @staticmethod
    def log_state_change(time: int, old_state: Any, new_state: Any) -> None:
        """Log a driver state transition.

        Args:
            time: Simulation time of the transition
            old_state: State being left
            new_state: State being entered
        """
        log.debug(f"[t={time:6d}] DRIVER {old_state} → {new_state}")

    @staticmethod
    def log_result(result: PropertyResult) -> None:
        """Log a property evaluation; violations are logged as errors.

        Args:
            result: Entry just appended to the result log
        """
        if result.is_violation:
            log.error(str(result))
        else:
            log.info(str(result))

    @staticmethod
    def log_completion(time: int, violation_count: int) -> None:
        """Log the end of a simulation run.

        Args:
            time: Simulation time at which the run stopped
            violation_count: Number of violations recorded during the run
        """
        status = "PASSED" if violation_count == 0 else "FAILED"
        log.info(
            f"[t={time:6d}] Simulation completed: {status} "
            f"({violation_count} violation(s))"
        )

    @staticmethod
    def log_result_summary(results: Iterable[PropertyResult]) -> None:
        """Log a per-property summary of passes and violations.

        Args:
            results: Complete result log of a run
        """
        counts = Counter((r.property_name, r.outcome) for r in results)
        names = sorted({name for name, _ in counts})

        log.info("=" * 60)
        log.info("PROPERTY SUMMARY")
        log.info("=" * 60)
        for name in names:
            passes = counts[(name, Outcome.PASS)]
            violations = counts[(name, Outcome.VIOLATION)]
            status = "✓" if violations == 0 else "✗"
            log.info(
                f"  {status} {name:14s}: {passes:4d} pass, {violations:4d} violation"
            )
        log.info("=" * 60)
