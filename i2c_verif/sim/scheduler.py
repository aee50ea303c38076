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

"""Event dispatch loop tying the clock, the driver and the monitor together.

Scheduler
=========

The scheduler merges three time-ordered stimulus streams (reset levels,
source-clock edges and optional injected faults) and dispatches them one
timestamp at a time. Within a timestamp the order is fixed:

    1. reset line changes
    2. source-clock edge, then the driver's micro-step for that edge
    3. injected faults (applied on top of the driver's output)
    4. monitor sampling, if the clock rose

so the monitor always sees the post-update bus. Every transition is handed
to the monitor as it happens and kept in the run's trace.

Each call to run() builds a fresh signal bank, driver and monitor, so the
sequence is restartable and independent runs never interfere.

Usage:
    scheduler = Scheduler(SimulationConfig(payload=0x3C))
    for event in scheduler.run():
        print(event)
    assert scheduler.last_run.passed
"""

import dataclasses
import heapq
import itertools
from dataclasses import dataclass
from operator import attrgetter
from typing import Any, Iterable, Iterator

from i2c_verif.config import SimulationConfig
from i2c_verif.exceptions import ConfigurationError
from i2c_verif.models.bus_driver import BusDriver
from i2c_verif.models.signal_model import SignalBank
from i2c_verif.monitors.monitors import PropertyMonitor
from i2c_verif.sim.clock_source import ClockSource, ResetPulse
from i2c_verif.utils.bus_logger import BusLogger
from i2c_verif.verification_types import (
    Edge,
    PropertyResult,
    SignalId,
    SimTime,
    TimingEvent,
)

RESET_PRIORITY = 0
CLOCK_PRIORITY = 1
FAULT_PRIORITY = 2


@dataclass(frozen=True)
class FaultInjection:
    """A harness-forced level on a bus line.

    Attributes:
        time: Simulation time at which the line is forced
        signal: Line to force (SDA, SCL or RESET)
        value: Level to force
    """

    time: SimTime
    signal: SignalId = SignalId.SDA
    value: int = 0


@dataclass(frozen=True)
class _Scheduled:
    time: SimTime
    priority: int
    action: Any


class SimulationRun:
    """Everything one simulation run owns and produced.

    Attributes:
        config: Configuration the run was started with
        signals: The run's bus lines
        driver: The run's bus driver
        monitor: The run's property monitor
        trace: Every TimingEvent dispatched, in order
        completed_at: Time the run finished, or None while it is in progress
    """

    def __init__(self, config: SimulationConfig) -> None:
        self.config = config
        self.signals = SignalBank()
        self.driver = BusDriver(self.signals, config.payload, config.frame_bits)
        self.monitor = PropertyMonitor(config.frame_bits)
        self.trace: list[TimingEvent] = []
        self.completed_at: SimTime | None = None

    @property
    def results(self) -> list[PropertyResult]:
        return self.monitor.results

    @property
    def violations(self) -> list[PropertyResult]:
        return self.monitor.violations

    @property
    def completed(self) -> bool:
        return self.completed_at is not None

    @property
    def passed(self) -> bool:
        """True once the run has completed without any violation."""
        return self.completed and self.monitor.passed


class Scheduler:
    """Drives a BusDriver and a PropertyMonitor from a periodic clock.

    Attributes:
        config: Default configuration for runs
        faults: Injected faults, applied in every run
        last_run: The SimulationRun of the most recent call to run()
    """

    def __init__(
        self,
        config: SimulationConfig | None = None,
        faults: Iterable[FaultInjection] = (),
    ) -> None:
        self.config = config or SimulationConfig()
        self.faults = sorted(faults, key=attrgetter("time"))
        for fault in self.faults:
            if fault.signal is SignalId.CLOCK:
                raise ConfigurationError(
                    "the source clock cannot be forced", field="faults", value=fault
                )
        self.last_run: SimulationRun | None = None

    def run(
        self, duration: SimTime | None = None, period: int | None = None
    ) -> Iterator[TimingEvent]:
        """Simulate one run lazily, yielding every TimingEvent in order.

        The last event is a LEVEL_STABLE marker on the CLOCK signal at
        ``duration``, signalling that the simulation completed.

        Args:
            duration: Overrides config.simulation_duration for this run
            period: Overrides config.clock_period for this run

        Yields:
            Clock edges, reset edges and bus transitions, then the completion marker

        Raises:
            ConfigurationError: If an override is invalid
        """
        config = self.config
        overrides = {}
        if duration is not None:
            overrides["simulation_duration"] = duration
        if period is not None:
            overrides["clock_period"] = period
        if overrides:
            config = dataclasses.replace(config, **overrides)

        run = SimulationRun(config)
        self.last_run = run
        return self._dispatch(run)

    def _dispatch(self, run: SimulationRun) -> Iterator[TimingEvent]:
        duration = run.config.simulation_duration
        schedule = heapq.merge(
            self._reset_schedule(run.config),
            self._clock_schedule(run.config),
            self._fault_schedule(),
            key=attrgetter("time", "priority"),
        )
        bounded = itertools.takewhile(lambda entry: entry.time <= duration, schedule)

        for time, entries in itertools.groupby(bounded, key=attrgetter("time")):
            sample_due = False
            for entry in entries:
                for event in self._apply(run, entry):
                    self._record(run, event)
                    yield event
                if entry.priority == CLOCK_PRIORITY:
                    sample_due |= entry.action.edge is Edge.RISING
            if sample_due:
                run.monitor.sample(time)

        marker = TimingEvent(duration, SignalId.CLOCK, Edge.LEVEL_STABLE)
        run.trace.append(marker)
        run.completed_at = duration
        BusLogger.log_completion(duration, len(run.violations))
        yield marker

    def _apply(self, run: SimulationRun, entry: _Scheduled) -> list[TimingEvent]:
        signals = run.signals
        if entry.priority == RESET_PRIORITY:
            event = signals.reset.drive(entry.action, entry.time)
            return [event] if event is not None else []
        if entry.priority == CLOCK_PRIORITY:
            clock_edge = entry.action
            return [clock_edge] + run.driver.on_clock_edge(
                clock_edge.edge,
                entry.time,
                reset_asserted=bool(signals.reset.value),
            )
        fault = entry.action
        event = signals[fault.signal].force(fault.value, entry.time)
        return [event] if event is not None else []

    @staticmethod
    def _record(run: SimulationRun, event: TimingEvent) -> None:
        run.trace.append(event)
        BusLogger.log_transition(event)
        run.monitor.observe(event)

    @staticmethod
    def _reset_schedule(config: SimulationConfig) -> Iterator[_Scheduled]:
        for time, level in ResetPulse(config.reset_pulse_width).levels():
            yield _Scheduled(time, RESET_PRIORITY, level)

    @staticmethod
    def _clock_schedule(config: SimulationConfig) -> Iterator[_Scheduled]:
        clock = ClockSource(config.clock_period)
        for edge in clock.edges(config.simulation_duration):
            yield _Scheduled(edge.time, CLOCK_PRIORITY, edge)

    def _fault_schedule(self) -> Iterator[_Scheduled]:
        for fault in self.faults:
            yield _Scheduled(fault.time, FAULT_PRIORITY, fault)


def run_simulation(
    config: SimulationConfig | None = None,
    faults: Iterable[FaultInjection] = (),
) -> SimulationRun:
    """Run a simulation to completion and return its SimulationRun.

    Args:
        config: Run configuration (defaults to SimulationConfig())
        faults: Faults to inject during the run

    Returns:
        The completed run, with trace and result log
    """
    scheduler = Scheduler(config, faults)
    for _ in scheduler.run():
        pass
    return scheduler.last_run
