"""
Unit tests for the i2c_verif.monitors package.

The monitor is fed hand-written transitions here, so each property can be
exercised in isolation from the driver and the scheduler.
"""

import pytest

from i2c_verif.monitors.monitors import PropertyMonitor
from i2c_verif.monitors.properties import (
    DATA_CHANGED,
    STABILITY_PROPERTY,
    START_PROPERTY,
    STOP_PROPERTY,
    BusSample,
    data_stable,
    start_condition,
    stop_condition,
)
from i2c_verif.verification_types import Edge, Outcome, SignalId, TimingEvent

SCL, SDA, RESET = SignalId.SCL, SignalId.SDA, SignalId.RESET
RISE, FALL = Edge.RISING, Edge.FALLING


def feed(monitor, time, *changes, sample=True):
    """Observe ``(signal, edge)`` changes at ``time``, then sample."""
    for signal, edge in changes:
        monitor.observe(TimingEvent(time, signal, edge))
    if sample:
        monitor.sample(time)


def open_frame(monitor):
    """Drive the monitor through a START at t=10."""
    feed(monitor, 5)
    feed(monitor, 10, (SDA, FALL))


def names(monitor):
    return [(r.property_name, r.time, r.outcome) for r in monitor.results]


class TestPropertyFunctions:
    """Tests for the pure property functions."""

    @pytest.mark.parametrize(
        "previous, current, expected",
        [
            (BusSample(0, 1, 1), BusSample(5, 1, 0), True),
            (BusSample(0, 1, 0), BusSample(5, 1, 0), False),
            (BusSample(0, 0, 1), BusSample(5, 0, 0), False),
            (BusSample(0, 1, 0), BusSample(5, 1, 1), False),
        ],
    )
    def test_start_condition(self, previous, current, expected):
        assert start_condition(previous, current) is expected

    @pytest.mark.parametrize(
        "previous, current, expected",
        [
            (BusSample(0, 1, 0), BusSample(5, 1, 1), True),
            (BusSample(0, 1, 1), BusSample(5, 1, 1), False),
            (BusSample(0, 0, 0), BusSample(5, 0, 1), False),
            (BusSample(0, 1, 1), BusSample(5, 1, 0), False),
        ],
    )
    def test_stop_condition(self, previous, current, expected):
        assert stop_condition(previous, current) is expected

    def test_data_stable(self):
        assert data_stable(sda_changed_at=15, clock_rise_time=20)
        assert not data_stable(sda_changed_at=20, clock_rise_time=20)


class TestStartStop:
    """Tests for the soft START/STOP observations."""

    def test_start_detected(self, monitor):
        """SDA falling under a high SCL is recorded as START."""
        open_frame(monitor)
        assert names(monitor) == [(START_PROPERTY, 10, Outcome.PASS)]
        assert monitor.in_frame

    def test_nothing_recorded_on_quiet_edges(self, monitor):
        """Edges without a START/STOP record nothing."""
        for time in (5, 10, 15, 20):
            feed(monitor, time)
        assert monitor.results == []

    def test_sda_fall_with_scl_low_is_not_start(self, monitor):
        feed(monitor, 5, (SCL, FALL))
        feed(monitor, 10, (SDA, FALL))
        assert monitor.results == []

    def test_first_sample_has_no_history(self, monitor):
        """Nothing can be detected before a previous sample exists."""
        feed(monitor, 10, (SDA, FALL))
        assert monitor.results == []

    def test_stop_detected_after_data_bits(self):
        """A one-bit frame: START, bit, stop clock pulse, STOP."""
        monitor = PropertyMonitor(frame_bits=1)
        open_frame(monitor)
        feed(monitor, 15, (SCL, FALL), (SDA, RISE))
        feed(monitor, 20, (SCL, RISE))
        feed(monitor, 25, (SCL, FALL), (SDA, FALL))
        feed(monitor, 30, (SCL, RISE))
        feed(monitor, 35, (SDA, RISE))

        assert names(monitor) == [
            (START_PROPERTY, 10, Outcome.PASS),
            (STABILITY_PROPERTY, 20, Outcome.PASS),
            (STOP_PROPERTY, 35, Outcome.PASS),
        ]
        assert not monitor.in_frame
        assert monitor.passed


class TestDataStability:
    """Tests for the DATA_STABILITY property."""

    def test_bit_latched_on_clock_rise(self, monitor):
        open_frame(monitor)
        feed(monitor, 15, (SCL, FALL), (SDA, RISE))
        feed(monitor, 20, (SCL, RISE))

        result = monitor.results[-1]
        assert result.property_name == STABILITY_PROPERTY
        assert result.outcome is Outcome.PASS
        assert result.message == "Data stable during clock high: bit 7 = 1"

    def test_change_coincident_with_clock_rise(self, monitor):
        """SDA moving at the same instant SCL rises is a violation."""
        open_frame(monitor)
        feed(monitor, 15, (SCL, FALL))
        feed(monitor, 20, (SDA, RISE), (SCL, RISE))

        assert monitor.violations[0].time == 20
        assert monitor.violations[0].message == DATA_CHANGED

    def test_change_during_clock_high(self, monitor):
        """An SDA edge inside a bit cell's clock-high window is one violation."""
        open_frame(monitor)
        feed(monitor, 15, (SCL, FALL), (SDA, RISE))
        feed(monitor, 20, (SCL, RISE))
        feed(monitor, 22, (SDA, FALL), sample=False)
        feed(monitor, 25, (SCL, FALL))

        assert [(v.time, v.message) for v in monitor.violations] == [
            (22, DATA_CHANGED)
        ]
        assert not monitor.passed

    def test_change_during_clock_low_is_allowed(self, monitor):
        open_frame(monitor)
        feed(monitor, 15, (SCL, FALL), (SDA, RISE))
        feed(monitor, 17, (SDA, FALL), sample=False)
        feed(monitor, 20, (SCL, RISE))
        assert monitor.passed

    def test_change_outside_frame_is_ignored(self, monitor):
        """Idle-bus SDA activity is not a stability breach."""
        feed(monitor, 5)
        feed(monitor, 7, (SDA, RISE), sample=False)
        assert monitor.violations == []


class TestResetGating:
    """Tests for reset disabling evaluation."""

    def test_no_evaluation_under_reset(self, monitor):
        feed(monitor, 0, (RESET, RISE))
        feed(monitor, 5)
        feed(monitor, 10, (SDA, FALL))
        assert monitor.results == []

    def test_reset_drops_open_frame(self, monitor):
        open_frame(monitor)
        feed(monitor, 12, (RESET, RISE), sample=False)
        assert not monitor.in_frame

        # Reset releasing SDA under a high SCL is neither STOP nor violation
        feed(monitor, 15, (SDA, RISE))
        feed(monitor, 20, (RESET, FALL))
        assert names(monitor) == [(START_PROPERTY, 10, Outcome.PASS)]
