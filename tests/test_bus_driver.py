"""
Unit tests for the i2c_verif.models.bus_driver module.

These tests step the driver by hand, without the scheduler, and check its
state sequence, the transitions it emits and its reset behaviour.
"""

import pytest

from conftest import STEPS_PER_TRANSFER
from i2c_verif.exceptions import ConfigurationError
from i2c_verif.models.bus_driver import (
    IDLE,
    START,
    BitPhase,
    BusDriver,
    TransferPhase,
    TransferState,
)
from i2c_verif.models.signal_model import SignalBank
from i2c_verif.verification_types import Edge, SignalId, TimingEvent


def step(driver, count, period=5):
    """Advance ``driver`` by ``count`` rising edges; return the states visited."""
    states = []
    for n in range(count):
        driver.on_clock_edge(Edge.RISING, (n + 1) * period)
        states.append(driver.state)
    return states


def expected_sequence(frame_bits=8):
    sequence = [START]
    for index in range(frame_bits - 1, -1, -1):
        sequence.append(TransferState.bit_cell(index, BitPhase.SETUP))
        sequence.append(TransferState.bit_cell(index, BitPhase.HOLD))
    sequence.append(TransferState.stop(BitPhase.SETUP))
    sequence.append(TransferState.stop(BitPhase.HOLD))
    sequence.append(IDLE)
    return sequence


class TestTransferSequence:
    """Tests for the micro-step order of one transfer."""

    def test_initial_state_is_idle(self, driver, signals):
        """A new driver is idle with both lines high."""
        assert driver.state == IDLE
        assert signals.levels() == (1, 1)
        assert not driver.transfer_complete

    def test_state_sequence(self, driver):
        """One transfer visits Start, 8 bit cells and Stop, then returns to Idle."""
        assert step(driver, STEPS_PER_TRANSFER) == expected_sequence()
        assert driver.transfer_complete

    def test_start_drives_sda_low_with_scl_high(self, driver, signals):
        """Idle → Start pulls SDA low and leaves SCL high."""
        events = driver.on_clock_edge(Edge.RISING, 10)
        assert events == [TimingEvent(10, SignalId.SDA, Edge.FALLING)]
        assert signals.levels() == (1, 0)

    def test_setup_lowers_clock_before_data(self, driver):
        """A setup step reports the SCL change before the SDA change."""
        driver.on_clock_edge(Edge.RISING, 10)
        events = driver.on_clock_edge(Edge.RISING, 15)
        assert events == [
            TimingEvent(15, SignalId.SCL, Edge.FALLING),
            TimingEvent(15, SignalId.SDA, Edge.RISING),
        ]

    def test_hold_only_raises_clock(self, driver):
        """A hold step only raises SCL."""
        step(driver, 2)
        events = driver.on_clock_edge(Edge.RISING, 20)
        assert events == [TimingEvent(20, SignalId.SCL, Edge.RISING)]

    def test_stop_raises_sda_with_scl_high(self, driver, signals):
        """The final step raises SDA while SCL is already high."""
        step(driver, STEPS_PER_TRANSFER - 1)
        assert signals.levels() == (1, 0)
        events = driver.on_clock_edge(Edge.RISING, 500)
        assert events == [TimingEvent(500, SignalId.SDA, Edge.RISING)]
        assert signals.levels() == (1, 1)

    def test_transmitted_bits_msb_first(self, driver):
        """Bits are latched MSB first."""
        step(driver, STEPS_PER_TRANSFER)
        assert driver.transmitted_bits == [1, 0, 1, 0, 0, 1, 0, 1]

    def test_falling_edges_are_ignored(self, driver):
        """Falling source-clock edges never advance the driver."""
        assert driver.on_clock_edge(Edge.FALLING, 7) == []
        assert driver.state == IDLE

    def test_no_second_transfer_without_reset(self, driver):
        """After STOP the driver stays idle until reset."""
        step(driver, STEPS_PER_TRANSFER)
        assert driver.on_clock_edge(Edge.RISING, 1000) == []
        assert driver.state == IDLE

    def test_payload_must_fit_frame(self, signals):
        """A payload wider than the frame is rejected."""
        with pytest.raises(ConfigurationError):
            BusDriver(signals, payload=0x1FF)


class TestReset:
    """Tests for reset from every reachable state."""

    @pytest.mark.parametrize("steps", range(STEPS_PER_TRANSFER + 1))
    def test_reset_returns_to_idle(self, steps):
        """Reset from any reachable state gives Idle with SCL=1, SDA=1."""
        signals = SignalBank()
        driver = BusDriver(signals, payload=0xA5)
        step(driver, steps)

        driver.reset(time=999)

        assert driver.state == IDLE
        assert signals.levels() == (1, 1)
        assert driver.transmitted_bits == []
        assert not driver.transfer_complete

    @pytest.mark.parametrize("steps", [0, 3, STEPS_PER_TRANSFER])
    def test_reset_is_idempotent(self, steps):
        """A second reset changes nothing and emits no transitions."""
        signals = SignalBank()
        driver = BusDriver(signals, payload=0xA5)
        step(driver, steps)
        driver.reset(time=999)

        assert driver.reset(time=1000) == []
        assert driver.state == IDLE
        assert signals.levels() == (1, 1)

    def test_reset_input_overrides_stepping(self, driver, signals):
        """With reset asserted a rising edge behaves as reset()."""
        step(driver, 5)
        events = driver.on_clock_edge(Edge.RISING, 100, reset_asserted=True)
        assert driver.state == IDLE
        assert signals.levels() == (1, 1)
        assert all(event.edge is Edge.RISING for event in events)

    def test_reset_rearms_transfer(self, driver):
        """A completed transfer can be repeated after reset."""
        step(driver, STEPS_PER_TRANSFER)
        driver.reset(time=200)
        assert step(driver, STEPS_PER_TRANSFER) == expected_sequence()


class TestTransferState:
    """Tests for TransferState formatting."""

    def test_str(self):
        assert str(IDLE) == "Idle"
        assert str(START) == "Start"
        assert str(TransferState.bit_cell(3, BitPhase.HOLD)) == "BitCell(3, Hold)"
        assert str(TransferState.stop(BitPhase.SETUP)) == "Stop(Setup)"

    def test_phase(self):
        assert TransferState.bit_cell(0, BitPhase.SETUP).phase is TransferPhase.BIT_CELL
