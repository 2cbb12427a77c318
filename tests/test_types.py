"""Tests for core types"""

import pytest
from dataclasses import FrozenInstanceError
from control.types import (
    CanonicalAxis,
    CanonicalButton,
    ClassifierConfig,
    ConnectionState,
    ControlState,
    MapperConfig,
    MapperState,
    MotorCommand,
    RawComponentSample,
    SupervisorConfig,
    clamp,
)


def test_motor_command_valid():
    """Test valid motor command creation"""
    command = MotorCommand(left=0.5, right=-0.25)
    assert command.left == 0.5
    assert command.right == -0.25
    assert command.is_stop is False


def test_motor_command_validation():
    """Test motor command validates ranges"""
    with pytest.raises(AssertionError):
        MotorCommand(left=1.5, right=0.0)

    with pytest.raises(AssertionError):
        MotorCommand(left=0.0, right=-1.01)


def test_motor_command_stop():
    """Test stop command creation"""
    stop = MotorCommand.stop()
    assert stop.is_stop is True
    assert stop.left == 0.0
    assert stop.right == 0.0


@pytest.mark.parametrize("left,right,expected", [
    (2.0, -3.0, (1.0, -1.0)),
    (0.3, -0.7, (0.3, -0.7)),
    (-1.0, 1.0, (-1.0, 1.0)),
])
def test_motor_command_clamped(left, right, expected):
    """Test clamping into [-1, 1]"""
    command = MotorCommand.clamped(left, right)
    assert (command.left, command.right) == expected


def test_motor_command_clamped_folds_negative_zero():
    """Test -0.0 is dispatched as plain 0.0"""
    command = MotorCommand.clamped(-0.0, -0.0)
    assert str(command.left) == "0.0"
    assert str(command.right) == "0.0"


def test_clamp_law():
    """Test clamp equals max(-1, min(1, c))"""
    for c in (-5.0, -1.0, -0.5, 0.0, 0.99, 1.0, 7.5):
        assert clamp(c) == max(-1.0, min(1.0, c))


def test_control_state_defaults_and_reset():
    """Test control state starts neutral and resets"""
    state = ControlState()
    assert state.left_stick_y == 0.0
    assert state.left_trigger == 0.0
    assert state.right_trigger == 0.0

    state.left_stick_y = -0.8
    state.right_trigger = 0.4
    assert state != ControlState()

    state.reset()
    assert state == ControlState()


def test_raw_sample_is_frozen():
    """Test raw samples are immutable"""
    sample = RawComponentSample(name="x axis left", is_analog=True, value=0.5)
    with pytest.raises(FrozenInstanceError):
        sample.value = 0.7


def test_config_defaults():
    """Test default thresholds and rates"""
    assert ClassifierConfig().deadzone == 0.1
    mapper = MapperConfig()
    assert mapper.deadzone == 0.15
    assert mapper.sensitivity == 1.0
    assert mapper.max_forward_speed == 1.0
    assert SupervisorConfig().poll_interval == 0.016


def test_canonical_enums():
    """Test canonical vocabularies are complete"""
    assert len(CanonicalButton) == 14
    assert len(CanonicalAxis) == 6
    assert CanonicalButton.CROSS.value == "cross"
    assert CanonicalAxis.L2_TRIGGER.value == "l2_trigger"


def test_state_enums():
    """Test state enum values"""
    assert ConnectionState.DISCONNECTED.value == "disconnected"
    assert ConnectionState.CONNECTED.value == "connected"
    assert ConnectionState.POLLING.value == "polling"
    assert MapperState.IDLE.value == "idle"
    assert MapperState.ACTIVE.value == "active"
    assert MapperState.TERMINATED.value == "terminated"
