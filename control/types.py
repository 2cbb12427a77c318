"""
Core data types for the padbot control pipeline.

All the data structures that flow from the gamepad to the motors, fully typed.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union


class CanonicalButton(Enum):
    """Platform-independent button identity"""
    CROSS = "cross"
    CIRCLE = "circle"
    SQUARE = "square"
    TRIANGLE = "triangle"
    L1 = "l1"
    R1 = "r1"
    L2 = "l2"
    R2 = "r2"
    SHARE = "share"
    OPTIONS = "options"
    L3 = "l3"              # Left stick click
    R3 = "r3"              # Right stick click
    PS = "ps"
    TOUCHPAD = "touchpad"


class CanonicalAxis(Enum):
    """Platform-independent analog axis identity"""
    LEFT_STICK_X = "left_stick_x"
    LEFT_STICK_Y = "left_stick_y"
    RIGHT_STICK_X = "right_stick_x"
    RIGHT_STICK_Y = "right_stick_y"
    L2_TRIGGER = "l2_trigger"
    R2_TRIGGER = "r2_trigger"


class ConnectionState(Enum):
    """Device source connection states"""
    DISCONNECTED = "disconnected"  # Terminal once reached from a live handle
    CONNECTED = "connected"        # Handle acquired, not polled yet
    POLLING = "polling"            # Handle live and being polled


class MapperState(Enum):
    """Control mapper state machine states"""
    IDLE = "idle"                  # No event seen yet
    ACTIVE = "active"              # Processing events
    TERMINATED = "terminated"      # Controller gone, events ignored


@dataclass(frozen=True)
class RawComponentSample:
    """
    One hardware component reading drained from the device queue.

    Names are whatever the driver reports ("x axis left", "0", "cross", ...).
    """
    name: str
    is_analog: bool
    value: float


@dataclass(frozen=True)
class ButtonPressed:
    button: CanonicalButton


@dataclass(frozen=True)
class ButtonReleased:
    button: CanonicalButton


@dataclass(frozen=True)
class AxisMoved:
    axis: CanonicalAxis
    value: float


@dataclass(frozen=True)
class ControllerDisconnected:
    """Terminal event: the device stopped answering polls"""


CanonicalEvent = Union[ButtonPressed, ButtonReleased, AxisMoved, ControllerDisconnected]


@dataclass
class ControlState:
    """
    Latest normalized stick and trigger values.

    Owned by the Mapper; mutated by axis events and reset on disconnection.
    """
    left_stick_x: float = 0.0
    left_stick_y: float = 0.0
    right_stick_x: float = 0.0
    left_trigger: float = 0.0
    right_trigger: float = 0.0

    def reset(self) -> None:
        """Return every axis to neutral"""
        self.left_stick_x = 0.0
        self.left_stick_y = 0.0
        self.right_stick_x = 0.0
        self.left_trigger = 0.0
        self.right_trigger = 0.0


@dataclass(frozen=True)
class MotorCommand:
    """
    Per-motor velocity command for a differential-drive base.

    This is the output of the Mapper and input to the Actuator.
    """
    left: float                  # Left motor: -1.0 (full reverse) to 1.0 (full forward)
    right: float                 # Right motor: -1.0 to 1.0

    def __post_init__(self) -> None:
        """Validate ranges"""
        assert -1.0 <= self.left <= 1.0, f"left out of range: {self.left}"
        assert -1.0 <= self.right <= 1.0, f"right out of range: {self.right}"

    @property
    def is_stop(self) -> bool:
        """Check if this is a stop command"""
        return self.left == 0.0 and self.right == 0.0

    @classmethod
    def stop(cls) -> "MotorCommand":
        """Create a stop command"""
        return cls(left=0.0, right=0.0)

    @classmethod
    def clamped(cls, left: float, right: float) -> "MotorCommand":
        """Create a command with both components clamped to [-1.0, 1.0]"""
        # Adding 0.0 folds negative zero into plain zero
        return cls(left=clamp(left) + 0.0, right=clamp(right) + 0.0)


def clamp(value: float, min_val: float = -1.0, max_val: float = 1.0) -> float:
    """Clamp value to range [min_val, max_val]"""
    return max(min_val, min(max_val, value))


@dataclass
class ClassifierConfig:
    """Configuration for the EventClassifier"""
    deadzone: float = 0.1              # Raw analog samples below this read as 0.0


@dataclass
class MapperConfig:
    """Configuration for the Mapper"""
    deadzone: float = 0.15             # Stick values below this are treated as centered
    sensitivity: float = 1.0           # Multiplier applied after the deadzone
    max_forward_speed: float = 1.0     # Scale for forward/backward (left stick Y)
    max_rotation_speed: float = 1.0    # Scale for in-place rotation (left stick X)
    max_strafe_speed: float = 1.0      # Scale for strafe (right stick X)


@dataclass
class SupervisorConfig:
    """Configuration for the Supervisor"""
    poll_interval: float = 0.016       # Poll period (~60Hz), best effort
