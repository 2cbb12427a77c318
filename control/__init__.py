"""
padbot Control - Gamepad to differential-drive pipeline.

This package contains the core logic for driving a two-wheel robot from a gamepad:
- Types: Raw samples, canonical events, control state, motor commands
- Interfaces: Protocols for pluggable components (device source, actuator)
- Classifier: Vendor component names -> canonical buttons/axes
- Mapper: Canonical events -> motor commands and actions
- Supervisor: Fixed-rate poll loop, lifecycle, safe stop
"""

from .types import (
    RawComponentSample,
    CanonicalButton,
    CanonicalAxis,
    ButtonPressed,
    ButtonReleased,
    AxisMoved,
    ControllerDisconnected,
    ControlState,
    MotorCommand,
    ConnectionState,
    MapperState,
)
from .interfaces import (
    DeviceSource,
    Actuator,
)
from .errors import (
    ControllerError,
    AcquisitionError,
    DeviceDisconnected,
)

__all__ = [
    "RawComponentSample",
    "CanonicalButton",
    "CanonicalAxis",
    "ButtonPressed",
    "ButtonReleased",
    "AxisMoved",
    "ControllerDisconnected",
    "ControlState",
    "MotorCommand",
    "ConnectionState",
    "MapperState",
    "DeviceSource",
    "Actuator",
    "ControllerError",
    "AcquisitionError",
    "DeviceDisconnected",
]
