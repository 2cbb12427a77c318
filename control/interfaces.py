"""
Core interfaces (protocols) for pluggable components.

These define the contracts that all implementations must follow.
Python Protocols are structural - a class satisfies one by having the
right methods, without inheriting from it.
"""

from typing import List, Protocol

from .types import ConnectionState, RawComponentSample


class DeviceSource(Protocol):
    """
    Interface for raw controller input (pygame joystick, scripted, ...).

    Wraps an already-acquired device handle. Discovery happens before
    a source is constructed.
    """

    @property
    def name(self) -> str:
        """Human readable device name"""
        ...

    @property
    def state(self) -> ConnectionState:
        """Current connection state"""
        ...

    async def start(self) -> None:
        """
        Prepare the handle for polling.

        Called once by the Supervisor before the first poll.
        """
        ...

    async def stop(self) -> None:
        """
        Release the device handle.

        Must be safe to call after a disconnection.
        """
        ...

    async def poll(self) -> List[RawComponentSample]:
        """
        Drain the hardware event queue for this tick.

        Samples are returned in the order the hardware queued them.
        May return an empty list.

        Raises:
            DeviceDisconnected: The device is gone. The source is then
                DISCONNECTED and every later poll raises again.
        """
        ...


class Actuator(Protocol):
    """
    Interface for the robot's motor side (logger stand-in, serial link, ...).

    Implementations must tolerate calls at the poll rate (~60Hz) and
    must not raise on transport failures - log them instead.
    """

    def move(self, left: float, right: float) -> None:
        """
        Drive both motors.

        Args:
            left: Left motor velocity (-1.0 to 1.0)
            right: Right motor velocity (-1.0 to 1.0)
        """
        ...

    def rotate(self, angular: float) -> None:
        """Rotate in place; equivalent to move(-angular, angular)"""
        ...

    def stop(self) -> None:
        """Zero both motors. Idempotent."""
        ...

    def perform_action(self, name: str) -> None:
        """
        Run a named discrete action.

        Recognized: "forward", "backward", "left", "right", "stop".
        Other names are forwarded or logged, never fatal.
        """
        ...

    @property
    def is_connected(self) -> bool:
        """Check if the actuator can accept commands"""
        ...
