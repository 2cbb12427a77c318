"""
Logging Actuator - For running without robot hardware.

Stands in for the motor side: records and logs every command instead of
sending it anywhere.
"""

import logging
from typing import List, Optional

from control.types import MotorCommand, clamp

from .serial_link import SerialActuator


class LoggingActuator:
    """
    In-process actuator for testing and demos.

    Logs commands instead of driving motors, and keeps the current
    velocities so tests can inspect them.
    """

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        """
        Initialize logging actuator.

        Args:
            logger: Log sink (defaults to the module logger)
        """
        self._log = logger or logging.getLogger(__name__)
        self._connected = True

        self._left = 0.0
        self._right = 0.0
        self._command_count = 0
        self._stop_count = 0
        self._actions: List[str] = []

        self._log.info("[ROBOT] Initialized")

    def move(self, left: float, right: float) -> None:
        """Record clamped motor velocities"""
        self._left = clamp(left)
        self._right = clamp(right)
        self._command_count += 1

        self._log.debug(
            f"[ROBOT] Move #{self._command_count}: "
            f"L={self._left:+.2f} R={self._right:+.2f}"
        )

    def rotate(self, angular: float) -> None:
        """Rotate in place with opposite wheel velocities"""
        angular = clamp(angular)
        self._log.debug(f"[ROBOT] Rotate: {angular:+.2f}")
        self.move(-angular, angular)

    def stop(self) -> None:
        """Zero both motors"""
        self._left = 0.0
        self._right = 0.0
        self._stop_count += 1
        self._log.info("[ROBOT] Stopped")

    def perform_action(self, name: str) -> None:
        """Run a named action; unknown names are logged and ignored"""
        self._log.info(f"[ROBOT] Performing action: {name}")
        self._actions.append(name)

        action = name.lower()
        if action == "forward":
            self.move(1.0, 1.0)
        elif action == "backward":
            self.move(-1.0, -1.0)
        elif action == "left":
            self.move(-1.0, 1.0)
        elif action == "right":
            self.move(1.0, -1.0)
        elif action == "stop":
            self.stop()
        else:
            self._log.warning(f"[ROBOT] Unknown action: {name}")

    @property
    def is_connected(self) -> bool:
        """Check connection status"""
        return self._connected

    @property
    def current(self) -> MotorCommand:
        """Current motor velocities (for testing)"""
        return MotorCommand.clamped(self._left, self._right)

    @property
    def command_count(self) -> int:
        """Total move commands received (for testing)"""
        return self._command_count

    @property
    def stop_count(self) -> int:
        """Total stop commands received (for testing)"""
        return self._stop_count

    @property
    def actions(self) -> List[str]:
        """Action names received, in order (for testing)"""
        return list(self._actions)


__all__ = ["LoggingActuator", "SerialActuator"]
