"""
Mapper - Turns canonical controller events into robot commands.

This is the safety layer between the gamepad and the motors. The Mapper:
- Applies a stick deadzone and sensitivity
- Converts stick positions to differential-drive motor velocities
- Clamps every outgoing velocity to [-1.0, 1.0]
- Maps button presses to named discrete actions
- Issues exactly one stop when the controller disconnects
"""

import logging
from typing import Dict, FrozenSet, Optional

from .interfaces import Actuator
from .types import (
    AxisMoved,
    ButtonPressed,
    ButtonReleased,
    CanonicalAxis,
    CanonicalButton,
    CanonicalEvent,
    ControllerDisconnected,
    ControlState,
    MapperConfig,
    MapperState,
    MotorCommand,
    clamp,
)


BUTTON_ACTIONS: Dict[CanonicalButton, str] = {
    CanonicalButton.CROSS: "jump",
    CanonicalButton.CIRCLE: "action1",
    CanonicalButton.SQUARE: "action2",
    CanonicalButton.TRIANGLE: "action3",
    CanonicalButton.L1: "boost",
    CanonicalButton.R1: "strafe",
}

STOP_BUTTONS: FrozenSet[CanonicalButton] = frozenset({CanonicalButton.OPTIONS})


class Mapper:
    """
    Consumes CanonicalEvents one at a time and drives an Actuator.

    Single-threaded: only the Supervisor's poll task calls handle().
    """

    def __init__(
        self,
        actuator: Actuator,
        config: Optional[MapperConfig] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        """
        Initialize mapper.

        Args:
            actuator: Receives move/rotate/stop/perform_action calls
            config: Mapper configuration (deadzone, sensitivity, speed caps)
            logger: Log sink (defaults to the module logger)
        """
        self.actuator = actuator
        self.config = config or MapperConfig()
        self._log = logger or logging.getLogger(__name__)

        self._state = MapperState.IDLE
        self._control = ControlState()
        self._last_command: Optional[MotorCommand] = None

    def handle(self, event: CanonicalEvent) -> Optional[MotorCommand]:
        """
        Process one event.

        Args:
            event: Classified controller event

        Returns:
            The MotorCommand handed to the actuator, or None if the event
            produced no motor output
        """
        if self._state == MapperState.TERMINATED:
            self._log.debug(f"Ignoring {event} after disconnection")
            return None

        if isinstance(event, ControllerDisconnected):
            return self._on_disconnected()

        if self._state == MapperState.IDLE:
            self._state = MapperState.ACTIVE

        if isinstance(event, ButtonPressed):
            return self._on_button_pressed(event.button)
        if isinstance(event, ButtonReleased):
            self._log.debug(f"Button released: {event.button.name}")
            return None
        if isinstance(event, AxisMoved):
            return self._on_axis_moved(event.axis, event.value)

        self._log.warning(f"Unknown event type: {event!r}")
        return None

    def halt(self) -> MotorCommand:
        """Stop the robot regardless of state (used on shutdown)"""
        self.actuator.stop()
        self._last_command = MotorCommand.stop()
        return self._last_command

    def _on_disconnected(self) -> MotorCommand:
        self._log.warning("Controller disconnected - stopping robot")
        self._state = MapperState.TERMINATED
        self._control.reset()
        return self.halt()

    def _on_button_pressed(self, button: CanonicalButton) -> Optional[MotorCommand]:
        self._log.debug(f"Button pressed: {button.name}")

        if button in STOP_BUTTONS:
            self._log.info(f"{button.name} pressed - stopping robot")
            return self.halt()

        action = BUTTON_ACTIONS.get(button)
        if action is None:
            return None

        self._log.info(f"{button.name} pressed - action '{action}'")
        self.actuator.perform_action(action)
        return None

    def _on_axis_moved(self, axis: CanonicalAxis, raw: float) -> Optional[MotorCommand]:
        value = self._normalize(raw)

        if axis == CanonicalAxis.LEFT_STICK_Y:
            self._control.left_stick_y = value
            return self._drive(value)
        if axis == CanonicalAxis.LEFT_STICK_X:
            self._control.left_stick_x = value
            return self._rotate(value)
        if axis == CanonicalAxis.RIGHT_STICK_X:
            self._control.right_stick_x = value
            return self._strafe(value)
        if axis == CanonicalAxis.L2_TRIGGER:
            self._control.left_trigger = value
            self._log.debug(f"Left trigger: {value:.2f}")
        elif axis == CanonicalAxis.R2_TRIGGER:
            self._control.right_trigger = value
            self._log.debug(f"Right trigger: {value:.2f}")
        else:
            self._log.debug(f"Right stick Y: {value:.2f}")
        return None

    def _drive(self, y: float) -> MotorCommand:
        """Left stick Y: forward/backward. Stick up reads negative, so invert."""
        speed = -y * self.config.max_forward_speed
        command = MotorCommand.clamped(speed, speed)
        self._log.debug(f"Movement: {command.left:+.2f}")
        self.actuator.move(command.left, command.right)
        return self._remember(command)

    def _rotate(self, x: float) -> MotorCommand:
        """Left stick X: rotate in place, actuator expands to move(-x, x)"""
        angular = clamp(x * self.config.max_rotation_speed)
        command = MotorCommand.clamped(-angular, angular)
        self._log.debug(f"Rotation: {angular:+.2f}")
        self.actuator.rotate(angular)
        return self._remember(command)

    def _strafe(self, x: float) -> MotorCommand:
        """
        Right stick X: strafe on a two-wheel base.

        A differential base has no sideways degree of freedom, so this is
        the same wheel split as rotation.
        """
        speed = x * self.config.max_strafe_speed
        command = MotorCommand.clamped(-speed, speed)
        self._log.debug(f"Strafe: {speed:+.2f}")
        self.actuator.move(command.left, command.right)
        return self._remember(command)

    def _normalize(self, value: float) -> float:
        """Apply the stick deadzone, then sensitivity, clamped to [-1.0, 1.0]"""
        if abs(value) < self.config.deadzone:
            return 0.0
        return clamp(value * self.config.sensitivity)

    def _remember(self, command: MotorCommand) -> MotorCommand:
        self._last_command = command
        return command

    # Public properties for monitoring/tests

    @property
    def state(self) -> MapperState:
        """Current mapper state"""
        return self._state

    @property
    def control_state(self) -> ControlState:
        """Latest normalized stick/trigger values"""
        return self._control

    @property
    def last_command(self) -> Optional[MotorCommand]:
        """Last command dispatched to the actuator"""
        return self._last_command
