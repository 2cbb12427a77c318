"""
Gamepad Device Source

Reads raw component events from a USB/wireless game controller via pygame.
Tested layout: Sony DualShock 4 under SDL2.
"""

import logging
from typing import List, Optional, Sequence

import pygame

from control.errors import AcquisitionError, DeviceDisconnected
from control.types import ConnectionState, RawComponentSample


logger = logging.getLogger(__name__)


# SDL2 reports a DualShock 4 with these axis and button indices. The names
# are picked so the classifier's substring rules resolve them.
DEFAULT_AXIS_NAMES = (
    "left x",
    "left y",
    "right x",
    "right y",
    "left trigger",
    "right trigger",
)

DEFAULT_BUTTON_NAMES = (
    "cross",
    "circle",
    "square",
    "triangle",
    "share",
    "ps button",
    "options",
    "left stick",
    "right stick",
    "lb",
    "rb",
    "dpad up",
    "dpad down",
    "dpad left",
    "dpad right",
    "touchpad",
)

PS4_KEYWORDS = ("ps", "sony", "playstation", "wireless")


def acquire_gamepad(
    keywords: Sequence[str] = PS4_KEYWORDS,
    log: Optional[logging.Logger] = None,
) -> "pygame.joystick.JoystickType":
    """
    Initialize pygame and pick a controller.

    Prefers a controller whose name contains one of ``keywords``; falls back
    to the first controller found.

    Raises:
        AcquisitionError: No controllers connected
    """
    log = log or logger

    pygame.init()
    pygame.joystick.init()

    joystick_count = pygame.joystick.get_count()
    log.info(f"Found {joystick_count} game controller(s)")

    if joystick_count == 0:
        raise AcquisitionError("No controllers found. Connect a PS4 controller.")

    joysticks = [pygame.joystick.Joystick(i) for i in range(joystick_count)]
    for joystick in joysticks:
        name = joystick.get_name().lower()
        if any(keyword in name for keyword in keywords):
            log.info(f"Found PS4 Controller: {joystick.get_name()}")
            return joystick

    joystick = joysticks[0]
    log.warning(f"PS4 Controller not found. Using: {joystick.get_name()}")
    return joystick


class GamepadSource:
    """
    DeviceSource backed by pygame's joystick event queue.

    Each poll drains the pygame queue and turns this controller's events
    into RawComponentSamples:
    - JOYAXISMOTION: analog sample with the raw axis value
    - JOYBUTTONDOWN / JOYBUTTONUP: digital sample, 1.0 / 0.0
    - JOYDEVICEREMOVED: disconnection
    """

    def __init__(
        self,
        joystick: "pygame.joystick.JoystickType",
        axis_names: Sequence[str] = DEFAULT_AXIS_NAMES,
        button_names: Sequence[str] = DEFAULT_BUTTON_NAMES,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        """
        Wrap an acquired joystick.

        Args:
            joystick: Handle from acquire_gamepad()
            axis_names: Component name per axis index
            button_names: Component name per button index
            logger: Log sink (defaults to the module logger)
        """
        self._joystick = joystick
        self._name = joystick.get_name()
        self._instance_id = joystick.get_instance_id()
        self._axis_names = tuple(axis_names)
        self._button_names = tuple(button_names)
        self._log = logger or logging.getLogger(__name__)
        self._state = ConnectionState.CONNECTED
        self._released = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def state(self) -> ConnectionState:
        return self._state

    async def start(self) -> None:
        """Log the controller capabilities before the first poll"""
        if self._state == ConnectionState.DISCONNECTED:
            raise DeviceDisconnected(f"{self.name} is not connected")

        self._log.info(f"Selected: {self.name}")
        self._log.info(f"Axes: {self._joystick.get_numaxes()}")
        self._log.info(f"Buttons: {self._joystick.get_numbuttons()}")
        self._log.info("Controls:")
        self._log.info("  Left stick: forward/back, rotate")
        self._log.info("  Right stick X: strafe")
        self._log.info("  Options: stop")

    async def stop(self) -> None:
        """Release the controller"""
        self._log.info("Stopping gamepad source")
        self._state = ConnectionState.DISCONNECTED

        if not self._released:
            self._released = True
            self._joystick.quit()
            pygame.joystick.quit()
            pygame.quit()

    async def poll(self) -> List[RawComponentSample]:
        """Drain pending pygame events for this controller"""
        if self._state == ConnectionState.DISCONNECTED:
            raise DeviceDisconnected(f"{self.name} is not connected")

        samples: List[RawComponentSample] = []
        for event in pygame.event.get():
            if getattr(event, "instance_id", None) != self._instance_id:
                continue

            if event.type == pygame.JOYDEVICEREMOVED:
                self._state = ConnectionState.DISCONNECTED
                raise DeviceDisconnected(f"{self.name} was removed")

            sample = self._to_sample(event)
            if sample is not None:
                samples.append(sample)

        self._state = ConnectionState.POLLING
        return samples

    def _to_sample(self, event: pygame.event.Event) -> Optional[RawComponentSample]:
        if event.type == pygame.JOYAXISMOTION:
            return RawComponentSample(self._axis_name(event.axis), True, float(event.value))
        if event.type == pygame.JOYBUTTONDOWN:
            return RawComponentSample(self._button_name(event.button), False, 1.0)
        if event.type == pygame.JOYBUTTONUP:
            return RawComponentSample(self._button_name(event.button), False, 0.0)
        return None

    def _axis_name(self, index: int) -> str:
        if index < len(self._axis_names):
            return self._axis_names[index]
        return f"axis {index}"

    def _button_name(self, index: int) -> str:
        if index < len(self._button_names):
            return self._button_names[index]
        return f"button {index}"
