"""
Scripted (test) device source.

Replays per-tick raw component samples for testing without a controller.
"""

import logging
from typing import List, Optional, Sequence, Union

from control.errors import DeviceDisconnected
from control.types import ConnectionState, RawComponentSample


class _Disconnect:
    """Script marker: the poll at this tick fails"""

    def __repr__(self) -> str:
        return "DISCONNECT"


DISCONNECT = _Disconnect()

Tick = Union[Sequence[RawComponentSample], _Disconnect]


class ScriptedSource:
    """
    DeviceSource that returns scripted samples.

    Each poll returns the next tick of the script. A DISCONNECT entry
    makes that poll fail; later ticks are never returned. When the
    script runs out, polls return [] (or fail, with disconnect_at_end).
    """

    def __init__(
        self,
        ticks: Optional[Sequence[Tick]] = None,
        disconnect_at_end: bool = False,
        name: str = "Scripted Controller",
        logger: Optional[logging.Logger] = None,
    ) -> None:
        """
        Initialize scripted source.

        Args:
            ticks: Samples to return, one entry per poll
            disconnect_at_end: Fail the first poll after the last tick
            name: Reported device name
            logger: Log sink (defaults to the module logger)
        """
        self._ticks: List[Tick] = list(ticks or [])
        self._disconnect_at_end = disconnect_at_end
        self._name = name
        self._log = logger or logging.getLogger(__name__)

        self._index = 0
        self._poll_count = 0
        self._state = ConnectionState.CONNECTED

    @property
    def name(self) -> str:
        return self._name

    @property
    def state(self) -> ConnectionState:
        return self._state

    async def start(self) -> None:
        """Start the source"""
        if self._state == ConnectionState.DISCONNECTED:
            raise DeviceDisconnected(f"{self._name} is not connected")
        self._log.info(f"[SCRIPTED] Started ({len(self._ticks)} ticks)")

    async def stop(self) -> None:
        """Stop the source"""
        self._log.info("[SCRIPTED] Stopped")
        self._state = ConnectionState.DISCONNECTED

    async def poll(self) -> List[RawComponentSample]:
        """Return the next scripted tick"""
        if self._state == ConnectionState.DISCONNECTED:
            raise DeviceDisconnected(f"{self._name} is not connected")

        self._poll_count += 1

        if self._index >= len(self._ticks):
            if self._disconnect_at_end:
                raise self._disconnect()
            self._state = ConnectionState.POLLING
            return []

        tick = self._ticks[self._index]
        self._index += 1

        if isinstance(tick, _Disconnect):
            raise self._disconnect()

        self._state = ConnectionState.POLLING
        return list(tick)

    def _disconnect(self) -> DeviceDisconnected:
        self._log.info(f"[SCRIPTED] Simulating disconnect at poll {self._poll_count}")
        self._state = ConnectionState.DISCONNECTED
        return DeviceDisconnected(f"{self._name} disconnected")

    @property
    def poll_count(self) -> int:
        """Total polls attempted (for testing)"""
        return self._poll_count

    @property
    def remaining(self) -> int:
        """Ticks never returned (for testing)"""
        return len(self._ticks) - self._index


def analog(name: str, value: float) -> RawComponentSample:
    """Shorthand for an analog sample"""
    return RawComponentSample(name=name, is_analog=True, value=value)


def press(name: str) -> RawComponentSample:
    """Shorthand for a digital press"""
    return RawComponentSample(name=name, is_analog=False, value=1.0)


def release(name: str) -> RawComponentSample:
    """Shorthand for a digital release"""
    return RawComponentSample(name=name, is_analog=False, value=0.0)


class DriveScripts:
    """Pre-defined drive scripts"""

    @staticmethod
    def forward_drive() -> List[Tick]:
        """Push the left stick up, hold, then let it center"""
        return [
            [analog("left y", -0.3)],
            [analog("left y", -0.6)],
            [analog("left y", -0.9)],
            [],
            [analog("left y", -0.5)],
            [analog("left y", 0.0)],
        ]

    @staticmethod
    def spin_and_strafe() -> List[Tick]:
        """Rotate with the left stick, then strafe with the right stick"""
        return [
            [analog("left x", 0.5)],
            [analog("left x", -0.5)],
            [analog("left x", 0.0)],
            [analog("right x", 0.7)],
            [analog("right x", 0.0)],
        ]

    @staticmethod
    def buttons() -> List[Tick]:
        """Press and release every mapped action button, then Options"""
        names = ("cross", "circle", "square", "triangle", "lb", "rb", "options")
        return [[press(name), release(name)] for name in names]

    @staticmethod
    def drive_then_disconnect() -> List[Tick]:
        """Drive forward, lose the controller with input still queued"""
        return [
            [analog("left y", -0.8)],
            [analog("left x", 0.4)],
            DISCONNECT,
            [analog("left y", -1.0)],
        ]
