"""
Supervisor - Fixed-rate poll loop and lifecycle for the control pipeline.

The Supervisor is the main control loop. It:
- Runs exactly one background task: poll -> classify -> dispatch -> sleep
- Owns start/stop of that task (start is idempotent)
- Turns a failed poll into a single emergency stop and ends the loop
- Guarantees a final stop reaches the actuator on shutdown

This is safety-critical code.
"""

import asyncio
import logging
import time
from typing import Optional

from .classifier import EventClassifier
from .errors import DeviceDisconnected
from .interfaces import DeviceSource
from .mapper import Mapper
from .types import ConnectionState, ControllerDisconnected, SupervisorConfig


class Supervisor:
    """
    Drives a DeviceSource through the EventClassifier into the Mapper.

    Only start()/stop()/wait() are meant to be called from outside; all
    classification and mapping happens on the poll task.
    """

    def __init__(
        self,
        source: DeviceSource,
        classifier: EventClassifier,
        mapper: Mapper,
        config: Optional[SupervisorConfig] = None,
        shutdown: Optional[asyncio.Event] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        """
        Initialize supervisor.

        Args:
            source: Device to poll
            classifier: Raw sample -> canonical event
            mapper: Canonical event -> actuator calls
            config: Supervisor configuration (poll interval)
            shutdown: Event set once the poll loop has exited, for whoever
                waits on process shutdown
            logger: Log sink (defaults to the module logger)
        """
        self.source = source
        self.classifier = classifier
        self.mapper = mapper
        self.config = config or SupervisorConfig()
        self._shutdown = shutdown
        self._log = logger or logging.getLogger(__name__)

        self._running = False
        self._task: Optional[asyncio.Task] = None
        self._disconnected = False
        self._stop_delivered = False
        self._ticks = 0

    def start(self) -> None:
        """
        Start the poll loop as a background task.

        Must be called from a running event loop. Starting twice, or after
        the device has disconnected, is a no-op.
        """
        if self._task is not None and not self._task.done():
            self._log.warning("Supervisor already running")
            return

        # A lost device needs re-acquisition, not a restart
        if self._disconnected or self.source.state == ConnectionState.DISCONNECTED:
            self._log.warning(f"'{self.source.name}' is disconnected - not restarting")
            return

        self._log.info(f"Starting poll loop for '{self.source.name}'")
        self._running = True
        self._stop_delivered = False
        self._task = asyncio.get_running_loop().create_task(self.run())

    def stop(self) -> None:
        """
        Request the poll loop to exit.

        Safe to call from another thread or a signal handler. The loop
        sends the final stop when it exits; if it is not running, the stop
        is sent here instead.
        """
        self._log.info("Stop requested")
        self._running = False

        if self._task is None or self._task.done():
            if not self._stop_delivered:
                self._halt()

    async def wait(self) -> None:
        """Wait for the poll loop to finish"""
        if self._task is not None:
            await self._task

    async def run(self) -> None:
        """
        Main control loop - runs until stopped or the device disconnects.

        Scheduled by start(), which sets the running flag first.
        """
        interval = self.config.poll_interval

        try:
            try:
                await self.source.start()
            except Exception as e:
                self._log.error(f"Failed to start device source: {e}", exc_info=True)
                return

            while self._running:
                tick_start = time.monotonic()
                try:
                    if not await self._tick():
                        break
                except Exception as e:
                    self._log.error(f"Error in poll loop: {e}", exc_info=True)
                    break

                # Best effort cadence: overruns are not made up
                elapsed = time.monotonic() - tick_start
                await asyncio.sleep(max(0.0, interval - elapsed))

        finally:
            self._running = False
            self._log.info(f"Poll loop exited after {self._ticks} ticks")
            await self._cleanup()

    async def _tick(self) -> bool:
        """
        Single poll/classify/dispatch iteration.

        Returns:
            False if the loop must end
        """
        try:
            samples = await self.source.poll()
        except DeviceDisconnected:
            self._log.warning("Controller disconnected!")
            self._disconnected = True
            self.mapper.handle(ControllerDisconnected())
            self._stop_delivered = True
            return False

        self._ticks += 1
        for sample in samples:
            event = self.classifier.classify(sample)
            if event is None:
                continue
            self.mapper.handle(event)
        return True

    def _halt(self) -> None:
        self.mapper.halt()
        self._stop_delivered = True

    async def _cleanup(self) -> None:
        """Cleanup on loop exit"""
        if not self._stop_delivered:
            try:
                self._halt()
            except Exception as e:
                self._log.error(f"Error sending final stop: {e}", exc_info=True)

        try:
            await self.source.stop()
        except Exception as e:
            self._log.error(f"Error stopping device source: {e}", exc_info=True)

        if self._shutdown is not None:
            self._shutdown.set()

    # Public properties for monitoring

    @property
    def is_running(self) -> bool:
        """Check if the poll loop is active"""
        return self._running and self._task is not None and not self._task.done()

    @property
    def disconnected(self) -> bool:
        """Check if the loop ended because the device disconnected"""
        return self._disconnected

    @property
    def ticks(self) -> int:
        """Number of successful polls so far"""
        return self._ticks
