"""
Serial Actuator - Drives a microcontroller motor board over a serial port.

Line protocol (UTF-8, newline terminated):
    M:<left>,<right>    motor speeds as integers -100..100
    STOP                zero both motors
    ACTION:<name>       named action, forwarded verbatim

Transport failures are logged and swallowed: the control loop never sees them.
"""

import logging
from typing import Optional

import serial

from control.types import clamp


class SerialActuator:
    """
    Actuator adapter for a serial-connected robot (Arduino, ESP32, ...).

    Uses pyserial's serial_for_url so both device paths ("/dev/ttyUSB0",
    "COM3") and URLs ("loop://", "socket://host:port") work.
    """

    def __init__(
        self,
        port: str,
        baudrate: int = 9600,
        timeout: float = 1.0,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        """
        Open the serial connection.

        Args:
            port: Device path or pyserial URL
            baudrate: Baud rate
            timeout: Read/write timeout in seconds
            logger: Log sink (defaults to the module logger)
        """
        self._port = port
        self._baudrate = baudrate
        self._log = logger or logging.getLogger(__name__)
        self._serial: Optional[serial.SerialBase] = None
        self._connected = False

        try:
            self._serial = serial.serial_for_url(
                port, baudrate=baudrate, timeout=timeout, write_timeout=timeout
            )
            self._connected = True
            self._log.info(f"Serial robot connected on {port} at {baudrate} baud")
        except (serial.SerialException, OSError, ValueError) as e:
            self._log.error(f"Failed to connect to robot on port {port}: {e}")

    def move(self, left: float, right: float) -> None:
        """Send motor speeds as percentages"""
        if not self._connected:
            self._log.warning("Robot not connected")
            return

        left_speed = int(clamp(left) * 100)
        right_speed = int(clamp(right) * 100)
        self._send(f"M:{left_speed},{right_speed}\n")
        self._log.debug(f"Move command sent: left={left_speed}, right={right_speed}")

    def rotate(self, angular: float) -> None:
        """Rotate in place with opposite wheel speeds"""
        self.move(-angular, angular)

    def stop(self) -> None:
        """Send stop command"""
        if not self._connected:
            self._log.warning("Robot not connected")
            return

        self._send("STOP\n")
        self._log.info("Stop command sent")

    def perform_action(self, name: str) -> None:
        """Forward a named action to the robot"""
        if not self._connected:
            self._log.warning("Robot not connected")
            return

        self._send(f"ACTION:{name}\n")
        self._log.info(f"Action performed: {name}")

    def close(self) -> None:
        """Close the serial port"""
        if self._serial is None:
            return

        try:
            self._serial.close()
            self._log.info("Serial robot disconnected")
        except (serial.SerialException, OSError) as e:
            self._log.error(f"Error closing serial connection: {e}")
        finally:
            self._serial = None
            self._connected = False

    def _send(self, command: str) -> None:
        """Write one command line; failures are logged, never raised"""
        try:
            self._serial.write(command.encode("utf-8"))
            self._log.debug(f"Command sent: {command.strip()}")
        except (serial.SerialException, OSError) as e:
            self._log.error(f"Failed to send command '{command.strip()}': {e}")

    @property
    def is_connected(self) -> bool:
        """Check connection status"""
        return self._connected

    @property
    def port(self) -> str:
        """Configured port or URL"""
        return self._port
