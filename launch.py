#!/usr/bin/env python3
"""
padbot Launcher - Drive a robot from a PS4 controller

Usage:
    python launch.py                         # Gamepad, logging actuator
    python launch.py --serial /dev/ttyUSB0   # Gamepad, serial robot
    python launch.py --mock                  # Scripted input (no controller)
    python launch.py --demo                  # Run control demo
"""

import argparse
import asyncio
import logging
import signal
import sys
from typing import Optional

from control.actuator import LoggingActuator, SerialActuator
from control.classifier import EventClassifier
from control.errors import AcquisitionError
from control.interfaces import Actuator, DeviceSource
from control.mapper import Mapper
from control.supervisor import Supervisor
from robot_config import RobotConfig


logger = logging.getLogger("padbot")

REMEDIATION_HINT = "Make sure your PS4 controller is connected via USB or wireless adapter"


def setup_logging(level: str = "INFO") -> None:
    """Configure logging"""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stdout
    )


def build_actuator(config: RobotConfig, serial_port: Optional[str] = None) -> Actuator:
    """Create the actuator selected on the command line or in .env"""
    port = serial_port or (config.serial_port if config.actuator == "serial" else None)
    if port:
        return SerialActuator(port, baudrate=config.serial_baud)
    return LoggingActuator()


async def run_supervised(source: DeviceSource, actuator: Actuator, config: RobotConfig) -> None:
    """
    Run the control pipeline until Ctrl+C, SIGTERM or controller loss.

    The shutdown event is the only channel between this context and the
    poll task: signals set it, and so does the Supervisor when its loop exits.
    """
    shutdown = asyncio.Event()
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, shutdown.set)
        except NotImplementedError:
            # Windows event loops: Ctrl+C arrives as KeyboardInterrupt instead
            pass

    mapper = Mapper(actuator, config.mapper_config())
    supervisor = Supervisor(
        source=source,
        classifier=EventClassifier(config.classifier_config()),
        mapper=mapper,
        config=config.supervisor_config(),
        shutdown=shutdown,
    )

    supervisor.start()
    logger.info("Controller started - waiting for input")

    try:
        await shutdown.wait()
    finally:
        logger.info("Shutting down...")
        supervisor.stop()
        await supervisor.wait()

    if supervisor.disconnected:
        logger.warning("Controller disconnected - robot halted")
    logger.info("Goodbye!")


def launch_gamepad(config: RobotConfig, serial_port: Optional[str] = None) -> int:
    """Launch gamepad control mode"""
    from devices.gamepad_source import GamepadSource, acquire_gamepad

    try:
        joystick = acquire_gamepad()
    except AcquisitionError as e:
        logger.error(f"Controller initialization failed: {e}")
        print(REMEDIATION_HINT)
        return 1

    actuator = build_actuator(config, serial_port)
    try:
        asyncio.run(run_supervised(GamepadSource(joystick), actuator, config))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    finally:
        if isinstance(actuator, SerialActuator):
            actuator.close()
    return 0


def launch_mock(config: RobotConfig, serial_port: Optional[str] = None) -> int:
    """Launch with scripted input (no controller needed)"""
    from devices.scripted_source import DriveScripts, ScriptedSource

    ticks = DriveScripts.forward_drive() + DriveScripts.spin_and_strafe() + DriveScripts.buttons()
    source = ScriptedSource(ticks, disconnect_at_end=True)
    actuator = build_actuator(config, serial_port)
    try:
        asyncio.run(run_supervised(source, actuator, config))
    finally:
        if isinstance(actuator, SerialActuator):
            actuator.close()
    return 0


def launch_demo() -> int:
    """Launch control pipeline demo"""
    print("Starting control demo...")
    from demo_control import main
    main()
    return 0


def main():
    """Main entry point"""
    parser = argparse.ArgumentParser(
        description="padbot - PS4 controller robot control",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python launch.py                          Drive with gamepad, log commands
  python launch.py --serial /dev/ttyUSB0    Drive a serial-connected robot
  python launch.py --mock                   Scripted input, no controller
  python launch.py --demo                   Run control demo
        """
    )

    parser.add_argument(
        "--mock",
        action="store_true",
        help="Use scripted input instead of a controller"
    )
    parser.add_argument(
        "--serial",
        metavar="PORT",
        help="Send commands to a serial robot (device path or pyserial URL)"
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Run control pipeline demo"
    )
    parser.add_argument(
        "--env-file",
        help="Path to .env file"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Set logging level (default: INFO, DEBUG if ROBOT_DEBUG is set)"
    )

    args = parser.parse_args()

    config = RobotConfig(args.env_file)

    # Setup logging
    setup_logging(args.log_level or ("DEBUG" if config.debug else "INFO"))

    is_valid, errors = config.validate()
    if not is_valid:
        for error in errors:
            logger.error(f"Configuration error: {error}")
        sys.exit(1)

    logger.info("=== PS4 Controller Robot Control System ===")

    # Route to appropriate launcher
    if args.demo:
        code = launch_demo()
    elif args.mock:
        code = launch_mock(config, args.serial)
    else:
        code = launch_gamepad(config, args.serial)
    sys.exit(code)


if __name__ == "__main__":
    main()
