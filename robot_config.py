#!/usr/bin/env python3
"""
padbot Environment Configuration Helper

Provides easy access to .env configuration for the control pipeline.
Automatically loads .env file and provides defaults.
"""

import os
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from control.types import ClassifierConfig, MapperConfig, SupervisorConfig


ACTUATOR_KINDS = ("log", "serial")


class RobotConfig:
    """Configuration manager for padbot"""

    def __init__(self, env_file: Optional[str] = None):
        """
        Initialize configuration

        Args:
            env_file: Path to .env file (default: .env in current directory)
        """
        self._loaded = False

        env_path = Path(env_file) if env_file is not None else Path(".env")
        if env_path.exists():
            load_dotenv(env_path)
            self._loaded = True

    @property
    def actuator(self) -> str:
        """Actuator backend: 'log' or 'serial' (default: log)"""
        return os.getenv("ROBOT_ACTUATOR", "log").strip().lower()

    @property
    def serial_port(self) -> Optional[str]:
        """Serial device path or pyserial URL"""
        return os.getenv("ROBOT_SERIAL_PORT")

    @property
    def serial_baud(self) -> int:
        """Serial baud rate (default: 9600)"""
        return int(os.getenv("ROBOT_SERIAL_BAUD", "9600"))

    @property
    def poll_ms(self) -> int:
        """Controller poll period in milliseconds (default: 16, ~60Hz)"""
        return int(os.getenv("ROBOT_POLL_MS", "16"))

    @property
    def axis_deadzone(self) -> float:
        """Raw analog deadzone applied by the classifier (default: 0.1)"""
        return float(os.getenv("ROBOT_AXIS_DEADZONE", "0.1"))

    @property
    def stick_deadzone(self) -> float:
        """Stick deadzone applied by the mapper (default: 0.15)"""
        return float(os.getenv("ROBOT_STICK_DEADZONE", "0.15"))

    @property
    def sensitivity(self) -> float:
        """Stick sensitivity multiplier (default: 1.0)"""
        return float(os.getenv("ROBOT_SENSITIVITY", "1.0"))

    @property
    def max_forward_speed(self) -> float:
        return float(os.getenv("ROBOT_MAX_FORWARD_SPEED", "1.0"))

    @property
    def max_rotation_speed(self) -> float:
        return float(os.getenv("ROBOT_MAX_ROTATION_SPEED", "1.0"))

    @property
    def max_strafe_speed(self) -> float:
        return float(os.getenv("ROBOT_MAX_STRAFE_SPEED", "1.0"))

    @property
    def debug(self) -> bool:
        """Enable debug logging"""
        return os.getenv("ROBOT_DEBUG", "").strip().lower() in ("1", "true", "yes", "on")

    def classifier_config(self) -> ClassifierConfig:
        """Build classifier configuration"""
        return ClassifierConfig(deadzone=self.axis_deadzone)

    def mapper_config(self) -> MapperConfig:
        """Build mapper configuration"""
        return MapperConfig(
            deadzone=self.stick_deadzone,
            sensitivity=self.sensitivity,
            max_forward_speed=self.max_forward_speed,
            max_rotation_speed=self.max_rotation_speed,
            max_strafe_speed=self.max_strafe_speed,
        )

    def supervisor_config(self) -> SupervisorConfig:
        """Build supervisor configuration"""
        return SupervisorConfig(poll_interval=self.poll_ms / 1000.0)

    def validate(self) -> tuple[bool, list[str]]:
        """
        Validate configuration

        Returns:
            (is_valid, list_of_errors)
        """
        errors = []

        if self.actuator not in ACTUATOR_KINDS:
            errors.append(f"ROBOT_ACTUATOR must be one of {', '.join(ACTUATOR_KINDS)}")
        if self.actuator == "serial" and not self.serial_port:
            errors.append("ROBOT_SERIAL_PORT not set (required for serial actuator)")

        numeric = [
            ("ROBOT_SERIAL_BAUD", lambda: self.serial_baud > 0),
            ("ROBOT_POLL_MS", lambda: self.poll_ms > 0),
            ("ROBOT_AXIS_DEADZONE", lambda: 0.0 <= self.axis_deadzone < 1.0),
            ("ROBOT_STICK_DEADZONE", lambda: 0.0 <= self.stick_deadzone < 1.0),
            ("ROBOT_SENSITIVITY", lambda: self.sensitivity > 0.0),
            ("ROBOT_MAX_FORWARD_SPEED", lambda: 0.0 <= self.max_forward_speed <= 1.0),
            ("ROBOT_MAX_ROTATION_SPEED", lambda: 0.0 <= self.max_rotation_speed <= 1.0),
            ("ROBOT_MAX_STRAFE_SPEED", lambda: 0.0 <= self.max_strafe_speed <= 1.0),
        ]
        for env_name, check in numeric:
            try:
                if not check():
                    errors.append(f"{env_name} is out of range")
            except ValueError:
                errors.append(f"{env_name} is not a number")

        return len(errors) == 0, errors

    def print_status(self):
        """Print configuration status"""
        print("padbot Configuration Status:")
        print(f"  .env loaded:    {'Yes' if self._loaded else 'No'}")
        print(f"  Actuator:       {self.actuator}")
        print(f"  Serial port:    {self.serial_port or '(not set)'}")

        is_valid, errors = self.validate()
        if not is_valid:
            print("\n  Status: Configuration has errors:")
            for error in errors:
                print(f"    - {error}")
            return

        print(f"  Serial baud:    {self.serial_baud}")
        print(f"  Poll period:    {self.poll_ms} ms")
        print(f"  Axis deadzone:  {self.axis_deadzone}")
        print(f"  Stick deadzone: {self.stick_deadzone}")
        print(f"  Sensitivity:    {self.sensitivity}")
        print(f"  Debug logging:  {'On' if self.debug else 'Off'}")
        print("\n  Status: Configuration is valid")


def main():
    """Command-line utility to check configuration"""
    import argparse

    parser = argparse.ArgumentParser(
        description="padbot Configuration Utility",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Check current configuration:
    python robot_config.py

  Validate configuration:
    python robot_config.py --validate

  Use custom .env file:
    python robot_config.py --env-file /path/to/.env
        """
    )

    parser.add_argument("--env-file", help="Path to .env file")
    parser.add_argument("--validate", action="store_true",
                       help="Validate configuration and exit with error if invalid")

    args = parser.parse_args()

    # Load config
    config = RobotConfig(args.env_file)

    # Print status
    config.print_status()

    # Validate if requested
    if args.validate:
        is_valid, errors = config.validate()
        if not is_valid:
            print("\nValidation failed!")
            sys.exit(1)
        else:
            print("\nValidation passed!")


if __name__ == "__main__":
    main()
