#!/usr/bin/env python3
"""
padbot Control Demo - Simple example application.

Demonstrates the control pipeline with scripted input and the logging actuator.
"""

import asyncio
import logging
import sys

from control.actuator import LoggingActuator
from control.classifier import EventClassifier
from control.mapper import Mapper
from control.supervisor import Supervisor
from control.types import ClassifierConfig, MapperConfig, SupervisorConfig
from devices.scripted_source import DriveScripts, ScriptedSource


logger = logging.getLogger(__name__)


async def run_demo():
    """Run a simple demo with scripted components"""

    logger.info("=" * 60)
    logger.info("padbot Control Pipeline Demo")
    logger.info("=" * 60)

    # Scripted input: drive, spin, strafe, buttons, then lose the controller
    ticks = (
        DriveScripts.forward_drive()
        + DriveScripts.spin_and_strafe()
        + DriveScripts.buttons()
        + DriveScripts.drive_then_disconnect()
    )
    source = ScriptedSource(ticks)

    actuator = LoggingActuator()
    mapper = Mapper(actuator, MapperConfig(deadzone=0.15, sensitivity=1.0))

    shutdown = asyncio.Event()
    supervisor = Supervisor(
        source=source,
        classifier=EventClassifier(ClassifierConfig(deadzone=0.1)),
        mapper=mapper,
        config=SupervisorConfig(poll_interval=0.1),  # 10 Hz for demo
        shutdown=shutdown,
    )

    logger.info("Starting supervisor...")
    supervisor.start()

    # Loop exits by itself when the scripted controller disconnects
    await shutdown.wait()
    await supervisor.wait()

    logger.info("-" * 60)
    logger.info(
        f"Status: mapper={mapper.state.value} | "
        f"moves={actuator.command_count} | stops={actuator.stop_count} | "
        f"actions={', '.join(actuator.actions)}"
    )
    logger.info(f"Unplayed ticks after disconnect: {source.remaining}")
    logger.info("=" * 60)
    logger.info("Demo finished successfully!")
    logger.info("=" * 60)


def main():
    """Main entry point"""
    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=logging.INFO,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            stream=sys.stdout
        )
    try:
        asyncio.run(run_demo())
    except KeyboardInterrupt:
        logger.info("\nDemo interrupted by user")
    except Exception as e:
        logger.error(f"Demo failed: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
