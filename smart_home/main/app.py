#!/usr/bin/env python3
"""
Demo Entry Point - Main Layer

Builds two lights and a thermostat, puts them in a smart home and prints
their status in insertion order, sorted by energy, sorted by name, and
finally the introspection report.
"""

from smart_home.domain.entities.home import SmartHome
from smart_home.domain.services.comparers import EnergyComparer, NameComparer
from smart_home.main.config import get_settings
from smart_home.main.container import AppContainer, init_container
from smart_home.shared import (
    configure_logging,
    get_logger,
    update_logging_from_settings,
)

logger = get_logger(__name__)


def run_demo(container: AppContainer) -> SmartHome:
    """
    Run the fixed demo sequence against the container's output sink.

    Returns:
        SmartHome: The populated home, for callers that want to inspect it
    """
    light1 = container.smart_light("Lamp", 10.5, 75, "White")
    light2 = container.smart_light("Lamp2", 9.2, 100, "Green")
    thermostat1 = container.smart_thermostat("Thermostat", 15.8, 20.0, 22.5)

    home = container.smart_home()
    home.add_device(light1)
    home.add_device(light2)
    home.add_device(thermostat1)

    light1.turn_on()
    thermostat1.turn_on()

    display_status = container.display_devices_status_use_case()
    sort_devices = container.sort_devices_use_case()

    display_status.execute(home, title="\n-- All properties --")

    display_status.execute(
        sort_devices.execute(home, EnergyComparer()),
        title="\n-- Sorted by energy --",
    )

    display_status.execute(
        sort_devices.execute(home, NameComparer()),
        title="\n-- Sorted by name --",
    )

    output = container.output_sink()
    output.write_line("\n-- Reflection: Information for the device --")
    home.display_device_info_using_introspection()

    return home


def main() -> None:
    """Main entry point for the smart home demo."""

    # Bootstrap logging first so settings loading can log
    configure_logging()
    settings = get_settings()
    update_logging_from_settings(settings)

    container = init_container(settings)
    logger.info("demo.started", environment=container.config.environment())

    try:
        home = run_demo(container)
    except Exception as e:
        logger.error("demo.failed", error=str(e), exc_info=e)
        raise

    logger.info("demo.finished", device_count=len(home))


if __name__ == "__main__":
    main()
