"""
Device Use Cases - Application Layer

This module defines use cases for device operations: printing the
status of a sequence of devices, producing sorted views of a home,
and describing devices through runtime introspection.
"""

from typing import Iterable, List, Optional

from dependency_injector.wiring import Provide, inject

from smart_home.domain.entities.device import SmartDevice
from smart_home.domain.entities.home import SmartHome
from smart_home.domain.entities.introspection import DeviceDescription
from smart_home.domain.ports.output_sink import IOutputSink
from smart_home.domain.services.comparers import DeviceComparer, sort_devices
from smart_home.domain.services.device_introspector import DeviceIntrospector
from smart_home.shared import get_logger

logger = get_logger(__name__)


class DisplayDevicesStatusUseCase:
    """Use case for writing the status report of several devices."""

    @inject
    def __init__(self, output: IOutputSink = Provide["output_sink"]):
        """
        Initialize the use case with its dependencies.

        Args:
            output: Sink receiving the optional section title
        """
        self.output = output

    def execute(
        self, devices: Iterable[SmartDevice], title: Optional[str] = None
    ) -> int:
        """
        Write an optional title followed by the status of every device.

        Args:
            devices: Devices to report on, in the order they should appear
            title: Section heading written before the first device

        Returns:
            int: Number of devices reported
        """
        if title is not None:
            self.output.write_line(title)

        count = 0
        for device in devices:
            device.display_status()
            count += 1

        logger.info("devices.status_displayed", title=title, count=count)
        return count


class SortDevicesUseCase:
    """Use case for producing a sorted snapshot of a home."""

    def execute(
        self, home: Iterable[SmartDevice], comparer: DeviceComparer
    ) -> List[SmartDevice]:
        """
        Sort a copy of the home's current devices.

        Args:
            home: The collection to take the snapshot from
            comparer: The ordering to apply

        Returns:
            List[SmartDevice]: A new list; the home keeps its own order
        """
        devices = sort_devices(home, comparer)
        logger.info(
            "devices.sorted",
            comparer=type(comparer).__name__,
            order=[device.name for device in devices],
        )
        return devices


class DescribeDevicesUseCase:
    """Use case for describing every device of a home."""

    @inject
    def __init__(
        self, introspector: DeviceIntrospector = Provide["device_introspector"]
    ):
        self.introspector = introspector

    def execute(self, home: SmartHome) -> List[DeviceDescription]:
        descriptions = [self.introspector.describe(device) for device in home]
        logger.info("devices.described", count=len(descriptions))
        return descriptions
