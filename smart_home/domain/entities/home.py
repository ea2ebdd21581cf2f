"""
Domain Entities - Smart Home

The smart home is an ordered collection of device references. It keeps
devices in insertion order, allows duplicates, and never copies the
devices it is given: callers holding the same reference still see (and
make) every change.
"""

from typing import Iterator, List, Optional

from smart_home.domain.entities.device import SmartDevice
from smart_home.domain.entities.errors import DeviceValidationError
from smart_home.domain.ports.output_sink import IOutputSink
from smart_home.domain.services.device_introspector import DeviceIntrospector
from smart_home.shared import get_logger

logger = get_logger(__name__)


class SmartHome:
    """Ordered, iterable collection of smart devices."""

    def __init__(
        self,
        *,
        output: IOutputSink,
        introspector: Optional[DeviceIntrospector] = None,
    ) -> None:
        self._devices: List[SmartDevice] = []
        self._output = output
        self._introspector = introspector or DeviceIntrospector()

    def add_device(self, device: SmartDevice) -> None:
        """
        Append a device to the end of the collection.

        Args:
            device: The device to add. The same device may be added twice.

        Raises:
            DeviceValidationError: If the value is not a SmartDevice
        """
        if not isinstance(device, SmartDevice):
            raise DeviceValidationError(device)

        self._devices.append(device)
        logger.debug(
            "home.device_added",
            device=device.name,
            device_type=type(device).__name__,
            count=len(self._devices),
        )

    def __iter__(self) -> Iterator[SmartDevice]:
        # A new generator per call, so traversals never share a cursor.
        for device in self._devices:
            yield device

    def __len__(self) -> int:
        return len(self._devices)

    def display_device_info_using_introspection(self) -> None:
        """
        Write the introspection report for every device, in insertion order.

        For each device this lists its concrete class name, every public
        property with the type name of its current value, and the public
        methods declared directly on the concrete class.
        """
        for device in self._devices:
            description = self._introspector.describe(device)

            self._output.write_line(f"Information for: {description.type_name}")

            self._output.write_line("Properties:")
            for prop in description.properties:
                self._output.write_line(f" - {prop.name} : {prop.type_name}")

            self._output.write_line("Methods:")
            for method in description.methods:
                self._output.write_line(f" - {method}")
