"""
Domain Entities - Devices

This module defines the abstract smart device and its concrete variants.
A device owns its on/off flag and writes every human-readable line it
produces to the output sink it was created with.
"""

from abc import ABC, abstractmethod

from smart_home.domain.ports.output_sink import IOutputSink
from smart_home.shared import get_logger

logger = get_logger(__name__)

STATUS_ON = "On"
STATUS_OFF = "Off"


def _format_number(value: float) -> str:
    """Render a number in its shortest round-trip form (20.0 -> 20)."""
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)


class SmartDevice(ABC):
    """A controllable device with a name, an energy consumption and an on/off flag."""

    name: str
    energy_consumption: float

    def __init__(
        self, name: str, energy_consumption: float, *, output: IOutputSink
    ) -> None:
        self.name = name
        self.energy_consumption = energy_consumption
        self._is_on = False
        self._output = output

    @property
    def is_on(self) -> bool:
        """Whether the device is switched on. Only the on/off actions change it."""
        return self._is_on

    def turn_on(self) -> None:
        """Switch the device on and announce it."""
        self._is_on = True
        logger.debug("device.turned_on", device=self.name)
        self._output.write_line(f"{self.name} is on.")

    def turn_off(self) -> None:
        """Switch the device off and announce it."""
        self._is_on = False
        logger.debug("device.turned_off", device=self.name)
        self._output.write_line(f"{self.name} is off.")

    @abstractmethod
    def display_status(self) -> None:
        """Write a multi-line report of the device's current state."""
        pass

    def _status_label(self) -> str:
        return STATUS_ON if self._is_on else STATUS_OFF

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, "
            f"energy_consumption={self.energy_consumption!r}, is_on={self._is_on!r})"
        )


class SmartLight(SmartDevice):
    """A dimmable, coloured light."""

    brightness: int
    color: str

    def __init__(
        self,
        name: str,
        energy_consumption: float,
        brightness: int,
        color: str,
        *,
        output: IOutputSink,
    ) -> None:
        super().__init__(name, energy_consumption, output=output)
        self.brightness = brightness
        self.color = color

    def display_status(self) -> None:
        self._output.write_line(
            f"SmartLight: {self.name}\n"
            f" Brightness: {self.brightness}\n"
            f" Color: {self.color}\n"
            f" Status: {self._status_label()}"
        )


class SmartThermostat(SmartDevice):
    """A thermostat reporting its current and desired temperature.

    The two temperatures are display-only; nothing drives one towards the other.
    """

    current_temperature: float
    desired_temperature: float

    def __init__(
        self,
        name: str,
        energy_consumption: float,
        current_temperature: float,
        desired_temperature: float,
        *,
        output: IOutputSink,
    ) -> None:
        super().__init__(name, energy_consumption, output=output)
        self.current_temperature = current_temperature
        self.desired_temperature = desired_temperature

    def display_status(self) -> None:
        # Desired temperature and status share a line in this layout.
        self._output.write_line(
            f"SmartThermostat: {self.name}\n"
            f" Current Temperature: {_format_number(self.current_temperature)}\n"
            f" Desired Temperature: {_format_number(self.desired_temperature)}, "
            f"Status: {self._status_label()}"
        )
