"""
Domain Entities Package

This package contains the smart devices, the smart home collection
and the records produced by device introspection.
"""

from .device import SmartDevice, SmartLight, SmartThermostat
from .errors import DeviceValidationError, DomainError
from .home import SmartHome
from .introspection import DeviceDescription, PropertyDescription

__all__ = [
    "SmartDevice",
    "SmartLight",
    "SmartThermostat",
    "SmartHome",
    "DeviceDescription",
    "PropertyDescription",
    "DomainError",
    "DeviceValidationError",
]
