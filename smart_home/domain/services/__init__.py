"""
Domain Services Package

This package contains stateless domain logic that works across
devices: ordering (comparers) and runtime introspection.
"""

from .comparers import DeviceComparer, EnergyComparer, NameComparer, sort_devices
from .device_introspector import DeviceIntrospector

__all__ = [
    "DeviceComparer",
    "EnergyComparer",
    "NameComparer",
    "sort_devices",
    "DeviceIntrospector",
]
