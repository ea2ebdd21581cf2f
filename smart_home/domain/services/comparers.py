"""Domain service helpers for ordering devices.

A comparer is a stateless three-way comparison over two devices. Sorting
always works on a copy; the sequence being sorted is never reordered.
"""

import math
from abc import ABC, abstractmethod
from functools import cmp_to_key
from typing import Any, Iterable, List

from smart_home.domain.entities.device import SmartDevice


def _three_way(left: Any, right: Any) -> int:
    return (left > right) - (left < right)


class DeviceComparer(ABC):
    """Three-way ordering over two devices."""

    @abstractmethod
    def compare(self, x: SmartDevice, y: SmartDevice) -> int:
        """Return a negative, zero or positive number as x sorts before, with or after y."""
        pass

    def __call__(self, x: SmartDevice, y: SmartDevice) -> int:
        return self.compare(x, y)


class EnergyComparer(DeviceComparer):
    """Orders devices by energy consumption, lowest first.

    NaN sorts before every number and equal to another NaN.
    """

    def compare(self, x: SmartDevice, y: SmartDevice) -> int:
        x_nan = math.isnan(x.energy_consumption)
        y_nan = math.isnan(y.energy_consumption)
        if x_nan or y_nan:
            return int(y_nan) - int(x_nan)
        return _three_way(x.energy_consumption, y.energy_consumption)


class NameComparer(DeviceComparer):
    """Orders devices by name using ordinal string comparison."""

    def compare(self, x: SmartDevice, y: SmartDevice) -> int:
        return _three_way(x.name, y.name)


def sort_devices(
    devices: Iterable[SmartDevice], comparer: DeviceComparer
) -> List[SmartDevice]:
    """Return a new list holding a snapshot of ``devices`` sorted with ``comparer``."""

    snapshot = list(devices)
    snapshot.sort(key=cmp_to_key(comparer))
    return snapshot
