"""Domain service inspecting devices at runtime.

Properties are collected over the class hierarchy, base classes first:
the public attributes each class annotates, followed by the public
``property`` objects it defines. Methods are only the public functions
defined on the concrete class itself.
"""

import inspect
from typing import Any, List

from smart_home.domain.entities.introspection import (
    DeviceDescription,
    PropertyDescription,
)


def _is_public(name: str) -> bool:
    return not name.startswith("_")


class DeviceIntrospector:
    """Builds a DeviceDescription for any object."""

    def describe(self, device: Any) -> DeviceDescription:
        device_type = type(device)
        return DeviceDescription(
            type_name=device_type.__name__,
            properties=self._properties(device),
            methods=self._declared_methods(device_type),
        )

    def _properties(self, device: Any) -> List[PropertyDescription]:
        seen: List[str] = []

        for cls in reversed(type(device).__mro__):
            if cls is object:
                continue
            names = list(inspect.get_annotations(cls))
            names += [
                name
                for name, member in vars(cls).items()
                if isinstance(member, property)
            ]
            for name in names:
                if _is_public(name) and name not in seen:
                    seen.append(name)

        return [
            PropertyDescription(
                name=name, type_name=type(getattr(device, name)).__name__
            )
            for name in seen
            if hasattr(device, name)
        ]

    def _declared_methods(self, device_type: type) -> List[str]:
        return [
            name
            for name, member in vars(device_type).items()
            if _is_public(name) and inspect.isfunction(member)
        ]
