"""Domain entities describing what introspection finds on a device."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(slots=True)
class PropertyDescription:
    """A public property visible on a device instance."""

    name: str
    type_name: str


@dataclass(slots=True)
class DeviceDescription:
    """Runtime description of a single device."""

    type_name: str
    properties: List[PropertyDescription] = field(default_factory=list)
    methods: List[str] = field(default_factory=list)

    def property_names(self) -> List[str]:
        return [prop.name for prop in self.properties]
