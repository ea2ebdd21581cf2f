"""
Domain Layer Package

This package contains the smart home model: the abstract device,
its concrete variants, the device collection, the comparers used to
order devices and the introspection service. It has no dependency on
infrastructure or on the way output is finally written.
"""

# Re-export submodules
from smart_home.domain import entities, ports, services

__all__ = ["entities", "ports", "services"]
