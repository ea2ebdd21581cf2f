"""
Application Layer Package

This package contains the use cases of the smart home demo. They
orchestrate the domain entities and services (status display, sorted
views, introspection) without knowing where the output ends up.
"""

# Re-export submodules
from smart_home.application import use_cases

__all__ = ["use_cases"]
