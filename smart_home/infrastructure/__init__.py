"""
Infrastructure Layer Package

This package contains implementations of interfaces defined in the
domain layer. For this program that is where text output goes:
a console stream or an in-memory buffer.
"""

from smart_home.infrastructure import output

__all__ = ["output"]
