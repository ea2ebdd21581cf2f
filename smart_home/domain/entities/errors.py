"""
Domain Errors

This module defines custom error classes for domain-specific exceptions.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class DeviceValidationError(DomainError):
    """Raised when something that is not a smart device is handed to the home."""

    def __init__(self, value: Any, details: Optional[Dict[str, Any]] = None):
        message = f"Expected a SmartDevice, got {type(value).__name__}"
        super().__init__(message, details)
