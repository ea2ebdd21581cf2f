"""Application use cases package."""

from .device_use_cases import (
    DescribeDevicesUseCase,
    DisplayDevicesStatusUseCase,
    SortDevicesUseCase,
)

__all__ = [
    "DescribeDevicesUseCase",
    "DisplayDevicesStatusUseCase",
    "SortDevicesUseCase",
]
