"""Domain ports package."""

from .output_sink import IOutputSink

__all__ = ["IOutputSink"]
