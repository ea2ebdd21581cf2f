"""Output sink implementations."""

from .buffered_output_sink import BufferedOutputSink
from .console_output_sink import ConsoleOutputSink

__all__ = ["BufferedOutputSink", "ConsoleOutputSink"]
