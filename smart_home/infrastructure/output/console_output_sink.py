"""
Console Output Sink - Infrastructure Layer

Writes lines to a text stream, standard output unless told otherwise.
"""

import sys
from typing import Optional, TextIO

from smart_home.domain.ports.output_sink import IOutputSink


class ConsoleOutputSink(IOutputSink):
    """Output sink writing to a text stream."""

    def __init__(self, stream: Optional[TextIO] = None):
        """
        Initialize the sink.

        Args:
            stream: Target stream. When omitted, ``sys.stdout`` is looked up
                on every write so that redirections made later are honoured.
        """
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def write_line(self, text: str = "") -> None:
        self.stream.write(f"{text}\n")
        self.stream.flush()
