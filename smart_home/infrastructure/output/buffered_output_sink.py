"""In-memory output sink, used wherever emitted text has to be inspected."""

from typing import List

from smart_home.domain.ports.output_sink import IOutputSink


class BufferedOutputSink(IOutputSink):
    """Output sink keeping every written line in memory."""

    def __init__(self) -> None:
        self.lines: List[str] = []

    def write_line(self, text: str = "") -> None:
        self.lines.append(text)

    def getvalue(self) -> str:
        """Return everything written so far, as the console would have shown it."""
        return "".join(f"{line}\n" for line in self.lines)

    def clear(self) -> None:
        self.lines.clear()
