"""
Output Sink Interface

Every line the devices and the collection emit goes through an output
sink. The console implementation lives in the infrastructure layer;
tests inject a buffering implementation instead.
"""

from abc import ABC, abstractmethod


class IOutputSink(ABC):
    """Interface for line-oriented text output."""

    @abstractmethod
    def write_line(self, text: str = "") -> None:
        """
        Write a single line of text.

        Args:
            text: The text to write. It may itself contain newlines; the
                sink terminates it with exactly one more newline.
        """
        pass
