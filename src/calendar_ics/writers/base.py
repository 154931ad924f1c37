"""Abstract base class for encoder output sinks."""

from abc import ABC, abstractmethod


class Sink(ABC):
    """Write-only text target the encoder appends iCalendar lines to."""

    @abstractmethod
    def write(self, data: str) -> None:
        """
        Append text to the sink.

        Args:
            data: Text to append, line terminators included

        Raises:
            CalendarWriteError: If the destination refuses the write
        """

    @abstractmethod
    def flush(self) -> None:
        """
        Push everything written so far to the destination.

        Raises:
            CalendarWriteError: If the destination refuses the write
        """
