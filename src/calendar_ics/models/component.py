"""Interface shared by everything that can sit inside a VCALENDAR."""

from abc import ABC, abstractmethod

from ..encoding.profiles import EncodingProfile
from ..writers.base import Sink


class Component(ABC):
    """A calendar component that encodes itself onto a sink."""

    @abstractmethod
    def encode_ical(self, sink: Sink, profile: EncodingProfile) -> None:
        """
        Write this component's BEGIN/END block.

        Args:
            sink: Sink shared with the enclosing calendar
            profile: Active encoding profile

        Raises:
            CalendarWriteError: If the sink refuses a write
        """
