"""Encode calendars and events as iCalendar (RFC 2445) text."""

from .encoding.document import encode, to_ical, write_calendar
from .encoding.profiles import BASIC, EXTENDED, TAGGED, EncodingProfile, PropertySpec, get_profile
from .models.calendar import Calendar, new_basic_calendar
from .models.component import Component
from .models.event import Event
from .utils.exceptions import CalendarICSError, CalendarWriteError, ConfigurationError
from .writers.base import Sink
from .writers.stream import StreamSink

__all__ = [
    "BASIC",
    "EXTENDED",
    "TAGGED",
    "Calendar",
    "CalendarICSError",
    "CalendarWriteError",
    "Component",
    "ConfigurationError",
    "EncodingProfile",
    "Event",
    "PropertySpec",
    "Sink",
    "StreamSink",
    "encode",
    "get_profile",
    "new_basic_calendar",
    "to_ical",
    "write_calendar",
]
