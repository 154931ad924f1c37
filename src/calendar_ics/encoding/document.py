"""VCALENDAR document encoder."""

import io
import logging
from pathlib import Path
from typing import IO, TYPE_CHECKING, Any, Optional, Union

from ..utils.exceptions import CalendarWriteError
from ..writers.base import Sink
from ..writers.property_line import write_line, write_property
from ..writers.stream import StreamSink
from .profiles import EncodingProfile, get_profile

if TYPE_CHECKING:
    from ..models.calendar import Calendar

logger = logging.getLogger(__name__)


def encode(
    calendar: "Calendar",
    sink: Union[Sink, IO[Any]],
    profile: Optional[Union[str, EncodingProfile]] = None,
) -> None:
    """
    Encode a calendar and its components as iCalendar text.

    The sink is flushed once, after END:VCALENDAR has been written. The
    first failed write aborts the encode without flushing.

    Args:
        calendar: Calendar to encode
        sink: Sink, or a writable file object to wrap in a StreamSink
        profile: Profile name or EncodingProfile (default: extended)

    Raises:
        CalendarWriteError: If the destination refuses a write
        ConfigurationError: If the profile name is unknown
    """
    profile = get_profile(profile)
    if not isinstance(sink, Sink):
        sink = StreamSink(sink)

    logger.debug(
        f"Encoding calendar with {len(calendar.components)} component(s) "
        f"using profile '{profile.name}'"
    )

    write_line(sink, "BEGIN:VCALENDAR")
    for spec in profile.calendar_properties:
        write_property(sink, spec.name, spec.parameters, getattr(calendar, spec.attribute))

    for component in calendar.components:
        component.encode_ical(sink, profile)

    write_line(sink, "END:VCALENDAR")
    sink.flush()


def to_ical(
    calendar: "Calendar",
    profile: Optional[Union[str, EncodingProfile]] = None,
) -> bytes:
    """Encode a calendar into UTF-8 bytes."""
    buffer = io.BytesIO()
    encode(calendar, StreamSink(buffer), profile)
    return buffer.getvalue()


def write_calendar(
    calendar: "Calendar",
    path: Path,
    profile: Optional[Union[str, EncodingProfile]] = None,
    buffer_size: Optional[int] = None,
) -> int:
    """
    Encode a calendar into a file.

    Args:
        calendar: Calendar to encode
        path: Output file path (overwritten)
        profile: Profile name or EncodingProfile
        buffer_size: Sink buffer size (default: StreamSink default)

    Returns:
        Number of bytes written

    Raises:
        CalendarWriteError: If the file cannot be opened or written
    """
    try:
        f = open(path, "wb")
    except OSError as e:
        raise CalendarWriteError(f"Cannot open {path} for writing: {e}") from e

    with f:
        sink = StreamSink(f, buffer_size=buffer_size) if buffer_size else StreamSink(f)
        encode(calendar, sink, profile)

    logger.info(f"Wrote {sink.bytes_written} bytes to {path}")
    return sink.bytes_written
