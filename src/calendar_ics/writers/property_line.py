"""Rendering of single iCalendar content lines."""

from typing import Iterable

from .base import Sink

CRLF = "\r\n"


def write_line(sink: Sink, line: str) -> None:
    """Write a literal line such as ``BEGIN:VEVENT`` followed by CRLF."""
    sink.write(line + CRLF)


def write_property(
    sink: Sink,
    name: str,
    parameters: Iterable[tuple[str, str]] = (),
    value: str = "",
) -> None:
    """
    Write ``NAME[;KEY=VALUE...]:VALUE`` followed by CRLF.

    Nothing is written when ``value`` is empty. Parameters keep the caller's
    order and neither parameters nor value are escaped.

    Args:
        sink: Destination sink
        name: Property name
        parameters: Ordered (key, value) pairs
        value: Property value

    Raises:
        CalendarWriteError: If the sink refuses the write
    """
    if not value:
        return
    params = "".join(f";{key}={param}" for key, param in parameters)
    write_line(sink, f"{name}{params}:{value}")
