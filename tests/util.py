"""Test helpers shared across test modules."""

from datetime import timedelta, timezone

from calendar_ics.utils.exceptions import CalendarWriteError
from calendar_ics.writers.base import Sink

TOKYO = timezone(timedelta(hours=9), "Asia/Tokyo")


class RecordingSink(Sink):
    """Sink that keeps every write and counts flushes."""

    def __init__(self, fail_on_write=None):
        self.writes = []
        self.flushes = 0
        self.fail_on_write = fail_on_write

    def write(self, data):
        if self.fail_on_write is not None and len(self.writes) + 1 == self.fail_on_write:
            raise CalendarWriteError("broken pipe")
        self.writes.append(data)

    def flush(self):
        self.flushes += 1

    @property
    def text(self):
        return "".join(self.writes)


class FailingDestination:
    """File-like destination whose writes always fail."""

    def __init__(self):
        self.flushes = 0

    def write(self, data):
        raise OSError(28, "No space left on device")

    def flush(self):
        self.flushes += 1


def dos(text):
    """Convert a readable multi-line literal to CRLF line endings."""
    return text.replace("\n", "\r\n")
