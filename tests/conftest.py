"""
Pytest configuration and shared fixtures.
Provides reusable calendars, events and sinks for all tests.
"""

from datetime import datetime

import pytest

from calendar_ics.models.calendar import new_basic_calendar
from calendar_ics.models.event import Event
from tests.util import TOKYO, RecordingSink


# ==================== Sink Fixtures ====================

@pytest.fixture
def recording_sink():
    """Sink collecting output in memory."""
    return RecordingSink()


# ==================== Calendar Fixtures ====================

@pytest.fixture
def new_year_tokyo():
    """2014-01-01 00:00 in Tokyo (2013-12-31 15:00 UTC)."""
    return datetime(2014, 1, 1, 0, 0, 0, tzinfo=TOKYO)


@pytest.fixture
def tokyo_event(new_year_tokyo):
    """Reference event in Asia/Tokyo."""
    return Event(
        uid="123",
        stamp=new_year_tokyo,
        start=new_year_tokyo,
        end=new_year_tokyo,
        summary="summary",
        tzid="Asia/Tokyo",
    )


@pytest.fixture
def reference_calendar():
    """Calendar with the reference legacy properties and no components."""
    calendar = new_basic_calendar()
    calendar.prodid = "proid"
    calendar.x_wr_timezone = "Asia/Tokyo"
    calendar.x_wr_calname = "name"
    calendar.x_wr_caldesc = "desc"
    return calendar
