"""Calendar event model and its VEVENT encoding."""

from datetime import datetime

from pydantic import BaseModel

from ..encoding.profiles import EncodingProfile
from ..utils.date_utils import format_date, format_date_time, format_stamp, is_utc_zone
from ..writers.base import Sink
from ..writers.property_line import write_line, write_property
from .component import Component


class Event(BaseModel, Component):
    """Single calendar entry rendered as a VEVENT."""

    uid: str
    stamp: datetime
    start: datetime
    end: datetime
    summary: str = ""
    tzid: str = ""  # empty or "UTC" renders start/end in UTC
    all_day: bool = False

    def encode_ical(self, sink: Sink, profile: EncodingProfile) -> None:
        if self.all_day:
            value_type = "DATE"
            local_format = format_date
        else:
            value_type = "DATE-TIME"
            local_format = format_date_time

        write_line(sink, "BEGIN:VEVENT")
        write_property(sink, "DTSTAMP", value=format_stamp(self.stamp))
        write_property(sink, "UID", value=self.uid)
        if profile.tzid_property:
            write_property(sink, "TZID", value=self.tzid)
        write_property(sink, "SUMMARY", value=self.summary)

        for name, instant in (("DTSTART", self.start), ("DTEND", self.end)):
            parameters = []
            if is_utc_zone(self.tzid):
                value = format_date(instant) if self.all_day else format_stamp(instant)
            else:
                parameters.append(("TZID", self.tzid))
                value = local_format(instant)
            if profile.value_type_tag:
                parameters.append(("VALUE", value_type))
            write_property(sink, name, parameters, value)

        write_line(sink, "END:VEVENT")
