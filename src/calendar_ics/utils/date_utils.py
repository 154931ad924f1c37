"""Date and time utilities for iCalendar timestamps."""

from datetime import date, datetime
from typing import Union

import pytz

from .exceptions import ConfigurationError

UTC_ZONE_NAME = "UTC"


def ensure_utc(dt: datetime) -> datetime:
    """
    Ensure datetime is in UTC.

    Args:
        dt: Datetime to convert

    Returns:
        UTC datetime
    """
    if dt.tzinfo is None:
        return pytz.utc.localize(dt)
    return dt.astimezone(pytz.utc)


def format_date(dt: Union[date, datetime]) -> str:
    """Render a DATE value (``YYYYMMDD``) from the value's own calendar date."""
    return f"{dt.year:04d}{dt.month:02d}{dt.day:02d}"


def format_date_time(dt: datetime) -> str:
    """Render a local DATE-TIME value (``YYYYMMDDTHHMMSS``) from the wall clock."""
    return f"{format_date(dt)}T{dt.hour:02d}{dt.minute:02d}{dt.second:02d}"


def format_stamp(dt: datetime) -> str:
    """Render a UTC DATE-TIME value (``YYYYMMDDTHHMMSSZ``)."""
    return format_date_time(ensure_utc(dt)) + "Z"


def is_utc_zone(tzid: str) -> bool:
    """True when ``tzid`` selects UTC rendering (empty or the literal UTC name)."""
    return not tzid or tzid == UTC_ZONE_NAME


def localize(value: Union[str, date, datetime], tzid: str = "") -> datetime:
    """
    Turn a document value into an aware datetime.

    Naive values are interpreted as wall-clock time in ``tzid`` (UTC when
    empty); aware values are returned unchanged.

    Args:
        value: ISO string, date or datetime
        tzid: Olson timezone name

    Returns:
        Timezone-aware datetime

    Raises:
        ConfigurationError: If the value or the zone cannot be understood
    """
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError as e:
            raise ConfigurationError(f"Invalid timestamp {value!r}: {e}") from e
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    if value.tzinfo is not None:
        return value

    try:
        tz = pytz.utc if is_utc_zone(tzid) else pytz.timezone(tzid)
    except pytz.UnknownTimeZoneError as e:
        raise ConfigurationError(f"Unknown timezone: {tzid}") from e
    return tz.localize(value)
