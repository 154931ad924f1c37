"""Encoding profiles: which calendar properties are emitted, in which order."""

from typing import Optional, Union

from pydantic import BaseModel

from ..utils.exceptions import ConfigurationError


class PropertySpec(BaseModel):
    """Calendar-level property bound to a Calendar attribute."""

    name: str  # RFC property name, e.g. X-WR-CALNAME
    attribute: str  # Calendar field holding the value
    parameters: tuple[tuple[str, str], ...] = ()

    model_config = {"frozen": True}


class EncodingProfile(BaseModel):
    """Declared property table and event options for one encoder run."""

    name: str
    calendar_properties: tuple[PropertySpec, ...]
    value_type_tag: bool = True  # VALUE=DATE / VALUE=DATE-TIME on DTSTART/DTEND
    tzid_property: bool = True  # bare TZID line inside VEVENT

    model_config = {"frozen": True}


def _props(*entries: tuple) -> tuple[PropertySpec, ...]:
    return tuple(
        PropertySpec(name=entry[0], attribute=entry[1], parameters=entry[2] if len(entry) > 2 else ())
        for entry in entries
    )


_LEGACY_PROPERTIES = _props(
    ("PRODID", "prodid"),
    ("CALSCALE", "calscale"),
    ("VERSION", "version"),
    ("X-WR-CALNAME", "x_wr_calname"),
    ("X-WR-CALDESC", "x_wr_caldesc"),
    ("X-WR-TIMEZONE", "x_wr_timezone"),
)

# http://tools.ietf.org/html/draft-daboo-icalendar-extensions-09
_EXTENDED_PROPERTIES = _props(
    ("VERSION", "version"),
    ("PRODID", "prodid"),
    ("URL", "url"),
    ("NAME", "name"),
    ("X-WR-CALNAME", "x_wr_calname"),
    ("DESCRIPTION", "description"),
    ("X-WR-CALDESC", "x_wr_caldesc"),
    ("TIMEZONE-ID", "timezone_id"),
    ("X-WR-TIMEZONE", "x_wr_timezone"),
    ("REFRESH-INTERVAL", "refresh_interval", (("VALUE", "DURATION"),)),
    ("X-PUBLISHED-TTL", "x_published_ttl"),
    ("COLOR", "color"),
    ("CALSCALE", "calscale"),
    ("METHOD", "method"),
)

BASIC = EncodingProfile(
    name="basic",
    calendar_properties=_LEGACY_PROPERTIES,
    value_type_tag=False,
)
TAGGED = EncodingProfile(
    name="tagged",
    calendar_properties=_LEGACY_PROPERTIES,
)
EXTENDED = EncodingProfile(
    name="extended",
    calendar_properties=_EXTENDED_PROPERTIES,
)

PROFILES = {profile.name: profile for profile in (BASIC, TAGGED, EXTENDED)}
DEFAULT_PROFILE = EXTENDED


def get_profile(profile: Optional[Union[str, EncodingProfile]] = None) -> EncodingProfile:
    """
    Resolve a profile name to a built-in profile.

    Args:
        profile: Profile name, an EncodingProfile, or None for the default

    Returns:
        EncodingProfile

    Raises:
        ConfigurationError: If the name is not a built-in profile
    """
    if profile is None:
        return DEFAULT_PROFILE
    if isinstance(profile, EncodingProfile):
        return profile
    try:
        return PROFILES[profile.lower()]
    except KeyError:
        known = ", ".join(sorted(PROFILES))
        raise ConfigurationError(f"Unknown encoding profile: {profile} (known: {known})") from None
