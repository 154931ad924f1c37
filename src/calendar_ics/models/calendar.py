"""Calendar document model."""

from typing import Optional, Union

from pydantic import BaseModel, Field

from ..encoding import document
from ..encoding.profiles import EncodingProfile
from .component import Component


class Calendar(BaseModel):
    """VCALENDAR properties and its ordered components."""

    version: str = Field("", alias="VERSION")
    prodid: str = Field("", alias="PRODID")
    url: str = Field("", alias="URL")

    name: str = Field("", alias="NAME")
    x_wr_calname: str = Field("", alias="X-WR-CALNAME")
    description: str = Field("", alias="DESCRIPTION")
    x_wr_caldesc: str = Field("", alias="X-WR-CALDESC")

    timezone_id: str = Field("", alias="TIMEZONE-ID")
    x_wr_timezone: str = Field("", alias="X-WR-TIMEZONE")

    refresh_interval: str = Field("", alias="REFRESH-INTERVAL")  # PT12H
    x_published_ttl: str = Field("", alias="X-PUBLISHED-TTL")  # PT12H

    color: str = Field("", alias="COLOR")  # 34:50:105
    calscale: str = Field("", alias="CALSCALE")
    method: str = Field("", alias="METHOD")

    components: list[Component] = Field(default_factory=list)

    model_config = {
        "populate_by_name": True,
        "arbitrary_types_allowed": True,
        "extra": "forbid",
    }

    def encode(self, sink, profile: Optional[Union[str, EncodingProfile]] = None) -> None:
        """Encode this calendar onto ``sink``; see ``encoding.document.encode``."""
        document.encode(self, sink, profile)


def new_basic_calendar(**fields) -> Calendar:
    """
    Create a calendar with the standard VERSION and CALSCALE set.

    Args:
        **fields: Calendar fields, by field name or property name

    Returns:
        Calendar with version 2.0 and GREGORIAN scale unless overridden
    """
    defaults = {"version": "2.0", "calscale": "GREGORIAN"}
    for key in list(defaults):
        if key.upper() in fields:
            defaults.pop(key)
    return Calendar(**{**defaults, **fields})
