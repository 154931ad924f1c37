"""Configuration management for Calendar ICS application."""

from datetime import datetime
from pathlib import Path
from typing import Any, Optional

import pytz
import yaml
from dotenv import load_dotenv
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models.calendar import Calendar, new_basic_calendar
from .models.event import Event
from .utils.date_utils import localize
from .utils.exceptions import ConfigurationError
from .writers.stream import DEFAULT_BUFFER_SIZE

load_dotenv()


class AppConfig(BaseSettings):
    """Application configuration."""

    # Encoding
    profile: str = Field(default="extended", validation_alias="ICAL_PROFILE")
    buffer_size: int = Field(default=DEFAULT_BUFFER_SIZE, validation_alias="ICAL_BUFFER_SIZE")

    # Logging
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_file: Optional[Path] = Field(default=None, validation_alias="LOG_FILE")

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )


class EventConfig:
    """A single event entry from a calendar document."""

    def __init__(self, index: int, data: dict[str, Any]):
        self.index = index
        missing = [key for key in ("uid", "start", "end") if key not in data]
        if missing:
            raise ConfigurationError(f"Event #{index} is missing: {', '.join(missing)}")

        self.uid: str = str(data["uid"])
        self.summary: str = str(data.get("summary") or "")
        self.tzid: str = data.get("tzid") or ""
        self.all_day: bool = bool(data.get("all_day", False))
        self.start = localize(data["start"], self.tzid)
        self.end = localize(data["end"], self.tzid)
        # Stamps without an offset are UTC
        stamp = data.get("stamp")
        self.stamp = localize(stamp) if stamp is not None else datetime.now(pytz.utc)

    def to_event(self) -> Event:
        return Event(
            uid=self.uid,
            stamp=self.stamp,
            start=self.start,
            end=self.end,
            summary=self.summary,
            tzid=self.tzid,
            all_day=self.all_day,
        )


class DocumentConfig:
    """Calendar document loaded from YAML."""

    def __init__(self, config_path: Path):
        self.path = config_path
        self.profile: Optional[str] = None
        self.calendar: dict[str, Any] = {}
        self.events: list[EventConfig] = []

        if not config_path.exists():
            raise ConfigurationError(f"Calendar document not found: {config_path}")

        try:
            with open(config_path) as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Cannot read {config_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"{config_path} must contain a mapping")

        self.profile = data.get("profile")
        self.calendar = {
            key: str(value)
            for key, value in (data.get("calendar") or {}).items()
            if value is not None
        }
        for index, event_data in enumerate(data.get("events") or [], start=1):
            if not isinstance(event_data, dict):
                raise ConfigurationError(f"Event #{index} must be a mapping")
            self.events.append(EventConfig(index, event_data))

    def build_calendar(self) -> Calendar:
        """Build a Calendar with the standard defaults, the document fields and its events."""
        try:
            calendar = new_basic_calendar(**self.calendar)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid calendar fields in {self.path}: {e}") from e
        for event in self.events:
            calendar.components.append(event.to_event())
        return calendar


# Global config instance
config = AppConfig()
