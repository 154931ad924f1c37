"""Custom exceptions for Calendar ICS application."""


class CalendarICSError(Exception):
    """Base exception for calendar encoding errors."""


class CalendarWriteError(CalendarICSError):
    """Raised when the destination refuses a write or flush."""


class ConfigurationError(CalendarICSError):
    """Raised when configuration or a calendar document is invalid."""
