"""Exception hierarchy for the HTMA show scanner."""
from typing import Any, Optional


class HtmaScannerError(Exception):
    """Base class for all scanner errors."""


class ConfigError(HtmaScannerError):
    """Static configuration is incomplete or inconsistent."""


class CategoryNotFound(ConfigError):
    """No endpoint is registered for a category."""

    def __init__(self, category: Any):
        self.category = category
        super().__init__(f"Category not found: {category}")


class NetworkError(HtmaScannerError):
    """Fetching a listing page failed."""

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(f"{message} ({url})")


class ParseError(HtmaScannerError):
    """
    Markup or text could not be turned into show data.

    Attributes:
        text: The offending input, kept for diagnostics
    """

    default_message = "Parse error"

    def __init__(self, text: Optional[str] = None, message: Optional[str] = None):
        self.text = text
        message = message or self.default_message
        if text is not None:
            message = f"{message}: {text!r}"
        super().__init__(message)


class MissingContainer(ParseError):
    default_message = "Listing container not found"

    def __init__(self, category: Any = None, text: Optional[str] = None):
        self.category = category
        message = self.default_message
        if category is not None:
            message = f"{message} for {category}"
        super().__init__(text=text, message=message)


class InvalidDateFormat(ParseError):
    default_message = "Invalid date format"


class InvalidDay(ParseError):
    default_message = "Invalid day"


class InvalidMonth(ParseError):
    default_message = "Invalid month"


class InvalidYear(ParseError):
    default_message = "Invalid year"


class InvalidDate(ParseError):
    default_message = "Invalid date"


class InvalidTimeFormat(ParseError):
    default_message = "Invalid time format"


class PersistenceError(HtmaScannerError):
    """Writing the snapshot failed."""

    def __init__(self, path: Any, message: str):
        self.path = path
        super().__init__(f"{message} ({path})")


class NotificationError(HtmaScannerError):
    """Notifier is not configured or delivery failed."""
