"""Type-safe enumerations for escaper selection."""

from enum import StrEnum


class EscapeStyle(StrEnum):
    """Built-in escaping conventions."""

    NONE = "none"
    DEBUG = "debug"
    DEFAULT = "default"
    UNICODE = "unicode"
