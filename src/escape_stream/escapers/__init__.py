"""Escaper registry and built-in escaping conventions."""

from escape_stream.escapers.base import Escaper
from escape_stream.escapers.base import FunctionEscaper
from escape_stream.escapers.base import as_escaper
from escape_stream.escapers.base import escape_str
from escape_stream.escapers.builtin import DebugEscaper
from escape_stream.escapers.builtin import DefaultEscaper
from escape_stream.escapers.builtin import Passthrough
from escape_stream.escapers.builtin import UnicodeEscaper
from escape_stream.escapers.builtin import hex_escape
from escape_stream.escapers.enums import EscapeStyle

__all__ = [
    "DebugEscaper",
    "DefaultEscaper",
    "EscapeStyle",
    "Escaper",
    "FunctionEscaper",
    "Passthrough",
    "UnicodeEscaper",
    "as_escaper",
    "escape_str",
    "get_escaper",
    "hex_escape",
]


def get_escaper(style: EscapeStyle, *, escape_quotes: bool = True) -> Escaper:
    """Get a fresh escaper for the specified style.

    Args:
        style: Escaping convention to use
        escape_quotes: Whether quotes are escaped (debug and default styles)

    Returns:
        New escaper instance for the style

    Raises:
        ValueError: When style is not supported

    """
    match style:
        case EscapeStyle.NONE:
            return Passthrough()
        case EscapeStyle.DEBUG:
            return DebugEscaper(escape_quotes=escape_quotes)
        case EscapeStyle.DEFAULT:
            return DefaultEscaper(escape_quotes=escape_quotes)
        case EscapeStyle.UNICODE:
            return UnicodeEscaper()
    msg = f"Unsupported escape style: {style!s}"
    raise ValueError(msg)
