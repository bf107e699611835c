"""escape-stream - escape values while they render, without buffering.

Wrap any value in ``Escaped`` together with an escaper and render it as
usual. The value's own rendering writes into an ``EscapingWriter``, which
runs each character through the escaper and streams the result straight to
the real destination.
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version

from escape_stream.config import EscapeConfig
from escape_stream.escapers import DebugEscaper
from escape_stream.escapers import DefaultEscaper
from escape_stream.escapers import Escaper
from escape_stream.escapers import EscapeStyle
from escape_stream.escapers import FunctionEscaper
from escape_stream.escapers import Passthrough
from escape_stream.escapers import UnicodeEscaper
from escape_stream.escapers import as_escaper
from escape_stream.escapers import escape_str
from escape_stream.escapers import get_escaper
from escape_stream.sink import EscapingWriter
from escape_stream.types import Fragment
from escape_stream.types import Renderable
from escape_stream.types import TextDestination
from escape_stream.types import render_value
from escape_stream.wrapper import Escapable
from escape_stream.wrapper import Escaped
from escape_stream.wrapper import escape
from escape_stream.wrapper import escape_debug
from escape_stream.wrapper import escape_default
from escape_stream.wrapper import escape_unicode
from escape_stream.wrapper import escape_with
from escape_stream.wrapper import write_escaped

__all__ = [
    "DebugEscaper",
    "DefaultEscaper",
    "EscapeConfig",
    "EscapeStyle",
    "Escapable",
    "Escaped",
    "Escaper",
    "EscapingWriter",
    "Fragment",
    "FunctionEscaper",
    "Passthrough",
    "Renderable",
    "TextDestination",
    "UnicodeEscaper",
    "as_escaper",
    "escape",
    "escape_debug",
    "escape_default",
    "escape_str",
    "escape_unicode",
    "escape_with",
    "get_escaper",
    "render_value",
    "write_escaped",
]

try:
    __version__ = version("escape-stream")
except PackageNotFoundError:
    __version__ = "0.0.0"
