"""Ready-made character-class escapers."""

from escape_stream.escapers.base import Escaper

_CONTROL_ESCAPES = {
    "\\": "\\\\",
    "\t": "\\t",
    "\n": "\\n",
    "\r": "\\r",
}
_QUOTES = frozenset("'\"")


def hex_escape(char: str) -> str:
    """Escape a character in the shortest Python hex notation that fits."""
    code = ord(char)
    if code < 0x100:
        return f"\\x{code:02x}"
    if code < 0x10000:
        return f"\\u{code:04x}"
    return f"\\U{code:08x}"


class Passthrough(Escaper):
    """Identity escaper; output equals the unescaped rendering."""

    def process(self, char: str) -> str:
        """Return the character unchanged."""
        return char

    def __repr__(self) -> str:
        return "Passthrough()"


class DebugEscaper(Escaper):
    """Escape like Python's ``repr`` of a string.

    Backslash, tab, newline and carriage return use their short forms and
    non-printable characters use hex notation. Unlike ``repr``, quotes do
    not depend on a surrounding delimiter: both are escaped unless
    ``escape_quotes`` is disabled.
    """

    def __init__(self, *, escape_quotes: bool = True) -> None:
        """Initialize the escaper.

        Args:
            escape_quotes: Whether single and double quotes are escaped

        """
        self.escape_quotes = escape_quotes

    def process(self, char: str) -> str:
        """Escape a single character."""
        if char in _CONTROL_ESCAPES:
            return _CONTROL_ESCAPES[char]
        if char in _QUOTES:
            return f"\\{char}" if self.escape_quotes else char
        if char.isprintable():
            return char
        return hex_escape(char)

    def __repr__(self) -> str:
        return f"DebugEscaper(escape_quotes={self.escape_quotes!r})"


class DefaultEscaper(Escaper):
    """Escape everything but printable ASCII, like the ``unicode_escape`` codec.

    The output is pure ASCII and safe for display on any terminal.
    """

    def __init__(self, *, escape_quotes: bool = True) -> None:
        """Initialize the escaper.

        Args:
            escape_quotes: Whether single and double quotes are escaped

        """
        self.escape_quotes = escape_quotes

    def process(self, char: str) -> str:
        """Escape a single character."""
        if char in _CONTROL_ESCAPES:
            return _CONTROL_ESCAPES[char]
        if char in _QUOTES:
            return f"\\{char}" if self.escape_quotes else char
        if " " <= char <= "~":
            return char
        return hex_escape(char)

    def __repr__(self) -> str:
        return f"DefaultEscaper(escape_quotes={self.escape_quotes!r})"


class UnicodeEscaper(Escaper):
    """Escape every character as its code point (``\\uNNNN`` or ``\\UNNNNNNNN``)."""

    def process(self, char: str) -> str:
        """Escape a single character."""
        code = ord(char)
        if code < 0x10000:
            return f"\\u{code:04x}"
        return f"\\U{code:08x}"

    def __repr__(self) -> str:
        return "UnicodeEscaper()"
