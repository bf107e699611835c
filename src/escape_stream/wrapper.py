"""Escaping wrapper pairing a value with an escaper.

Rendering an ``Escaped`` value drives the inner value's own rendering into
an ``EscapingWriter`` instead of the real destination, so escaping happens
on the fly while the inner value renders.
"""

from collections.abc import Callable
import io
import logging
from typing import Any

from pydantic import BaseModel
from pydantic import Field

from escape_stream.config import DEFAULT_CONFIG
from escape_stream.config import EscapeConfig
from escape_stream.escapers import DebugEscaper
from escape_stream.escapers import DefaultEscaper
from escape_stream.escapers import Escaper
from escape_stream.escapers import UnicodeEscaper
from escape_stream.escapers import as_escaper
from escape_stream.sink import EscapingWriter
from escape_stream.types import Fragment
from escape_stream.types import TextDestination
from escape_stream.types import render_value

logger = logging.getLogger(__name__)

type EscaperLike = Escaper | Callable[[str], Fragment]


class Escaped[T](BaseModel):
    """A value rendered through an escaper.

    The stored escaper is a template: every render works on a fresh clone,
    so an ``Escaped`` can be rendered any number of times with the same
    result. Wrappers nest; an ``Escaped`` inside another is escaped twice.
    """

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    value: T
    escaper: Escaper = Field(default_factory=DEFAULT_CONFIG.build_escaper)

    def __init__(
        self, value: T, escaper: EscaperLike | None = None, **data: Any
    ) -> None:
        """Initialize the wrapper.

        Args:
            value: Value to render, a ``Renderable`` or anything ``format`` accepts
            escaper: Escaper template or single-character callable; the
                configured default is used when omitted

        """
        if escaper is not None:
            data["escaper"] = as_escaper(escaper)
        super().__init__(value=value, **data)

    @classmethod
    def with_default(cls, value: T, escaper_type: type[Escaper]) -> "Escaped[T]":
        """Wrap ``value`` with a default-constructed escaper of ``escaper_type``."""
        return cls(value, escaper_type())

    @classmethod
    def from_config(cls, value: T, config: EscapeConfig) -> "Escaped[T]":
        """Wrap ``value`` with the escaper described by ``config``."""
        return cls(value, config.build_escaper())

    def write_to(self, out: TextDestination) -> None:
        """Render the escaped value into ``out``.

        Whatever the inner value or the destination raises propagates
        unchanged.

        Args:
            out: Real output destination

        """
        self._render(out, "")

    def _render(self, out: TextDestination, format_spec: str) -> None:
        escaper = self.escaper.clone()
        logger.debug("Rendering %s through %r", type(self.value).__name__, escaper)
        with EscapingWriter(out, escaper) as writer:
            render_value(self.value, writer, format_spec)
            writer.finish()
        logger.debug("Finished rendering %s", type(self.value).__name__)

    def __format__(self, format_spec: str) -> str:
        """Render to a string; ``format_spec`` applies to the inner value."""
        buffer = io.StringIO()
        self._render(buffer, format_spec)
        return buffer.getvalue()

    def __str__(self) -> str:
        return self.__format__("")


class Escapable:
    """Mixin giving a class fluent escaping helpers.

    Example:
        ```python
        class Label(Escapable):
            def __format__(self, spec: str) -> str:
                return 'say "hi"'

        print(Label().escape_debug())  # say \\"hi\\"
        ```

    """

    def escaped(self, escaper: EscaperLike) -> Escaped[Any]:
        """Wrap this value with an explicit escaper."""
        return Escaped(self, escaper)

    def escaped_with(self, escaper_type: type[Escaper]) -> Escaped[Any]:
        """Wrap this value with a default-constructed escaper of a given type."""
        return Escaped.with_default(self, escaper_type)

    def escape_debug(self) -> Escaped[Any]:
        return Escaped(self, DebugEscaper())

    def escape_default(self) -> Escaped[Any]:
        return Escaped(self, DefaultEscaper())

    def escape_unicode(self) -> Escaped[Any]:
        return Escaped(self, UnicodeEscaper())


def escape[T](value: T, escaper: EscaperLike) -> Escaped[T]:
    """Wrap a value with an explicit escaper."""
    return Escaped(value, escaper)


def escape_with[T](value: T, escaper_type: type[Escaper]) -> Escaped[T]:
    """Wrap a value with a default-constructed escaper of ``escaper_type``."""
    return Escaped.with_default(value, escaper_type)


def escape_debug[T](value: T) -> Escaped[T]:
    """Wrap a value for ``repr``-style escaping."""
    return Escaped(value, DebugEscaper())


def escape_default[T](value: T) -> Escaped[T]:
    """Wrap a value for ASCII display escaping."""
    return Escaped(value, DefaultEscaper())


def escape_unicode[T](value: T) -> Escaped[T]:
    """Wrap a value for code point escaping."""
    return Escaped(value, UnicodeEscaper())


def write_escaped(value: object, out: TextDestination, escaper: EscaperLike) -> None:
    """Render ``value`` into ``out`` through ``escaper`` in one call.

    Args:
        value: Value to render
        out: Real output destination
        escaper: Escaper template or single-character callable

    """
    Escaped(value, escaper).write_to(out)
