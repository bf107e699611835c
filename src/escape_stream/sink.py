"""Interception sink that escapes text on its way to a real destination.

Every fragment written to an ``EscapingWriter`` is split into characters.
Each character goes through the escaper and the resulting fragment is
written to the destination before the next character is looked at, so the
writer never holds more than one fragment of output.
"""

from collections.abc import Iterable
import io
import logging

from escape_stream.escapers.base import Escaper
from escape_stream.types import TextDestination
from escape_stream.types import write_fragment

logger = logging.getLogger(__name__)


class EscapingWriter(io.TextIOBase):
    """Text stream that escapes everything written to it.

    The writer owns its escaper for the duration of one rendering pass and
    mutates it freely; pass a clone if the original must stay untouched.
    Closing the writer never closes the destination.
    """

    def __init__(self, destination: TextDestination, escaper: Escaper) -> None:
        """Initialize the writer.

        Args:
            destination: Real output destination receiving escaped text
            escaper: Working escaper instance for this pass

        """
        super().__init__()
        self._destination = destination
        self._escaper = escaper
        self._finished = False
        self._detached = False

    @property
    def destination(self) -> TextDestination:
        """Real output destination."""
        return self._destination

    @property
    def escaper(self) -> Escaper:
        """Working escaper instance."""
        return self._escaper

    def writable(self) -> bool:
        return True

    def write(self, text: str) -> int:
        """Escape ``text`` character by character into the destination.

        Args:
            text: Unescaped text fragment

        Returns:
            Number of input characters consumed

        Raises:
            TypeError: When text is not a str
            ValueError: When the writer is closed or already finished

        """
        if not isinstance(text, str):
            msg = f"write() argument must be str, not {type(text).__name__}"
            raise TypeError(msg)
        self._check_open()
        destination = self._destination
        escaper = self._escaper
        try:
            for char in text:
                write_fragment(escaper.process(char), destination)
        except Exception:
            logger.debug("Escaped write to %r interrupted", destination, exc_info=True)
            raise
        return len(text)

    def write_char(self, char: str) -> None:
        """Escape a single character into the destination.

        Raises:
            ValueError: When ``char`` is not exactly one character

        """
        if not isinstance(char, str) or len(char) != 1:
            msg = f"write_char() expects a single character, got {char!r}"
            raise ValueError(msg)
        self.write(char)

    def writelines(self, lines: Iterable[str], /) -> None:
        for line in lines:
            self.write(line)

    def finish(self) -> None:
        """Flush the escaper's deferred state; later calls do nothing."""
        if self._finished:
            return
        self._check_open()
        self._finished = True
        write_fragment(self._escaper.finish(), self._destination)

    def flush(self) -> None:
        """Flush the destination if it supports flushing."""
        if self.closed or self._detached:
            return
        flush = getattr(self._destination, "flush", None)
        if flush is not None:
            flush()

    def close(self) -> None:
        """Close the writer, leaving the destination open and unflushed."""
        self._detached = True
        super().close()

    def _check_open(self) -> None:
        if self.closed:
            msg = "I/O operation on closed EscapingWriter"
            raise ValueError(msg)
        if self._finished:
            msg = "EscapingWriter already finished"
            raise ValueError(msg)

    def __repr__(self) -> str:
        return f"EscapingWriter({self._destination!r}, {self._escaper!r})"
