"""Escaper abstractions: stateful, clonable per-character transforms."""

from abc import ABC
from abc import abstractmethod
from collections.abc import Callable
import copy
import io
from typing import Self

from escape_stream.types import Fragment
from escape_stream.types import write_fragment


class Escaper(ABC):
    """Character-wise processor implementing some escaping logic.

    ``process`` receives one character at a time and returns a fragment. In
    simple cases the fragment is the character itself or its escape
    sequence. Escapers driven by a state machine may return ``""`` to defer
    output and flush it later as a longer fragment, either from a later
    ``process`` call or from ``finish``.

    One escaping session runs on a single instance. ``clone`` produces an
    independent copy with the same current state and is only used to start
    new sessions; clones never share mutable state.
    """

    @abstractmethod
    def process(self, char: str) -> Fragment:
        """Process a single input character.

        Args:
            char: One character, in the order it was rendered.

        Returns:
            Fragment whose text is appended to the escaped output.

        """

    def finish(self) -> Fragment:
        """Flush any deferred state once the input has ended."""
        return ""

    def clone(self) -> Self:
        """Return an independent copy carrying the current state."""
        return copy.deepcopy(self)


class FunctionEscaper(Escaper):
    """Adapt a single-character callable into an escaper.

    Cloning deep-copies the callable: stateful callable objects are
    duplicated, plain functions are shared since they hold no state.
    """

    def __init__(self, func: Callable[[str], Fragment]) -> None:
        """Initialize the adapter.

        Args:
            func: Callable mapping one character to a fragment.

        """
        if not callable(func):
            msg = f"FunctionEscaper requires a callable, got {type(func).__name__}"
            raise TypeError(msg)
        self.func = func

    def process(self, char: str) -> Fragment:
        """Forward the character to the wrapped callable."""
        return self.func(char)

    def __repr__(self) -> str:
        return f"FunctionEscaper({self.func!r})"


def as_escaper(obj: Escaper | Callable[[str], Fragment]) -> Escaper:
    """Coerce an escaper or single-character callable into an escaper.

    Raises:
        TypeError: When ``obj`` is neither an escaper nor callable

    """
    if isinstance(obj, Escaper):
        return obj
    if isinstance(obj, type):
        msg = f"Expected an escaper instance, got the class {obj.__name__}"
        raise TypeError(msg)
    if callable(obj):
        return FunctionEscaper(obj)
    msg = f"Cannot use {type(obj).__name__} as an escaper"
    raise TypeError(msg)


def escape_str(text: str, escaper: Escaper | Callable[[str], Fragment]) -> str:
    """Apply an escaper to a string directly, without streaming.

    The escaper is cloned first so the caller's instance is left untouched.

    Args:
        text: Unescaped text
        escaper: Escaper or single-character callable

    Returns:
        Fully escaped text

    """
    working = as_escaper(escaper).clone()
    out = io.StringIO()
    for char in text:
        write_fragment(working.process(char), out)
    write_fragment(working.finish(), out)
    return out.getvalue()
