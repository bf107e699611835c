"""Core protocols for values and destinations taking part in escaping."""

from typing import Protocol
from typing import runtime_checkable


@runtime_checkable
class TextDestination(Protocol):
    """Protocol for anything that accepts text fragments.

    Files, ``io.StringIO``, ``sys.stdout`` and ``EscapingWriter`` all qualify.
    Whatever the destination raises is the only failure a render can produce.
    """

    def write(self, text: str, /) -> object:
        """Write a text fragment."""
        ...


@runtime_checkable
class Renderable(Protocol):
    """Protocol for values that stream their textual form into a destination.

    Example:
        ```python
        class Pair:
            def write_to(self, out: TextDestination) -> None:
                out.write("(")
                render_value(self.left, out)
                out.write(", ")
                render_value(self.right, out)
                out.write(")")
        ```

    """

    def write_to(self, out: TextDestination) -> None:
        """Render this value into ``out``."""
        ...


type Fragment = str | Renderable | object
"""Output of a single escaper call.

A ``str`` is written as-is, a ``Renderable`` renders itself into the
destination and anything else is written via ``str()``.
"""


def render_value(value: object, out: TextDestination, format_spec: str = "") -> None:
    """Render any value into a destination.

    Args:
        value: A ``Renderable`` or any object supporting ``format``.
        out: Destination receiving the text.
        format_spec: Format specification for non-renderable values.

    """
    if isinstance(value, Renderable):
        value.write_to(out)
        return
    out.write(format(value, format_spec))


def write_fragment(fragment: Fragment, out: TextDestination) -> None:
    """Write one escaper fragment, skipping empty ones."""
    if isinstance(fragment, str):
        if fragment:
            out.write(fragment)
        return
    if isinstance(fragment, Renderable):
        fragment.write_to(out)
        return
    text = str(fragment)
    if text:
        out.write(text)
