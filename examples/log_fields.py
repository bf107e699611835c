#!/usr/bin/env python3
"""Embed untrusted values in logfmt-style lines without building escaped copies.

Each field value renders straight through an escaper into stdout, so a
value containing quotes or newlines cannot break the line structure.
"""

import sys

from escape_stream import Escaped
from escape_stream import Escaper
from escape_stream import TextDestination
from escape_stream import escape_debug
from escape_stream import render_value


class CollapseSpaces(Escaper):
    """Collapse runs of spaces into one, holding each space back until needed."""

    def __init__(self) -> None:
        self.pending_space = False

    def process(self, char: str) -> str:
        if char == " ":
            self.pending_space = True
            return ""
        if self.pending_space:
            self.pending_space = False
            return " " + char
        return char

    def finish(self) -> str:
        flushed = " " if self.pending_space else ""
        self.pending_space = False
        return flushed


class LogLine:
    """A logfmt line whose values are quoted and debug-escaped."""

    def __init__(self, **fields: object) -> None:
        self.fields = fields

    def write_to(self, out: TextDestination) -> None:
        for index, (key, value) in enumerate(self.fields.items()):
            if index:
                out.write(" ")
            out.write(f'{key}="')
            render_value(escape_debug(value), out)
            out.write('"')
        out.write("\n")


def main() -> None:
    """Print a few log lines with hostile values."""
    LogLine(user='mallory" admin="true', action="login").write_to(sys.stdout)
    LogLine(msg="first line\nsecond line", count=3).write_to(sys.stdout)

    Escaped(LogLine(note="lots    of     space"), CollapseSpaces()).write_to(
        sys.stdout
    )


if __name__ == "__main__":
    main()
