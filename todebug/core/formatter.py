"""
Text sink and formatter for structured-debug rendering.

A DebugFormatter wraps any writer with a ``write(str)`` method and knows
how to render a value into it. Types join in by defining
``__debug_fmt__(self, f)`` and writing through the formatter they receive.
"""

import re
from contextlib import contextmanager
from typing import Any, Iterator, Optional, Set

from ..debug import builders, formatters

_LINE = re.compile(r"[^\n]*\n|[^\n]+")


class FormatError(Exception):
    """Raised by a formatter to report that writing failed."""


class PadAdapter:
    """
    Writer that indents every line written through it by four spaces.

    Used by pretty (alternate) output so nested values line up under
    their parent. Each adapter tracks whether the next character starts
    a new line; a fresh adapter always starts on one.
    """

    INDENT = "    "

    def __init__(self, out):
        self._out = out
        self.on_newline = True

    def write(self, text: str):
        for line in _LINE.findall(text):
            if self.on_newline:
                self._out.write(self.INDENT)
            self.on_newline = line.endswith("\n")
            self._out.write(line)


class DebugFormatter:
    """
    Formatter handed to ``__debug_fmt__`` implementations.

    Usage:
        class Point:
            def __debug_fmt__(self, f):
                f.debug_struct("Point").field("x", self.x).field("y", self.y).finish()

    Attributes:
        alternate: True when pretty multi-line output was requested
    """

    def __init__(self, out, alternate: bool = False, _active: Optional[Set[int]] = None):
        """
        Initialize formatter.

        Args:
            out: Writer with a ``write(str)`` method
            alternate: Select the pretty multi-line form
        """
        self._out = out
        self.alternate = alternate
        # ids of containers currently being rendered, shared with nested formatters
        self._active = set() if _active is None else _active

    def write(self, text: str):
        """Write raw text to the underlying sink."""
        self._out.write(text)

    def debug(self, value: Any):
        """Write the structured-debug representation of ``value``."""
        formatters.format_value(self, value)

    def padded(self) -> "DebugFormatter":
        """Return a formatter writing through a fresh PadAdapter."""
        return DebugFormatter(PadAdapter(self._out), self.alternate, self._active)

    @contextmanager
    def guard(self, value: Any) -> Iterator[bool]:
        """
        Track ``value`` while it is being rendered.

        Yields False if ``value`` is already being rendered further up the
        same call, so recursive containers can write a placeholder instead.
        """
        key = id(value)
        if key in self._active:
            yield False
            return
        self._active.add(key)
        try:
            yield True
        finally:
            self._active.discard(key)

    def debug_struct(self, name: str) -> "builders.DebugStruct":
        return builders.DebugStruct(self, name)

    def debug_tuple(self, name: str) -> "builders.DebugTuple":
        return builders.DebugTuple(self, name)

    def debug_list(self) -> "builders.DebugList":
        return builders.DebugList(self)

    def debug_set(self) -> "builders.DebugSet":
        return builders.DebugSet(self)

    def debug_map(self) -> "builders.DebugMap":
        return builders.DebugMap(self)
