"""
Builders for the field-labelled debug convention.

Each builder writes its opening text on creation, one piece per
field or entry, and its closing text on ``finish()``. Compact output
stays on one line; alternate output puts every field on its own
indented line followed by a comma.
"""

from typing import Any, Iterable, Tuple


class DebugStruct:
    """
    Writes ``Name { field: value, ... }``.

    Example:
        f.debug_struct("Person").field("name", "Joseph").field("age", 20).finish()
        # Person { name: "Joseph", age: 20 }
    """

    def __init__(self, fmt, name: str):
        self.fmt = fmt
        self.has_fields = False
        fmt.write(name)

    def field(self, name: str, value: Any) -> "DebugStruct":
        if self.fmt.alternate:
            if not self.has_fields:
                self.fmt.write(" {\n")
            writer = self.fmt.padded()
            writer.write(f"{name}: ")
            writer.debug(value)
            writer.write(",\n")
        else:
            self.fmt.write(", " if self.has_fields else " { ")
            self.fmt.write(f"{name}: ")
            self.fmt.debug(value)
        self.has_fields = True
        return self

    def finish_non_exhaustive(self):
        """Close the struct, marking that some fields were left out."""
        if not self.has_fields:
            self.fmt.write(" { .. }")
        elif self.fmt.alternate:
            self.fmt.padded().write("..\n")
            self.fmt.write("}")
        else:
            self.fmt.write(", .. }")

    def finish(self):
        if self.has_fields:
            self.fmt.write("}" if self.fmt.alternate else " }")


class DebugTuple:
    """
    Writes ``Name(value, ...)``.

    An empty name gives an anonymous tuple; a one-element anonymous
    tuple keeps its trailing comma in compact form: ``(1,)``.
    """

    def __init__(self, fmt, name: str):
        self.fmt = fmt
        self.fields = 0
        self.empty_name = not name
        fmt.write(name)

    def field(self, value: Any) -> "DebugTuple":
        if self.fmt.alternate:
            if self.fields == 0:
                self.fmt.write("(\n")
            writer = self.fmt.padded()
            writer.debug(value)
            writer.write(",\n")
        else:
            self.fmt.write("(" if self.fields == 0 else ", ")
            self.fmt.debug(value)
        self.fields += 1
        return self

    def finish(self):
        if self.fields > 0:
            if self.fields == 1 and self.empty_name and not self.fmt.alternate:
                self.fmt.write(",")
            self.fmt.write(")")


class _DebugInner:
    """Shared entry logic for lists and sets."""

    def __init__(self, fmt):
        self.fmt = fmt
        self.has_fields = False

    def entry(self, value: Any):
        if self.fmt.alternate:
            if not self.has_fields:
                self.fmt.write("\n")
            writer = self.fmt.padded()
            writer.debug(value)
            writer.write(",\n")
        else:
            if self.has_fields:
                self.fmt.write(", ")
            self.fmt.debug(value)
        self.has_fields = True
        return self

    def entries(self, values: Iterable[Any]):
        for value in values:
            self.entry(value)
        return self


class DebugList(_DebugInner):
    """Writes ``[a, b, ...]``."""

    def __init__(self, fmt):
        super().__init__(fmt)
        fmt.write("[")

    def finish(self):
        self.fmt.write("]")


class DebugSet(_DebugInner):
    """Writes ``{a, b, ...}``."""

    def __init__(self, fmt):
        super().__init__(fmt)
        fmt.write("{")

    def finish(self):
        self.fmt.write("}")


class DebugMap:
    """
    Writes ``{key: value, ...}``.

    Entries are added whole with ``entry(key, value)`` or in two steps
    with ``key(k)`` then ``value(v)``. Leaving a key without its value
    is a programming error and fails an assertion.
    """

    def __init__(self, fmt):
        self.fmt = fmt
        self.has_fields = False
        self.has_key = False
        self._writer = None
        fmt.write("{")

    def key(self, key: Any) -> "DebugMap":
        assert not self.has_key, "attempted to begin a new map entry without completing the previous one"

        if self.fmt.alternate:
            if not self.has_fields:
                self.fmt.write("\n")
            # key and value share one adapter so the value continues the key's line
            self._writer = self.fmt.padded()
            self._writer.debug(key)
            self._writer.write(": ")
        else:
            if self.has_fields:
                self.fmt.write(", ")
            self.fmt.debug(key)
            self.fmt.write(": ")
        self.has_key = True
        return self

    def value(self, value: Any) -> "DebugMap":
        assert self.has_key, "attempted to format a map value before its key"

        if self.fmt.alternate:
            self._writer.debug(value)
            self._writer.write(",\n")
            self._writer = None
        else:
            self.fmt.debug(value)
        self.has_key = False
        self.has_fields = True
        return self

    def entry(self, key: Any, value: Any) -> "DebugMap":
        return self.key(key).value(value)

    def entries(self, pairs: Iterable[Tuple[Any, Any]]) -> "DebugMap":
        for key, value in pairs:
            self.entry(key, value)
        return self

    def finish(self):
        assert not self.has_key, "attempted to finish a map with a partial entry"
        self.fmt.write("}")
