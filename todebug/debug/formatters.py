"""
Structured-debug formatters for the standard Python types.

Provides the rendering used for values whose type does not define
``__debug_fmt__``: scalars, text, dataclasses, named tuples, the
built-in containers and plain objects.
"""

import dataclasses
import enum
import math
from array import array
from collections import UserString
from collections.abc import Mapping, Sequence, Set
from typing import Any

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\0": "\\0",
}


def format_str(text: str) -> str:
    """
    Quote text the way structured-debug output shows it.

    Backslash, double quote and the common control characters get
    backslash escapes; any other non-printable character is written
    as ``\\u{hex}``.

    Args:
        text: String to quote

    Returns:
        Double-quoted, escaped string
    """
    parts = ['"']
    for ch in text:
        if ch in _ESCAPES:
            parts.append(_ESCAPES[ch])
        elif ch.isprintable():
            parts.append(ch)
        else:
            parts.append(f"\\u{{{ord(ch):x}}}")
    parts.append('"')
    return "".join(parts)


def format_float(value: float) -> str:
    """
    Format a float with the shortest digits that round-trip.

    Always keeps a fractional part (``1.0``). Very large or very small
    magnitudes use an exponent without sign padding (``1e16``, ``1e-5``).

    Args:
        value: Float to format

    Returns:
        Formatted number
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"

    text = float.__repr__(value)
    if "e" in text:
        mantissa, exponent = text.split("e")
        return f"{mantissa}e{int(exponent)}"
    return text


def format_dataclass(f, value: Any):
    """
    Write a dataclass instance as a struct.

    Fields appear in declaration order. Fields declared with
    ``repr=False`` are left out and the struct is marked ``..``.
    """
    builder = f.debug_struct(type(value).__name__)
    hidden = False
    for field in dataclasses.fields(value):
        if field.repr:
            builder.field(field.name, getattr(value, field.name))
        else:
            hidden = True

    if hidden:
        builder.finish_non_exhaustive()
    else:
        builder.finish()


def format_namedtuple(f, value: tuple):
    """Write a named tuple as a tuple struct: ``Years(18)``."""
    builder = f.debug_tuple(type(value).__name__)
    for item in value:
        builder.field(item)
    builder.finish()


def format_tuple(f, value: tuple):
    """Write an anonymous tuple: ``()``, ``(1,)``, ``(1, 2)``."""
    if not value:
        f.write("()")
        return
    builder = f.debug_tuple("")
    for item in value:
        builder.field(item)
    builder.finish()


def format_object(f, value: Any):
    """Write a plain object as a struct of its instance attributes."""
    builder = f.debug_struct(type(value).__name__)
    for name, attr in vars(value).items():
        builder.field(name, attr)
    builder.finish()


def _is_sequence(value: Any) -> bool:
    """List-like values: any sequence that is not text, bytes or a range."""
    if isinstance(value, (str, bytes, bytearray, UserString, range)):
        return False
    return isinstance(value, (Sequence, array))


def _is_plain_object(value: Any) -> bool:
    return type(value).__repr__ is object.__repr__ and hasattr(value, "__dict__")


def _placeholder(value: Any) -> str:
    """Text written in place of a value that contains itself."""
    if isinstance(value, tuple):
        if hasattr(type(value), "_fields"):
            return f"{type(value).__name__}(..)"
        return "(...)"
    if isinstance(value, (Mapping, Set)):
        return "{...}"
    if _is_sequence(value):
        return "[...]"
    return f"{type(value).__name__} {{ .. }}"


def _format_compound(f, value: Any):
    hook = getattr(type(value), "__debug_fmt__", None)
    if hook is not None:
        hook(value, f)
    elif dataclasses.is_dataclass(value):
        format_dataclass(f, value)
    elif isinstance(value, tuple) and hasattr(type(value), "_fields"):
        format_namedtuple(f, value)
    elif isinstance(value, tuple):
        format_tuple(f, value)
    elif isinstance(value, Mapping):
        f.debug_map().entries(value.items()).finish()
    elif isinstance(value, Set):
        f.debug_set().entries(value).finish()
    elif _is_sequence(value):
        f.debug_list().entries(value).finish()
    else:
        format_object(f, value)


def format_value(f, value: Any):
    """
    Write the structured-debug representation of any value.

    Dispatch order:
        - type defines ``__debug_fmt__`` → call it
        - None, bool, enum member, int, float, text, bytes → scalar text
        - dataclass, named tuple, tuple, mapping, set, sequence → builders
        - plain object keeping the default repr → struct of attributes
        - anything else → ``repr(value)``

    Args:
        f: DebugFormatter to write into
        value: Value to render
    """
    if getattr(type(value), "__debug_fmt__", None) is None:
        if value is None:
            f.write("None")
            return
        if isinstance(value, bool):
            f.write("true" if value else "false")
            return
        if isinstance(value, enum.Enum):
            f.write(value.name if value.name is not None else repr(value))
            return
        if isinstance(value, int):
            f.write(int.__repr__(value))
            return
        if isinstance(value, float):
            f.write(format_float(value))
            return
        if isinstance(value, str):
            f.write(format_str(value))
            return
        if isinstance(value, UserString):
            f.write(format_str(value.data))
            return
        if isinstance(value, (bytes, bytearray)):
            f.debug_list().entries(value).finish()
            return
        compound = (
            (dataclasses.is_dataclass(value) and not isinstance(value, type))
            or isinstance(value, (tuple, Mapping, Set))
            or _is_sequence(value)
            or _is_plain_object(value)
        )
        if not compound:
            f.write(repr(value))
            return

    with f.guard(value) as fresh:
        if fresh:
            _format_compound(f, value)
        else:
            f.write(_placeholder(value))
