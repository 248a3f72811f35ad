"""
Debug-stringifier: render any value into a string with its debug formatter.

Quick Start:
    from todebug import to_debug

    @dataclass
    class Person:
        name: str
        age: int

    assert to_debug(Person("Joseph", 20)) == 'Person { name: "Joseph", age: 20 }'
"""

import io
from typing import Any

from .formatter import DebugFormatter, FormatError


class DebugContractError(AssertionError):
    """A debug formatter failed while writing into an in-memory buffer."""


def to_debug(value: Any, pretty: bool = False) -> str:
    """
    Convert a value to a string using its structured-debug representation.

    Works for every value; types customise their output by defining
    ``__debug_fmt__`` rather than by overriding this function.

    Args:
        value: Value to render (never mutated)
        pretty: Use the multi-line alternate form

    Returns:
        Exactly the text the value's debug formatter wrote

    Raises:
        DebugContractError: If a formatter raised FormatError
    """
    buf = io.StringIO()
    try:
        DebugFormatter(buf, alternate=pretty).debug(value)
    except FormatError as e:
        raise DebugContractError(
            "a __debug_fmt__ implementation raised FormatError unexpectedly"
        ) from e
    return buf.getvalue()


# Name used by callers that mirror ``str()`` / ``to_string`` spelling
to_debug_string = to_debug


class ToDebug:
    """
    Mixin adding a ``to_debug()`` method.

    Subclasses should implement ``__debug_fmt__`` (or be a dataclass),
    never ``to_debug`` itself.

    Example:
        @dataclass
        class Years(ToDebug):
            value: int

        Years(18).to_debug()  # 'Years { value: 18 }'
    """

    __slots__ = ()

    def to_debug(self, pretty: bool = False) -> str:
        """Render this object with its structured-debug formatter."""
        return to_debug(self, pretty=pretty)
