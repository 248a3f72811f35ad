"""
Structured-debug formatting helpers.

Builders used inside ``__debug_fmt__`` implementations, plus the
formatters for the standard Python types.

Quick Start:
    class Point:
        def __init__(self, x, y):
            self.x, self.y = x, y

        def __debug_fmt__(self, f):
            f.debug_struct("Point").field("x", self.x).field("y", self.y).finish()

    to_debug(Point(1, 2))               # 'Point { x: 1, y: 2 }'
    to_debug(Point(1, 2), pretty=True)  # multi-line, four-space indent
"""

from .builders import DebugList, DebugMap, DebugSet, DebugStruct, DebugTuple
from .formatters import format_float, format_str, format_value

__all__ = [
    # Builders
    "DebugStruct",
    "DebugTuple",
    "DebugList",
    "DebugSet",
    "DebugMap",

    # Formatters
    "format_value",
    "format_str",
    "format_float",
]
