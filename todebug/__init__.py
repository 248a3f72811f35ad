"""
todebug: render values with their structured-debug representation.

``to_debug`` is the debug counterpart of ``str()``: it shows type names,
field names and nested values, which makes it handy for asserting on
the full contents of an object in tests and doctests:
    from todebug import to_debug

    assert to_debug(Years(18)) == "Years(18)"
"""

from .core import (
    DebugContractError,
    DebugFormatter,
    FormatError,
    PadAdapter,
    ToDebug,
    to_debug,
    to_debug_string,
)
from .debug import DebugList, DebugMap, DebugSet, DebugStruct, DebugTuple
from .logger import PrettyLogger

__all__ = [
    "to_debug",
    "to_debug_string",
    "ToDebug",
    "DebugFormatter",
    "PadAdapter",
    "FormatError",
    "DebugContractError",
    "DebugStruct",
    "DebugTuple",
    "DebugList",
    "DebugSet",
    "DebugMap",
    "PrettyLogger",
]

__version__ = "1.0.0"
