"""
Core rendering for todebug.

This module contains the debug-stringifier and the formatter it
drives:
- to_debug: Render any value to a string with its debug formatter
- ToDebug: Mixin exposing the same operation as a method
- DebugFormatter: Text sink handed to ``__debug_fmt__`` implementations
"""

from .formatter import DebugFormatter, FormatError, PadAdapter
from .render import DebugContractError, ToDebug, to_debug, to_debug_string

__all__ = [
    "to_debug",
    "to_debug_string",
    "ToDebug",
    "DebugFormatter",
    "PadAdapter",
    "FormatError",
    "DebugContractError",
]
