"""Utility helpers"""

from .serialize import dump_fragment, to_debug_value, MAX_SAFE_INTEGER

__all__ = [
    "dump_fragment",
    "to_debug_value",
    "MAX_SAFE_INTEGER",
]
