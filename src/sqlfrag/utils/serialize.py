"""Debug serialization of fragments as JSON text"""

from __future__ import annotations

import json
import math
from typing import Any

# Integers beyond this magnitude lose precision as IEEE-754 doubles
MAX_SAFE_INTEGER = 2**53 - 1


def _is_big_integer(value: Any) -> bool:
    """Check if a value is an int too large to survive a float round-trip"""
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and abs(value) > MAX_SAFE_INTEGER
    )


def to_debug_value(value: Any) -> Any:
    """Convert a bound parameter into a JSON-friendly debug value

    - big integers become their decimal string suffixed with ``n``
    - byte sequences become ``{"type": "Buffer", "data": [...]}``
    - non-finite floats become None, as JSON has no NaN or Infinity
    - lists, tuples and dicts are converted recursively

    Example:
        >>> to_debug_value(10**20)
        '100000000000000000000n'
        >>> to_debug_value(b"ab")
        {'type': 'Buffer', 'data': [97, 98]}
    """
    if _is_big_integer(value):
        return f"{value}n"
    if isinstance(value, (bytes, bytearray, memoryview)):
        return {"type": "Buffer", "data": list(bytes(value))}
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, (list, tuple)):
        return [to_debug_value(item) for item in value]
    if isinstance(value, dict):
        return {str(key): to_debug_value(item) for key, item in value.items()}
    return value


def dump_fragment(query: str, params: Any, pretty: bool = False) -> str:
    """Render query and params as JSON text

    Compact by default; ``pretty`` indents by two spaces. Values json cannot
    encode natively (datetime, Decimal, UUID) fall back to ``str()``.
    """
    payload = {
        "query": query,
        "params": [to_debug_value(param) for param in params],
    }
    if pretty:
        return json.dumps(payload, indent=2, ensure_ascii=False, default=str)
    return json.dumps(
        payload,
        separators=(",", ":"),
        ensure_ascii=False,
        default=str,
    )
