"""Fragment value types and the value classifier"""

from .values import ABSENT, BoundValue, ValueKind
from .identifier import Identifier, Raw
from .fragment import Fragment, PLACEHOLDER, classify

__all__ = [
    "ABSENT",
    "BoundValue",
    "ValueKind",
    "Identifier",
    "Raw",
    "Fragment",
    "PLACEHOLDER",
    "classify",
]
