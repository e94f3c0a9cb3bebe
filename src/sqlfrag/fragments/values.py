"""Value kinds accepted as template interpolations"""

from enum import Enum
from typing import TYPE_CHECKING, Any, Union

if TYPE_CHECKING:
    from .fragment import Fragment
    from .identifier import Identifier, Raw


class _AbsentType(Enum):
    """Marker for an interpolation that is left out of the query entirely

    Distinct from None, which binds SQL NULL.
    """

    ABSENT = "ABSENT"

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = _AbsentType.ABSENT


class ValueKind(Enum):
    """How an interpolated value is emitted into a fragment"""

    ABSENT = "absent"
    PRIMITIVE = "primitive"
    ARRAY = "array"
    FRAGMENT = "fragment"
    IDENTIFIER = "identifier"
    RAW = "raw"


PrimitiveValue = Union[None, bool, int, float, str, bytes, bytearray, memoryview]
CustomValue = Union["Fragment", "Identifier", "Raw"]
BoundValue = Union[PrimitiveValue, CustomValue, list[Any], tuple[Any, ...], _AbsentType]
