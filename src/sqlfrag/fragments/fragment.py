"""Immutable parameterized SQL fragments and the builder that flattens them"""

from dataclasses import dataclass
from typing import Any, Optional, Sequence

from .identifier import Identifier, Raw
from .values import ABSENT, BoundValue, ValueKind

PLACEHOLDER = "?"
ARRAY_SEPARATOR = ", "


@dataclass(frozen=True)
class Fragment:
    """A piece of SQL text with one placeholder per bound parameter

    Fragments are built once and never mutated. Interpolating a fragment
    into another splices its query text and appends its params in order.

    Example:
        >>> Fragment.build(["a = ", " and b in ", ""], [1, [2, 3]])
        Fragment(query='a = ? and b in (?, ?)', params=(1, 2, 3))
    """

    query: str = ""
    params: tuple[Any, ...] = ()

    def __post_init__(self):
        """Store params as a tuple so the fragment stays immutable"""
        if not isinstance(self.params, tuple):
            object.__setattr__(self, 'params', tuple(self.params))

    @classmethod
    def build(
        cls,
        segments: Sequence[str],
        values: Sequence[BoundValue]
    ) -> 'Fragment':
        """Walk literal segments and interpolated values into a fragment

        Args:
            segments: Literal text pieces, one more than there are values
            values: Interpolated values, in left-to-right order

        Returns:
            The flattened Fragment

        Raises:
            ValueError: If the segment count is not len(values) + 1
        """
        if len(segments) != len(values) + 1:
            raise ValueError(
                f"Expected {len(values) + 1} literal segments for "
                f"{len(values)} values, got {len(segments)}"
            )

        builder = _Builder()
        for index, segment in enumerate(segments):
            builder.add_text(segment)
            if index < len(values):
                builder.add_value(values[index])
        return builder.finish()

    def join(self, values: Sequence[BoundValue]) -> 'Fragment':
        """Join values with this fragment as glue, like str.join"""
        from sqlfrag.combinators import join
        return join(values, self)

    def as_tuple(self) -> tuple[str, tuple[Any, ...]]:
        """Get both query and params, ready for cursor.execute(*...)"""
        return self.query, self.params

    def to_string(self, pretty: bool = False) -> str:
        """Debug serialization of query and params as JSON text"""
        from sqlfrag.utils.serialize import dump_fragment
        return dump_fragment(self.query, self.params, pretty=pretty)

    def __add__(self, other: object) -> 'Fragment':
        if not isinstance(other, Fragment):
            return NotImplemented
        return Fragment(self.query + other.query, self.params + other.params)

    def __str__(self) -> str:
        return self.to_string()


def classify(value: Any) -> ValueKind:
    """Categorize an interpolated value

    Only list and tuple count as arrays; str, bytes and everything else not
    listed below are bound as primitives.
    """
    if value is ABSENT:
        return ValueKind.ABSENT
    if isinstance(value, Fragment):
        return ValueKind.FRAGMENT
    if isinstance(value, Identifier):
        return ValueKind.IDENTIFIER
    if isinstance(value, Raw):
        return ValueKind.RAW
    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    return ValueKind.PRIMITIVE


class _Builder:
    """Accumulates query text and params while a fragment is being built"""

    def __init__(self):
        self._chunks: list[str] = []
        self._params: list[Any] = []

    def add_text(self, text: str) -> None:
        self._chunks.append(text)

    def add_value(self, value: Any) -> None:
        kind = classify(value)

        if kind is ValueKind.ABSENT:
            return
        if kind is ValueKind.FRAGMENT:
            self._chunks.append(value.query)
            self._params.extend(value.params)
        elif kind is ValueKind.IDENTIFIER or kind is ValueKind.RAW:
            self._chunks.append(value.render())
        elif kind is ValueKind.ARRAY:
            self._add_array(value)
        else:
            self._chunks.append(PLACEHOLDER)
            self._params.append(value)

    def _add_array(self, values: Sequence[Any]) -> None:
        # Same shape as join(values) wrapped in parentheses
        self._chunks.append("(")
        separator: Optional[str] = None
        for item in values:
            if item is ABSENT:
                continue
            if separator is not None:
                self._chunks.append(separator)
            self.add_value(item)
            separator = ARRAY_SEPARATOR
        self._chunks.append(")")

    def finish(self) -> Fragment:
        return Fragment("".join(self._chunks), tuple(self._params))
