"""Combinators that build common SQL shapes out of fragments

Every combinator returns a new Fragment (or, for the conditionals, a bound
value) and filters out ABSENT values before composing.
"""

from typing import Any, Callable, Mapping, Optional, Sequence, Union

from sqlfrag.fragments import ABSENT, BoundValue, Fragment, Identifier

DEFAULT_GLUE = Fragment(", ")

Condition = Union[bool, Callable[[], Any]]


def _resolve_glue(glue: Any) -> Fragment:
    """Resolve the glue argument; None and ABSENT mean the default glue"""
    if glue is None or glue is ABSENT:
        return DEFAULT_GLUE
    if not isinstance(glue, Fragment):
        raise TypeError(
            f"Invalid arguments: glue must be a Fragment, got {type(glue).__name__}"
        )
    return glue


def join(values: Sequence[BoundValue], glue: Optional[Fragment] = None) -> Fragment:
    """Join values with glue placed strictly between present values

    ABSENT values are dropped before glue is placed, so they never produce
    doubled or dangling glue.

    Args:
        values: Values to join, in order
        glue: Separator fragment (default: ", ")

    Returns:
        Fragment of the joined values; empty when nothing is left to join

    Raises:
        TypeError: If glue is not a Fragment

    Example:
        >>> join([1, ABSENT, Identifier("foo")], Fragment(" and "))
        Fragment(query='? and "foo"', params=(1,))
    """
    separator = _resolve_glue(glue)
    interleaved: list[Any] = []
    for value in values:
        if value is ABSENT:
            continue
        if interleaved:
            interleaved.append(separator)
        interleaved.append(value)
    return Fragment.build([""] * (len(interleaved) + 1), interleaved)


def eq(left: BoundValue, right: BoundValue) -> Fragment:
    """Build ``<left> = <right>``

    An ABSENT side renders as empty text, leaving e.g. ``" = ?"``.
    """
    return Fragment.build(["", " = ", ""], [left, right])


def join_object(
    entries: Mapping[str, BoundValue],
    glue: Optional[Fragment] = None
) -> Fragment:
    """Join ``key = value`` pairs, binding each key as a parameter

    Example:
        >>> join_object({"a": 1, "b": ABSENT})
        Fragment(query='? = ?', params=('a', 1))
    """
    return join(
        [eq(key, value) for key, value in entries.items() if value is not ABSENT],
        glue,
    )


def join_object_identifiers(
    entries: Mapping[str, BoundValue],
    glue: Optional[Fragment] = None
) -> Fragment:
    """Join ``"key" = value`` pairs with keys quoted as identifiers

    Builds the assignment list of an UPDATE ... SET statement.

    Example:
        >>> join_object_identifiers({"a": 1, "b": Raw(2)})
        Fragment(query='"a" = ?, "b" = 2', params=(1,))
    """
    return join(
        [
            eq(Identifier(key), value)
            for key, value in entries.items()
            if value is not ABSENT
        ],
        glue,
    )


def insert(entries: Mapping[str, BoundValue]) -> Fragment:
    """Build ``("col", ...) values (...)`` from a mapping

    Columns and values come out in the same order; ABSENT values drop their
    column as well.

    Example:
        >>> insert({"a": 1, "b": Raw(2)})
        Fragment(query='("a", "b") values (?, 2)', params=(1,))
    """
    present = [(key, value) for key, value in entries.items() if value is not ABSENT]
    return Fragment.build(
        ["(", ") values (", ")"],
        [
            join([Identifier(key) for key, _ in present]),
            join([value for _, value in present]),
        ],
    )


def _evaluate(condition: Condition) -> bool:
    return bool(condition() if callable(condition) else condition)


def when(condition: Condition, produce: Callable[[], BoundValue]) -> BoundValue:
    """Return produce() when condition holds, ABSENT otherwise

    A callable condition is called once; produce is only called when needed.
    """
    return produce() if _evaluate(condition) else ABSENT


def ternary(
    condition: Condition,
    left: Callable[[], BoundValue],
    right: Callable[[], BoundValue]
) -> BoundValue:
    """Return left() when condition holds, right() otherwise; never both"""
    return left() if _evaluate(condition) else right()
