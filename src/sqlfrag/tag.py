"""The ``sql`` entry point: templates in, fragments out

A template is a format string whose ``{}`` fields mark interpolations::

    >>> sql("select * from {} where a = {} and b in {}", sql.id("foo"), 1, [1, 2, 3])
    Fragment(query='select * from "foo" where a = ? and b in (?, ?, ?)', params=(1, 1, 2, 3))

The literal-segments shape of a template tag works as well::

    >>> sql(["select * from foo where a = ", ""], 1)
    Fragment(query='select * from foo where a = ?', params=(1,))
"""

import logging
from string import Formatter
from typing import Any, Callable, Mapping, Optional, Sequence

from sqlfrag import combinators
from sqlfrag.fragments import ABSENT, BoundValue, Fragment, Identifier, Raw

logger = logging.getLogger(__name__)

_FORMATTER = Formatter()
_MISSING = object()


def parse_template(
    template: str,
    args: Sequence[Any],
    kwargs: Mapping[str, Any]
) -> tuple[list[str], list[Any]]:
    """Split a format-string template into literal segments and values

    Fields may be automatic (``{}``), numbered (``{0}``) or named
    (``{name}``); ``{{`` and ``}}`` are literal braces.

    Args:
        template: Format string with replacement fields
        args: Positional values for ``{}`` / ``{0}`` fields
        kwargs: Keyword values for ``{name}`` fields

    Returns:
        Tuple of (segments, values) with len(segments) == len(values) + 1

    Raises:
        ValueError: If the template is malformed, a field uses a format spec,
            conversion, attribute or index lookup, automatic and manual
            numbering are mixed, or an argument is missing or unused
    """
    try:
        parsed = list(_FORMATTER.parse(template))
    except ValueError as exc:
        raise ValueError(f"Malformed template {template!r}: {exc}") from exc

    segments = [""]
    values: list[Any] = []
    numbering: Optional[str] = None
    next_auto = 0
    used_positions: set[int] = set()
    used_names: set[str] = set()

    for literal, field_name, format_spec, conversion in parsed:
        segments[-1] += literal
        if field_name is None:
            continue

        if format_spec or conversion:
            raise ValueError(
                f"Format specs and conversions are not supported: {{{field_name}}} "
                f"in template {template!r}"
            )

        if field_name == "" or field_name.isdigit():
            style = "auto" if field_name == "" else "manual"
            if numbering is not None and numbering != style:
                raise ValueError(
                    "Cannot mix automatic and manual field numbering "
                    f"in template {template!r}"
                )
            numbering = style
            position = next_auto if style == "auto" else int(field_name)
            if position >= len(args):
                raise ValueError(
                    f"Template {template!r} needs argument {position}, "
                    f"only {len(args)} given"
                )
            next_auto += 1
            used_positions.add(position)
            values.append(args[position])
        elif field_name.isidentifier():
            if field_name not in kwargs:
                raise ValueError(
                    f"Missing keyword argument {field_name!r} for template {template!r}"
                )
            used_names.add(field_name)
            values.append(kwargs[field_name])
        else:
            raise ValueError(
                f"Unsupported field {{{field_name}}} in template {template!r}. "
                "Attribute and index lookups are not allowed"
            )

        segments.append("")

    unused_positions = sorted(set(range(len(args))) - used_positions)
    if unused_positions:
        raise ValueError(
            f"Template {template!r} does not use positional arguments {unused_positions}"
        )
    unused_names = sorted(set(kwargs) - used_names)
    if unused_names:
        raise ValueError(
            f"Template {template!r} does not use keyword arguments {unused_names}"
        )

    return segments, values


def _is_template_object(template: Any) -> bool:
    """Check for the strings/interpolations shape of a t-string Template"""
    return hasattr(template, "strings") and hasattr(template, "interpolations")


def _split_template_object(template: Any) -> tuple[list[str], list[Any]]:
    values = []
    for interpolation in template.interpolations:
        if getattr(interpolation, "conversion", None) or getattr(interpolation, "format_spec", ""):
            raise ValueError(
                "Format specs and conversions are not supported in template "
                f"interpolation {getattr(interpolation, 'expression', '?')!r}"
            )
        values.append(interpolation.value)
    return list(template.strings), values


class SqlTag:
    """Callable that turns templates into Fragments, with combinators attached

    Use the module-level ``sql`` instance rather than creating new ones.
    """

    absent = ABSENT

    def __call__(self, template: Any, *args: Any, **kwargs: Any) -> Fragment:
        """Build a Fragment from a template

        Args:
            template: Format string, sequence of literal segments, or a
                t-string Template object
            *args: Positional interpolations
            **kwargs: Named interpolations (format strings only)

        Returns:
            The flattened Fragment

        Raises:
            ValueError: If the template and its arguments do not line up
            TypeError: If the template is of an unsupported type
        """
        if isinstance(template, str):
            segments, values = parse_template(template, args, kwargs)
        elif _is_template_object(template):
            if args or kwargs:
                raise ValueError("Template objects carry their own interpolations")
            segments, values = _split_template_object(template)
        elif isinstance(template, (list, tuple)):
            if kwargs:
                raise ValueError("Keyword arguments require a format string template")
            segments, values = list(template), list(args)
        else:
            raise TypeError(
                f"Unsupported template type: {type(template).__name__}. "
                "Expected a format string, a sequence of literal segments or a Template"
            )

        fragment = Fragment.build(segments, values)
        logger.debug(
            f"Built fragment from {len(values)} interpolations "
            f"with {len(fragment.params)} bound params"
        )
        return fragment

    @staticmethod
    def id(name: str) -> Identifier:
        """Quote a (possibly dotted) identifier

        Example:
            >>> sql("select * from {}", sql.id("foo.bar"))
            Fragment(query='select * from "foo"."bar"', params=())
        """
        return Identifier(name)

    @staticmethod
    def raw(value: Any) -> Raw:
        """Splice text verbatim, without quoting or binding

        Example:
            >>> sql("select {}", sql.raw("(1 + 1)"))
            Fragment(query='select (1 + 1)', params=())
        """
        return Raw(value)

    @staticmethod
    def when(
        condition: combinators.Condition,
        produce: Callable[[], BoundValue]
    ) -> BoundValue:
        """Include produce() only when condition holds

        Example:
            >>> sql("select {}", sql.when(False, lambda: sql("(1 + 1)")))
            Fragment(query='select ', params=())
        """
        return combinators.when(condition, produce)

    @staticmethod
    def ternary(
        condition: combinators.Condition,
        left: Callable[[], BoundValue],
        right: Callable[[], BoundValue]
    ) -> BoundValue:
        """Pick left() or right() depending on condition"""
        return combinators.ternary(condition, left, right)

    @staticmethod
    def eq(left: Any, right: Any = _MISSING) -> Fragment:
        """Build ``<left> = <right>`` from two values or one (left, right) pair

        Example:
            >>> sql.eq(sql.id("foo"), 1)
            Fragment(query='"foo" = ?', params=(1,))
            >>> sql.eq((sql.id("foo"), 1))
            Fragment(query='"foo" = ?', params=(1,))
        """
        if right is _MISSING:
            if not isinstance(left, (list, tuple)) or len(left) != 2:
                raise TypeError(
                    "Invalid arguments: sql.eq() takes two values or one "
                    f"(left, right) pair, got {type(left).__name__}"
                )
            left, right = left
        return combinators.eq(left, right)

    @staticmethod
    def join(first: Any = _MISSING, *rest: Any) -> Fragment:
        """Join values with glue (default ", "), skipping ABSENT values

        Two call forms, told apart by the first argument:

        - ``sql.join(values, glue=None)`` when it is a list or tuple
        - ``sql.join(glue, *values)`` when it is a Fragment, None or ABSENT
          (the last two select the default glue)

        Example:
            >>> sql.join([sql("e = 1"), sql("e = {}", 2), 3], sql(" or "))
            Fragment(query='e = 1 or e = ? or ?', params=(2, 3))
            >>> sql.join(sql(" or "), sql("e = 1"), sql("e = {}", 2), 3)
            Fragment(query='e = 1 or e = ? or ?', params=(2, 3))

        Raises:
            TypeError: If the first argument fits neither form
        """
        if first is _MISSING:
            return combinators.join([])

        if isinstance(first, (list, tuple)):
            if len(rest) > 1:
                raise TypeError(
                    "Invalid arguments: sql.join(values, glue) takes at most "
                    f"one glue argument, got {len(rest)}"
                )
            return combinators.join(first, rest[0] if rest else None)

        if first is None or first is ABSENT or isinstance(first, Fragment):
            return combinators.join(list(rest), first)

        raise TypeError(
            "Invalid arguments: sql.join() expects a list of values or a glue "
            f"Fragment first, got {type(first).__name__}"
        )

    @staticmethod
    def join_object(
        entries: Mapping[str, BoundValue],
        glue: Optional[Fragment] = None
    ) -> Fragment:
        """Join ``key = value`` pairs with keys bound as parameters

        Example:
            >>> sql("update foo set {}", sql.join_object({"a": 1, "b": sql.raw(2)}))
            Fragment(query='update foo set ? = ?, ? = 2', params=('a', 1, 'b'))
        """
        return combinators.join_object(entries, glue)

    @staticmethod
    def set(entries: Mapping[str, BoundValue]) -> Fragment:
        """Build an assignment list with keys quoted as identifiers

        Example:
            >>> sql("update foo set {}", sql.set({"a": 1, "b": sql.raw(2)}))
            Fragment(query='update foo set "a" = ?, "b" = 2', params=(1,))
        """
        return combinators.join_object_identifiers(entries)

    @staticmethod
    def insert(entries: Mapping[str, BoundValue]) -> Fragment:
        """Build the column and value tuples of an INSERT

        Example:
            >>> sql("insert into foo {}", sql.insert({"a": 1, "b": sql.raw(2)}))
            Fragment(query='insert into foo ("a", "b") values (?, 2)', params=(1,))
        """
        return combinators.insert(entries)


sql = SqlTag()
