"""
sqlfrag - composable, parameterized SQL fragments

Code is organized in layers
- fragments/ holds the value types (Fragment, Identifier, Raw, ABSENT)
  and the builder that flattens nested values into query text and params
- combinators builds common SQL shapes (lists, assignments, insert tuples)
- tag exposes everything through the callable ``sql`` entry point

Example:
    >>> from sqlfrag import sql
    >>> query, params = sql("select * from {} where a = {}", sql.id("foo"), 1).as_tuple()
    >>> query
    'select * from "foo" where a = ?'
"""

# Layer 1: Values
from sqlfrag.fragments import (
    ABSENT,
    BoundValue,
    ValueKind,
    Identifier,
    Raw,
    Fragment,
    PLACEHOLDER,
    classify,
)

# Layer 2: Combinators
from sqlfrag.combinators import (
    join,
    eq,
    join_object,
    join_object_identifiers,
    insert,
    when,
    ternary,
)

# Layer 3: Entry point
from sqlfrag.tag import SqlTag, sql

__version__ = "0.1.0"
__all__ = [
    # Layer 1: Values
    "ABSENT",
    "BoundValue",
    "ValueKind",
    "Identifier",
    "Raw",
    "Fragment",
    "PLACEHOLDER",
    "classify",
    # Layer 2: Combinators
    "join",
    "eq",
    "join_object",
    "join_object_identifiers",
    "insert",
    "when",
    "ternary",
    # Layer 3: Entry point
    "SqlTag",
    "sql",
]
