"""Identifier and raw-text values for fragments"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Identifier:
    """Quoted, dot-separated SQL name such as "schema"."table"

    Dots always separate path segments. Each segment is stripped of
    surrounding whitespace and of every double quote before being quoted,
    so already-quoted names come out the same as bare ones.
    """

    name: str

    @property
    def parts(self) -> tuple[str, ...]:
        """Cleaned, unquoted path segments"""
        return tuple(
            segment.strip().replace('"', "")
            for segment in str(self.name).split(".")
        )

    def render(self) -> str:
        """Quoted form for use in SQL

        Example:
            >>> Identifier("public.users").render()
            '"public"."users"'
            >>> Identifier('a".b').render()
            '"a"."b"'
        """
        return ".".join(f'"{part}"' for part in self.parts)

    @classmethod
    def from_parts(cls, *parts: str) -> 'Identifier':
        """Create an Identifier from individual segments

        Example:
            >>> Identifier.from_parts("public", "users").render()
            '"public"."users"'
        """
        return cls(".".join(parts))

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class Raw:
    """Text spliced into the query verbatim: no quoting, no parameter

    The caller is responsible for the safety of the value.
    """

    value: Union[str, int, float]

    def render(self) -> str:
        """String form of the wrapped value"""
        if isinstance(self.value, str):
            return self.value
        return str(self.value)

    def __str__(self) -> str:
        return self.render()
