"""Dot-notation key path parsing.

A key expression such as ``users.*.roles.{last}`` is split on ``.`` into
ordered segments. Three tokens are reserved:

* ``*`` fans out over every element of the current container
* ``{first}`` selects the first key of the current container
* ``{last}`` selects the last key of the current container

A backslash turns a token back into a literal key, so ``\\*`` addresses the
key literally named ``*``. Position tokens are structural markers only; the
accessor and mutator resolve them against whatever container they are
standing on when they reach the segment.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple, Union, overload

from arraykit.Types import ArrayKey


DELIMITER = '.'
WILDCARD = '*'
FIRST_TOKEN = '{first}'
LAST_TOKEN = '{last}'

ESCAPED_TOKENS = {
    '\\' + WILDCARD: WILDCARD,
    '\\' + FIRST_TOKEN: FIRST_TOKEN,
    '\\' + LAST_TOKEN: LAST_TOKEN,
}


class SegmentKind(Enum):
    """Kinds of key path segments."""
    LITERAL = 'literal'
    WILDCARD = 'wildcard'
    FIRST = 'first'
    LAST = 'last'


@dataclass(frozen=True)
class Segment:
    """A single step of a key path."""

    kind: SegmentKind
    key: ArrayKey
    raw: str

    @classmethod
    def parse(cls, raw: Union[str, int]) -> Segment:
        """Classify one raw segment of a key expression."""
        if isinstance(raw, int):
            return cls(SegmentKind.LITERAL, raw, str(raw))
        if raw == WILDCARD:
            return cls(SegmentKind.WILDCARD, raw, raw)
        if raw == FIRST_TOKEN:
            return cls(SegmentKind.FIRST, raw, raw)
        if raw == LAST_TOKEN:
            return cls(SegmentKind.LAST, raw, raw)
        if raw in ESCAPED_TOKENS:
            return cls(SegmentKind.LITERAL, ESCAPED_TOKENS[raw], raw)
        return cls(SegmentKind.LITERAL, raw, raw)

    @property
    def is_wildcard(self) -> bool:
        return self.kind is SegmentKind.WILDCARD

    @property
    def is_position(self) -> bool:
        """Whether the segment is ``{first}`` or ``{last}``."""
        return self.kind in (SegmentKind.FIRST, SegmentKind.LAST)

    def __str__(self) -> str:
        return self.raw


@dataclass(frozen=True)
class KeyPath:
    """Immutable ordered sequence of segments parsed from a key expression."""

    segments: Tuple[Segment, ...]

    @classmethod
    def parse(cls, expression: Union[str, int]) -> KeyPath:
        """Parse a dotted key expression.

        The delimiter itself cannot be escaped, and empty pieces (``a..b``)
        are kept as literal empty-string keys. An integer expression is a
        single literal segment.
        """
        if isinstance(expression, int):
            return cls((Segment.parse(expression),))

        return cls(tuple(Segment.parse(part) for part in expression.split(DELIMITER)))

    @property
    def head(self) -> Segment:
        return self.segments[0]

    def tail(self) -> KeyPath:
        """Everything after the first segment."""
        return KeyPath(self.segments[1:])

    def has_wildcard(self) -> bool:
        return any(segment.is_wildcard for segment in self.segments)

    def is_empty(self) -> bool:
        return not self.segments

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    @overload
    def __getitem__(self, index: int) -> Segment: ...

    @overload
    def __getitem__(self, index: slice) -> KeyPath: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[Segment, KeyPath]:
        if isinstance(index, slice):
            return KeyPath(self.segments[index])
        return self.segments[index]

    def __str__(self) -> str:
        return DELIMITER.join(segment.raw for segment in self.segments)


def parse(expression: Union[str, int]) -> KeyPath:
    """Helper function to parse a key expression."""
    return KeyPath.parse(expression)
