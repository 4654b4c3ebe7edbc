"""Structural combinators: ordered AND (sequence) and ordered OR (choice).

Both short-circuit. Because inputs are immutable views, a failed
alternative leaves nothing behind for the next one to trip over: every
alternative of a choice sees the original view.
"""

from __future__ import annotations

import logging
from typing import Any

from bytecomb.core import ByteView, ParseResult, Parser

__all__ = ["Choice", "Sequence", "choice", "sequence"]

logger = logging.getLogger(__name__)


class Sequence(Parser[tuple[Any, ...]]):
    """Run parsers one after another, threading the tail forward.

    Matches only if every child matches; the value is the tuple of child
    values in order. The first no-match stops the sequence.
    """

    __slots__ = ("parsers",)

    def __init__(self, parsers: tuple[Parser[Any], ...]) -> None:
        super().__init__(f"sequence({', '.join(p.name for p in parsers)})")
        self.parsers = parsers

    def parse(self, view: ByteView) -> ParseResult[tuple[Any, ...]] | None:
        values: list[Any] = []
        tail = view
        for parser in self.parsers:
            result = parser.parse(tail)
            if result is None:
                return None
            values.append(result.value)
            tail = result.tail
        return ParseResult(tuple(values), tail)


class Choice[T](Parser[T]):
    """Try alternatives in order on the same input; first match wins.

    Only a no-match moves on to the next alternative. Exceptions raised
    by an alternative propagate at once and later alternatives never run.
    """

    __slots__ = ("parsers",)

    def __init__(self, parsers: tuple[Parser[T], ...]) -> None:
        super().__init__(f"choice({', '.join(p.name for p in parsers)})")
        self.parsers = parsers

    def parse(self, view: ByteView) -> ParseResult[T] | None:
        for parser in self.parsers:
            result = parser.parse(view)
            if result is not None:
                return result
        return None


def sequence(*parsers: Parser[Any]) -> Sequence:
    """Ordered, heterogeneous AND of parsers.

    Args:
        *parsers: Parsers to run in order; each sees the previous one's tail

    Returns:
        Parser producing the tuple of all child values. With no parsers it
        always matches, consumes nothing, and produces ``()``.

    Example:
        >>> from bytecomb import string
        >>> result = sequence(string("ab"), string("c")).run(b"abcd")
        >>> [bytes(v) for v in result.value], result.tail
        ([b'ab', b'c'], ByteView(b'd'))
    """
    return Sequence(parsers)


def choice[T](*parsers: Parser[T]) -> Choice[T]:
    """Ordered alternation over parsers sharing one result type.

    Args:
        *parsers: Alternatives, tried left to right on the original input

    Returns:
        Parser returning the first alternative's match unchanged, or None
        if every alternative fails to match
    """
    if not parsers:
        logger.warning("choice() built with no alternatives; it never matches")
    return Choice(parsers)
