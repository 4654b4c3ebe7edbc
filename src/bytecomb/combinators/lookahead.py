"""Optional matching and lookahead.

optional() never fails. The lookahead pair checks whether a parser would
match at the current position without ever advancing it.
"""

from __future__ import annotations

from typing import Any

from bytecomb.core import ByteView, ParseResult, Parser

from .primitives import empty
from .structure import choice
from .transform import map_

__all__ = ["NotFollowedBy", "followed_by", "not_followed_by", "optional"]


def _identity[T](value: T) -> T | None:
    return value


def _nothing(_: None) -> None:
    return None


def optional[T](parser: Parser[T]) -> Parser[T | None]:
    """Match parser if possible, otherwise match nothing.

    Returns:
        Parser producing the child's value and tail on a match, or None
        with the original input when the child does not match. Exceptions
        from the child propagate.

    Note:
        A child that itself produces None is indistinguishable from an
        absent match by value; compare the tail to tell them apart.
    """
    return choice(map_(parser, _identity), map_(empty(), _nothing))


class NotFollowedBy(Parser[None]):
    """Negative lookahead: match, consuming nothing, iff the child does not."""

    __slots__ = ("parser",)

    def __init__(self, parser: Parser[Any]) -> None:
        super().__init__(f"not_followed_by({parser.name})")
        self.parser = parser

    def parse(self, view: ByteView) -> ParseResult[None] | None:
        if self.parser.parse(view) is not None:
            return None
        return ParseResult(None, view)


def not_followed_by(parser: Parser[Any]) -> NotFollowedBy:
    """Negative lookahead.

    Whatever the child would have consumed is discarded; the position never
    advances. Exceptions from the child propagate unchanged.

    Example:
        >>> from bytecomb import string
        >>> not_followed_by(string("ab")).run(b"cd")
        ParseResult(value=None, tail=ByteView(b'cd'))
        >>> not_followed_by(string("ab")).run(b"abcd") is None
        True
    """
    return NotFollowedBy(parser)


def followed_by(parser: Parser[Any]) -> NotFollowedBy:
    """Positive lookahead, by double negation.

    Matches with the input unchanged iff parser matches; never advances.
    """
    return not_followed_by(not_followed_by(parser))
