"""Result transformation."""

from __future__ import annotations

from collections.abc import Callable

from bytecomb.core import ByteView, ParseResult, Parser

__all__ = ["Map", "map_"]


class Map[A, B](Parser[B]):
    """Apply a function to the value of a successful match.

    The tail is passed through untouched. A no-match is returned as is
    without calling the function, and whatever the function raises is
    never turned into a no-match.
    """

    __slots__ = ("fn", "parser")

    def __init__(self, parser: Parser[A], fn: Callable[[A], B]) -> None:
        super().__init__(f"map({parser.name}, {getattr(fn, '__name__', 'fn')})")
        self.parser = parser
        self.fn = fn

    def parse(self, view: ByteView) -> ParseResult[B] | None:
        result = self.parser.parse(view)
        if result is None:
            return None
        return ParseResult(self.fn(result.value), result.tail)


def map_[A, B](parser: Parser[A], fn: Callable[[A], B]) -> Map[A, B]:
    """Transform the value produced by parser with fn.

    Named with a trailing underscore to leave the builtin map alone.

    Example:
        >>> from bytecomb import string
        >>> map_(string("abc"), len).run(b"abcd")
        ParseResult(value=3, tail=ByteView(b'd'))
    """
    return Map(parser, fn)
