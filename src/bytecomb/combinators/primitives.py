"""Primitive parsers: literal byte prefixes and the zero-width identity."""

from __future__ import annotations

from collections.abc import Buffer

from bytecomb.constants import LITERAL_ENCODING
from bytecomb.core import ByteView, ParseResult, Parser

from .structure import sequence
from .transform import map_

__all__ = ["Literal", "empty", "string"]


class Literal(Parser[ByteView]):
    """Match an exact byte prefix.

    The value is a view of the matched prefix inside the input, so a match
    never copies. An empty literal matches everything and consumes nothing.
    """

    __slots__ = ("literal",)

    def __init__(self, literal: bytes) -> None:
        super().__init__(f"string({literal!r})")
        self.literal = literal

    def parse(self, view: ByteView) -> ParseResult[ByteView] | None:
        if not view.startswith(self.literal):
            return None
        size = len(self.literal)
        return ParseResult(view.take(size), view.drop(size))


def string(literal: str | Buffer) -> Literal:
    """Match literal as an exact prefix of the input.

    Args:
        literal: Bytes to match; a str is encoded as UTF-8 once, here

    Returns:
        Parser producing the matched prefix as a ByteView

    Raises:
        TypeError: If literal is neither str nor bytes-like
    """
    if isinstance(literal, str):
        return Literal(literal.encode(LITERAL_ENCODING))
    if isinstance(literal, (bytes, bytearray, memoryview)):
        return Literal(bytes(literal))
    msg = f"string() literal must be str or bytes-like, got {type(literal).__name__}"
    raise TypeError(msg)


def _unit(_: tuple[()]) -> None:
    return None


def empty() -> Parser[None]:
    """Zero-width parser: always matches, consumes nothing, produces None."""
    return map_(sequence(), _unit)
