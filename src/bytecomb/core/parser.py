"""Parser abstraction shared by every primitive and combinator.

A parser exposes one operation, ``parse(view) -> ParseResult[T] | None``:

- ParseResult: matched; ``tail`` is a suffix of ``view``
- None: no match here; the caller may backtrack
- raised exception: hard error; nothing catches it on the way up

Parsers are immutable once built and hold no per-call state, so one parser
instance can serve any number of parse calls from any number of threads.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Buffer, Callable

from bytecomb.diagnostics import (
    ErrorTemplate,
    ForwardRedefinitionError,
    NoMatchError,
    UndefinedForwardError,
)

from .view import ByteView, ParseResult

__all__ = ["FnParser", "Forward", "ParseFn", "Parser"]

type ParseFn[T] = Callable[[ByteView], ParseResult[T] | None]


class Parser[T](ABC):
    """Base class for all parsers.

    Subclasses implement parse() and must keep it pure: same view in,
    same outcome out, no state carried between calls.

    Attributes:
        name: Label used in repr() and error messages
    """

    __slots__ = ("name",)

    def __init__(self, name: str | None = None) -> None:
        self.name = name or type(self).__name__

    @abstractmethod
    def parse(self, view: ByteView) -> ParseResult[T] | None:
        """Run the parser on view.

        Args:
            view: Input to parse

        Returns:
            ParseResult on match, None on no match
        """

    def run(self, source: ByteView | Buffer) -> ParseResult[T] | None:
        """Parse raw bytes-like input (or a view) from its start."""
        return self.parse(ByteView.of(source))

    def parse_all(self, source: ByteView | Buffer) -> T:
        """Parse input that must be consumed completely.

        Args:
            source: bytes-like input or a ByteView

        Returns:
            The parsed value

        Raises:
            NoMatchError: If the parser did not match or left input behind
        """
        result = self.run(source)
        if result is None:
            raise NoMatchError(ErrorTemplate.no_match(self.name))
        if not result.tail.is_empty:
            remaining = len(result.tail)
            raise NoMatchError(
                ErrorTemplate.unconsumed_input(self.name, remaining),
                remaining=remaining,
            )
        return result.value

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"


class FnParser[T](Parser[T]):
    """Parser backed by a plain function.

    This is how custom primitives are written: return ParseResult on match,
    None on no match, and raise HardError for anything else.

    Example:
        >>> def digit(view):
        ...     if view.is_empty or not 0x30 <= view.data[view.start] <= 0x39:
        ...         return None
        ...     return ParseResult(view.take(1), view.drop(1))
        >>> FnParser(digit).run(b"7x").tail == b"x"
        True
    """

    __slots__ = ("_fn",)

    def __init__(self, fn: ParseFn[T], name: str | None = None) -> None:
        super().__init__(name or getattr(fn, "__name__", None))
        self._fn = fn

    def parse(self, view: ByteView) -> ParseResult[T] | None:
        return self._fn(view)


class Forward[T](Parser[T]):
    """Forward declaration for recursive grammars.

    Create it first, reference it while building the grammar, then bind it
    once with define(). Nesting depth is bounded by the interpreter's
    recursion limit; RecursionError propagates like any hard error.

    Example:
        >>> from bytecomb import choice, sequence, string
        >>> nested = Forward[object]("nested")
        >>> nested.define(choice(sequence(string("("), nested, string(")")), string("x")))
        >>> nested.parse_all(b"((x))") is not None
        True
    """

    __slots__ = ("_target",)

    def __init__(self, name: str | None = None) -> None:
        super().__init__(name)
        self._target: Parser[T] | None = None

    @property
    def is_defined(self) -> bool:
        """True once define() has bound a parser."""
        return self._target is not None

    def define(self, parser: Parser[T]) -> None:
        """Bind the parser this forward declaration stands for.

        Raises:
            ForwardRedefinitionError: If already defined
        """
        if self._target is not None:
            raise ForwardRedefinitionError(ErrorTemplate.forward_redefined(self.name))
        self._target = parser

    def parse(self, view: ByteView) -> ParseResult[T] | None:
        target = self._target
        if target is None:
            raise UndefinedForwardError(ErrorTemplate.forward_undefined(self.name))
        return target.parse(view)
