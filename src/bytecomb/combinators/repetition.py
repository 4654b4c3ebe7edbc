"""Repetition: left folds over repeated matches, and the collecting variants.

The fold loop applies its parser until the parser returns no match; that is
the only way the loop ends normally. A parser that can match without
consuming input therefore loops forever inside a fold. Callers must only
repeat parsers that consume at least one byte on every match; the fold does
not check for progress.

Anything raised by the parser, by combine, or by init aborts the fold. The
partial accumulator is never returned; if an on_abort hook was given, it
receives the accumulator first so resources held by it can be released.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from bytecomb.core import ByteView, ParseResult, Parser
from bytecomb.memory import Allocator, GrowableSequence

from .transform import map_

__all__ = [
    "Fold",
    "fold_one_or_more",
    "fold_zero_or_more",
    "one_or_more",
    "zero_or_more",
]

logger = logging.getLogger(__name__)


class Fold[T, A](Parser[A]):
    """Left fold over consecutive matches of a parser.

    Attributes:
        parser: Parser applied repeatedly
        combine: Step function (accumulator, value) -> accumulator
        init: Zero-argument factory for a fresh seed, called once per parse
        on_abort: Optional cleanup hook receiving the partial accumulator
        at_least_one: If True, no match on the first attempt is a no match
    """

    __slots__ = ("at_least_one", "combine", "init", "on_abort", "parser")

    def __init__(
        self,
        parser: Parser[T],
        combine: Callable[[A, T], A],
        init: Callable[[], A],
        *,
        at_least_one: bool,
        on_abort: Callable[[A], object] | None = None,
    ) -> None:
        kind = "fold_one_or_more" if at_least_one else "fold_zero_or_more"
        super().__init__(f"{kind}({parser.name})")
        self.parser = parser
        self.combine = combine
        self.init = init
        self.on_abort = on_abort
        self.at_least_one = at_least_one

    def parse(self, view: ByteView) -> ParseResult[A] | None:
        first: ParseResult[T] | None = None
        if self.at_least_one:
            first = self.parser.parse(view)
            if first is None:
                return None

        accumulator = self.init()
        tail = view
        try:
            if first is not None:
                accumulator = self.combine(accumulator, first.value)
                tail = first.tail
            while (result := self.parser.parse(tail)) is not None:
                accumulator = self.combine(accumulator, result.value)
                tail = result.tail
        except BaseException:
            if self.on_abort is not None:
                logger.debug("%s aborted; handing partial accumulator to on_abort", self.name)
                self.on_abort(accumulator)
            raise
        return ParseResult(accumulator, tail)


def fold_zero_or_more[T, A](
    parser: Parser[T],
    combine: Callable[[A, T], A],
    init: Callable[[], A],
    *,
    on_abort: Callable[[A], object] | None = None,
) -> Fold[T, A]:
    """Fold zero or more consecutive matches of parser into an accumulator.

    Args:
        parser: Parser to repeat; must consume input on every match
        combine: Called as combine(accumulator, value) after each match
        init: Called once per parse to create the seed accumulator
        on_abort: Called with the partial accumulator if the fold aborts

    Returns:
        Parser that always matches. With no matches the value is init()
        and the tail is the input unchanged.

    Example:
        >>> from bytecomb import string
        >>> count = fold_zero_or_more(string("ab"), lambda n, v: n + len(v), lambda: 0)
        >>> count.run(b"abababcd")
        ParseResult(value=6, tail=ByteView(b'cd'))
    """
    return Fold(parser, combine, init, at_least_one=False, on_abort=on_abort)


def fold_one_or_more[T, A](
    parser: Parser[T],
    combine: Callable[[A, T], A],
    init: Callable[[], A],
    *,
    on_abort: Callable[[A], object] | None = None,
) -> Fold[T, A]:
    """Fold one or more consecutive matches of parser into an accumulator.

    Same as fold_zero_or_more, except that no match on the first attempt
    makes the whole fold a no match. init() is not called in that case.
    """
    return Fold(parser, combine, init, at_least_one=True, on_abort=on_abort)


def _push[T](seq: GrowableSequence[T], item: T) -> GrowableSequence[T]:
    return seq.push(item)


def _collect[T](
    fold: Callable[..., Fold[T, GrowableSequence[T]]],
    allocator: Allocator,
    parser: Parser[T],
) -> Parser[tuple[T, ...]]:
    def finalize(seq: GrowableSequence[T]) -> tuple[T, ...]:
        try:
            return seq.finalize()
        finally:
            allocator.release(seq)

    return map_(fold(parser, _push, allocator.allocate, on_abort=allocator.release), finalize)


def zero_or_more[T](allocator: Allocator, parser: Parser[T]) -> Parser[tuple[T, ...]]:
    """Collect zero or more consecutive matches of parser into a tuple.

    Each parse call acquires one growable sequence from allocator, pushes
    every value into it, then finalizes it into a tuple and releases it.
    If the parse aborts with an exception, the sequence is released before
    the exception propagates.

    Example:
        >>> from bytecomb import string
        >>> from bytecomb.memory import HeapAllocator
        >>> result = zero_or_more(HeapAllocator(), string("ab")).run(b"ababcd")
        >>> [bytes(v) for v in result.value], result.tail
        ([b'ab', b'ab'], ByteView(b'cd'))
    """
    return _collect(fold_zero_or_more, allocator, parser)


def one_or_more[T](allocator: Allocator, parser: Parser[T]) -> Parser[tuple[T, ...]]:
    """Collect one or more consecutive matches of parser into a tuple.

    No match on the first attempt is a no match, and nothing is allocated.
    """
    return _collect(fold_one_or_more, allocator, parser)

