"""Immutable byte views and parse results.

Implements the immutable input-view pattern every parser works on.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - ByteView is immutable (frozen dataclass)
    - Sub-views are offset arithmetic over the same bytes object, never copies
    - Many views may alias one buffer at the same time
    - A parser's result tail is always a suffix of its input view

Pattern Reference:
    - Rust nom parser combinator library (&[u8] slices)
    - Haskell Parsec
"""

from __future__ import annotations

from collections.abc import Buffer
from dataclasses import dataclass

__all__ = ["ByteView", "ParseResult"]


@dataclass(frozen=True, slots=True, eq=False)
class ByteView:
    """Immutable window ``[start, stop)`` over a bytes object.

    Key Design Decisions:
        1. Frozen dataclass - Immutability enforced by Python
        2. Slots - Views are created on every successful match
        3. Offsets only - take() and drop() never copy the buffer
        4. Content equality - a view compares equal to bytes with the same content

    Example:
        >>> view = ByteView.of(b"abcd")
        >>> head, tail = view.take(2), view.drop(2)
        >>> head == b"ab", tail == b"cd"
        (True, True)
        >>> tail.data is view.data  # Same buffer, no copy
        True
    """

    data: bytes
    start: int
    stop: int

    @classmethod
    def of(cls, source: ByteView | Buffer) -> ByteView:
        """Wrap raw bytes-like input in a view spanning all of it.

        Args:
            source: bytes, bytearray, memoryview, or an existing ByteView

        Returns:
            View over the whole input. An existing ByteView is returned as is.

        Raises:
            TypeError: If source is not bytes-like (str must be encoded first)

        Note:
            bytearray and memoryview are copied once into an immutable bytes
            object. Views derived from the result never copy again.
        """
        if isinstance(source, ByteView):
            return source
        if isinstance(source, bytes):
            return cls(source, 0, len(source))
        if isinstance(source, (bytearray, memoryview)):
            data = bytes(source)
            return cls(data, 0, len(data))
        msg = f"Expected bytes-like input, got {type(source).__name__}"
        raise TypeError(msg)

    def __len__(self) -> int:
        return self.stop - self.start

    @property
    def is_empty(self) -> bool:
        """True if the view holds no bytes."""
        return self.stop <= self.start

    @property
    def memory(self) -> memoryview:
        """Zero-copy memoryview of the viewed bytes."""
        return memoryview(self.data)[self.start : self.stop]

    def tobytes(self) -> bytes:
        """Copy the viewed bytes out into a new bytes object."""
        return self.data[self.start : self.stop]

    def __bytes__(self) -> bytes:
        return self.tobytes()

    def startswith(self, prefix: Buffer) -> bool:
        """Check whether the view begins with prefix, without copying."""
        return self.data.startswith(prefix, self.start, self.stop)

    def take(self, n: int) -> ByteView:
        """Return the view of the first n bytes (clamped to the view length).

        Raises:
            ValueError: If n is negative
        """
        if n < 0:
            msg = f"Cannot take a negative number of bytes: {n}"
            raise ValueError(msg)
        return ByteView(self.data, self.start, min(self.start + n, self.stop))

    def drop(self, n: int) -> ByteView:
        """Return the view without its first n bytes (clamped to the view length).

        Raises:
            ValueError: If n is negative
        """
        if n < 0:
            msg = f"Cannot drop a negative number of bytes: {n}"
            raise ValueError(msg)
        return ByteView(self.data, min(self.start + n, self.stop), self.stop)

    def is_suffix_of(self, other: ByteView) -> bool:
        """Check whether this view is a suffix of other over the same buffer."""
        return (
            self.data is other.data
            and self.stop == other.stop
            and other.start <= self.start <= other.stop
        )

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ByteView):
            return self.memory == other.memory
        if isinstance(other, (bytes, bytearray, memoryview)):
            return self.memory == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.tobytes())

    def __repr__(self) -> str:
        return f"ByteView({self.tobytes()!r})"


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Matched outcome: the parsed value and the remaining input.

    Type Parameters:
        T: The type of the parsed value

    Pattern:
        Every parser has signature:
            def parse(view: ByteView) -> ParseResult[T] | None

        None is the no-match signal. Anything unrecoverable is raised.

    Example:
        >>> view = ByteView.of(b"hello")
        >>> result = ParseResult(view.take(1), view.drop(1))
        >>> result.value == b"h", result.tail == b"ello"
        (True, True)
    """

    value: T
    tail: ByteView
