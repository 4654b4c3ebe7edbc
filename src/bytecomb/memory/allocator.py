"""Growable sequences and the allocators that hand them out.

Only the collecting repetitions (zero_or_more, one_or_more) allocate. They
take an Allocator at construction time, acquire one GrowableSequence per
parse call, and give it back once it is finalized or the parse aborts.

Ownership rules:
    - allocate() transfers a fresh, empty sequence to the caller
    - finalize() copies the items out into an immutable tuple
    - release() returns the sequence to its allocator; it is then unusable
    - the allocator that allocated a sequence is the only one that may release it

Thread Safety:
    HeapAllocator keeps no shared state. TrackingAllocator guards its
    bookkeeping with a lock. A GrowableSequence itself is private to the
    parse call that acquired it.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from typing import Any, Protocol, runtime_checkable

from bytecomb.diagnostics import (
    AllocationError,
    AllocatorLeakError,
    ErrorTemplate,
    ReleaseError,
    SequenceFinalizedError,
)

from .config import AllocatorLimits

__all__ = ["Allocator", "GrowableSequence", "HeapAllocator", "TrackingAllocator"]

logger = logging.getLogger(__name__)


class GrowableSequence[T]:
    """Append-only sequence owned by the allocator that created it.

    Attributes:
        owner: Allocator that allocated this sequence
    """

    __slots__ = ("_finalized", "_items", "_max_items", "_released", "owner")

    def __init__(self, owner: Allocator, max_items: int | None = None) -> None:
        self.owner = owner
        self._items: list[T] = []
        self._max_items = max_items
        self._finalized = False
        self._released = False

    @property
    def is_released(self) -> bool:
        """True once the owning allocator took the sequence back."""
        return self._released

    @property
    def is_finalized(self) -> bool:
        """True once finalize() handed the items out."""
        return self._finalized

    def push(self, item: T) -> GrowableSequence[T]:
        """Append item and return self, so push can serve as a fold step.

        Raises:
            SequenceFinalizedError: If finalized or released
            AllocationError: If the owner's item limit would be exceeded
        """
        if self._finalized or self._released:
            raise SequenceFinalizedError(ErrorTemplate.sequence_finalized("push to"))
        if self._max_items is not None and len(self._items) >= self._max_items:
            raise AllocationError(ErrorTemplate.sequence_item_limit(self._max_items))
        self._items.append(item)
        return self

    def finalize(self) -> tuple[T, ...]:
        """Move the items into an immutable tuple.

        Raises:
            SequenceFinalizedError: If already finalized or released
        """
        if self._finalized or self._released:
            raise SequenceFinalizedError(ErrorTemplate.sequence_finalized("finalize"))
        self._finalized = True
        items = tuple(self._items)
        self._items.clear()
        return items

    def _mark_released(self) -> None:
        self._released = True
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        state = "released" if self._released else "finalized" if self._finalized else "open"
        return f"<GrowableSequence {state} items={len(self._items)}>"


@runtime_checkable
class Allocator(Protocol):
    """Capability that hands out and takes back growable sequences."""

    def allocate(self) -> GrowableSequence[Any]:
        """Return a fresh, empty sequence owned by this allocator."""
        ...

    def release(self, seq: GrowableSequence[Any]) -> None:
        """Take seq back. It must not be used afterwards."""
        ...


def _check_release(allocator: Allocator, seq: GrowableSequence[Any]) -> None:
    if seq.owner is not allocator:
        raise ReleaseError(ErrorTemplate.foreign_release())
    if seq.is_released:
        raise ReleaseError(ErrorTemplate.double_release())


class HeapAllocator:
    """Default allocator: unbounded list-backed sequences, no bookkeeping."""

    __slots__ = ()

    def allocate(self) -> GrowableSequence[Any]:
        return GrowableSequence(self)

    def release(self, seq: GrowableSequence[Any]) -> None:
        """Take seq back.

        Raises:
            ReleaseError: If seq belongs to another allocator or was released
        """
        _check_release(self, seq)
        seq._mark_released()  # noqa: SLF001

    def __repr__(self) -> str:
        return "HeapAllocator()"


class TrackingAllocator:
    """Allocator that counts outstanding sequences and enforces limits.

    Use it in tests to prove that every parse, including aborted ones,
    gives its sequences back, or in production to cap memory spent on
    repetition results.

    Example:
        >>> allocator = TrackingAllocator()
        >>> seq = allocator.allocate()
        >>> allocator.live_count
        1
        >>> allocator.release(seq)
        >>> allocator.assert_no_leaks()
    """

    __slots__ = ("_live", "_lock", "_total", "limits")

    def __init__(self, limits: AllocatorLimits | None = None) -> None:
        self.limits = limits or AllocatorLimits()
        self._live: set[GrowableSequence[Any]] = set()
        self._total = 0
        self._lock = threading.Lock()

    @property
    def live_count(self) -> int:
        """Number of sequences allocated and not yet released."""
        with self._lock:
            return len(self._live)

    @property
    def total_allocations(self) -> int:
        """Number of successful allocate() calls so far."""
        with self._lock:
            return self._total

    def allocate(self) -> GrowableSequence[Any]:
        """Return a fresh sequence.

        Raises:
            AllocationError: If limits.max_live sequences are outstanding
        """
        with self._lock:
            if len(self._live) >= self.limits.max_live:
                logger.debug(
                    "Allocation refused: %d live sequences (limit %d)",
                    len(self._live),
                    self.limits.max_live,
                )
                raise AllocationError(ErrorTemplate.allocation_limit(self.limits.max_live))
            seq: GrowableSequence[Any] = GrowableSequence(self, self.limits.max_items)
            self._live.add(seq)
            self._total += 1
            return seq

    def release(self, seq: GrowableSequence[Any]) -> None:
        """Take seq back.

        Raises:
            ReleaseError: If seq belongs to another allocator or was released
        """
        with self._lock:
            _check_release(self, seq)
            self._live.discard(seq)
            seq._mark_released()  # noqa: SLF001

    def assert_no_leaks(self) -> None:
        """Check that every allocated sequence was released.

        Raises:
            AllocatorLeakError: If any sequence is still outstanding
        """
        live = self.live_count
        if live:
            logger.warning("%d sequence(s) leaked from %r", live, self)
            raise AllocatorLeakError(ErrorTemplate.allocator_leak(live))

    def __repr__(self) -> str:
        return f"TrackingAllocator(limits={self.limits!r})"
