"""Allocator configuration.

Provides a single frozen dataclass holding the limits a TrackingAllocator
enforces.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from bytecomb.constants import DEFAULT_MAX_LIVE_SEQUENCES, DEFAULT_MAX_SEQUENCE_ITEMS

__all__ = ["AllocatorLimits"]


@dataclass(frozen=True, slots=True)
class AllocatorLimits:
    """Immutable limits for TrackingAllocator.

    All fields have sensible defaults; ``AllocatorLimits()`` with no
    arguments is usable as is.

    Attributes:
        max_live: Maximum sequences allocated and not yet released
            (default: 1024). Exceeding it raises AllocationError.
        max_items: Maximum items one sequence may hold (default: 1000000).
            Exceeding it raises AllocationError from push().

    Example:
        >>> from bytecomb.memory import TrackingAllocator
        >>> allocator = TrackingAllocator(AllocatorLimits(max_live=4))
        >>> allocator.limits.max_live
        4
    """

    max_live: int = DEFAULT_MAX_LIVE_SEQUENCES
    max_items: int = DEFAULT_MAX_SEQUENCE_ITEMS

    def __post_init__(self) -> None:
        """Validate limits at construction time.

        Raises:
            ValueError: If max_live or max_items is not positive
        """
        if self.max_live <= 0:
            msg = f"max_live must be positive, got {self.max_live}"
            raise ValueError(msg)
        if self.max_items <= 0:
            msg = f"max_items must be positive, got {self.max_items}"
            raise ValueError(msg)
