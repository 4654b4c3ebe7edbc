"""Shared constants for bytecomb.

Centralized defaults used by the memory layer. Placing them here keeps
configuration dataclasses and allocators free of magic numbers.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Allocator limits
    "DEFAULT_MAX_LIVE_SEQUENCES",
    "DEFAULT_MAX_SEQUENCE_ITEMS",
    # Literal encoding
    "LITERAL_ENCODING",
]

# ============================================================================
# ALLOCATOR LIMITS
# ============================================================================

# Maximum number of growable sequences a TrackingAllocator hands out before
# they are released. Nested repetitions each hold one sequence per active
# level, so this also bounds repetition nesting under a tracking allocator.
DEFAULT_MAX_LIVE_SEQUENCES: int = 1024

# Maximum number of items a single growable sequence may hold.
DEFAULT_MAX_SEQUENCE_ITEMS: int = 1_000_000

# ============================================================================
# LITERALS
# ============================================================================

# Encoding applied to str literals passed to string().
LITERAL_ENCODING: str = "utf-8"
