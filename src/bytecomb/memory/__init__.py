"""Memory layer: growable sequences and allocators for collecting repetitions.

Exports:
    Allocator: Protocol for allocate()/release() capabilities
    GrowableSequence: Append-only sequence finalized into a tuple
    HeapAllocator: Default unbounded allocator
    TrackingAllocator: Allocator with live-count tracking and limits
    AllocatorLimits: Frozen limits configuration for TrackingAllocator

Python 3.13+.
"""

from .allocator import Allocator, GrowableSequence, HeapAllocator, TrackingAllocator
from .config import AllocatorLimits

__all__ = [
    "Allocator",
    "AllocatorLimits",
    "GrowableSequence",
    "HeapAllocator",
    "TrackingAllocator",
]
