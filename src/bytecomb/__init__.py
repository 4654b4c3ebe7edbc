"""bytecomb - parser combinators over immutable byte views.

Composable building blocks for recursive-descent parsers. Every parser is a
pure function from a ByteView to a ParseResult (value plus remaining input),
None for "no match here", or a raised exception for unrecoverable errors.

Public API:
    string, empty - Primitive parsers
    sequence, choice - Ordered AND / ordered OR with backtracking
    map_ - Transform a matched value
    optional, not_followed_by, followed_by - Optional matching and lookahead
    fold_zero_or_more, fold_one_or_more - Generic repetition folds
    zero_or_more, one_or_more - Repetitions collecting into tuples
    Parser, FnParser, Forward - Parser base, function adapter, recursion
    ByteView, ParseResult - Input views and matched outcomes
    HeapAllocator, TrackingAllocator - Allocators for collecting repetitions

Exceptions:
    BytecombError - Base exception class
    HardError - Unrecoverable parse errors, never caught by combinators
    NoMatchError - Raised by Parser.parse_all on no match or leftover input

Submodules:
    bytecomb.core - Input views and the parser base
    bytecomb.combinators - All combinators and their node classes
    bytecomb.memory - Growable sequences, allocators, and limits
    bytecomb.diagnostics - Error types, codes, and message templates
"""

from .combinators import (
    choice,
    empty,
    fold_one_or_more,
    fold_zero_or_more,
    followed_by,
    map_,
    not_followed_by,
    one_or_more,
    optional,
    sequence,
    string,
    zero_or_more,
)
from .core import ByteView, FnParser, Forward, ParseResult, Parser
from .diagnostics import BytecombError, HardError, NoMatchError
from .memory import HeapAllocator, TrackingAllocator

try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("bytecomb")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ByteView",
    "BytecombError",
    "FnParser",
    "Forward",
    "HardError",
    "HeapAllocator",
    "NoMatchError",
    "ParseResult",
    "Parser",
    "TrackingAllocator",
    "__version__",
    "choice",
    "empty",
    "fold_one_or_more",
    "fold_zero_or_more",
    "followed_by",
    "map_",
    "not_followed_by",
    "one_or_more",
    "optional",
    "sequence",
    "string",
    "zero_or_more",
]
