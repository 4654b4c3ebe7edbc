"""bytecomb exception hierarchy with structured diagnostics.

Two families sit under BytecombError:

- NoMatchError: a NoMatch surfaced to a caller that demanded a match
  (Parser.parse_all). Combinators never raise it; they return None.
- HardError: unrecoverable failures. No combinator catches these; they
  abort the whole parse and reach the top-level caller unchanged.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class BytecombError(Exception):
    """Base exception for all bytecomb errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize BytecombError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class NoMatchError(BytecombError):
    """Top-level parse demanded a full match and did not get one.

    Attributes:
        remaining: Unconsumed byte count, or None if the parser did not match
    """

    def __init__(self, message: str | Diagnostic, remaining: int | None = None) -> None:
        """Initialize NoMatchError.

        Args:
            message: Error message string OR Diagnostic object
            remaining: Unconsumed byte count when the parser matched partially
        """
        super().__init__(message)
        self.remaining = remaining


class HardError(BytecombError):
    """Unrecoverable parse failure.

    Raise this (or a subclass) from custom primitive parsers for anything
    that is not a plain "did not match here". Any other exception raised by
    user callbacks is treated the same way by every combinator.
    """


class AllocationError(HardError):
    """Allocator could not provide or grow a sequence."""


class ReleaseError(HardError):
    """Sequence released to the wrong allocator or released twice."""


class AllocatorLeakError(HardError):
    """Sequences were allocated and never released."""


class SequenceFinalizedError(HardError):
    """Growable sequence used after finalize() or release."""


class UndefinedForwardError(HardError):
    """Forward parser invoked before define()."""


class ForwardRedefinitionError(HardError):
    """Forward parser defined more than once."""
