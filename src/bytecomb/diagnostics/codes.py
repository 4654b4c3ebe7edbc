"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for bytecomb exceptions.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = ["Diagnostic", "DiagnosticCode"]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Parse outcome errors (NoMatch surfaced to callers)
        2000-2999: Memory errors (allocation, release, leaks)
        3000-3999: Grammar construction errors (forward declarations)
    """

    # Parse outcome errors (1000-1999)
    NO_MATCH = 1001
    UNCONSUMED_INPUT = 1002

    # Memory errors (2000-2999)
    ALLOCATION_LIMIT = 2001
    SEQUENCE_ITEM_LIMIT = 2002
    FOREIGN_RELEASE = 2003
    DOUBLE_RELEASE = 2004
    SEQUENCE_FINALIZED = 2005
    ALLOCATOR_LEAK = 2006

    # Grammar construction errors (3000-3999)
    FORWARD_UNDEFINED = 3001
    FORWARD_REDEFINED = 3002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler error.

        Example output:
            error[ALLOCATION_LIMIT]: Allocator limit of 4 live sequences reached
              = help: Release finalized sequences or raise AllocatorLimits.max_live

        Returns:
            Formatted error message
        """
        lines = [f"error[{self.code.name}]: {self.message}"]
        if self.hint:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
