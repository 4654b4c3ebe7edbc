"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Keeps messages testable and documents every error case in one place.
    """

    @staticmethod
    def no_match(parser_name: str) -> Diagnostic:
        """Parser did not match its input.

        Args:
            parser_name: Name of the top-level parser

        Returns:
            Diagnostic for NO_MATCH
        """
        return Diagnostic(
            code=DiagnosticCode.NO_MATCH,
            message=f"Parser {parser_name} did not match the input",
        )

    @staticmethod
    def unconsumed_input(parser_name: str, remaining: int) -> Diagnostic:
        """Parser matched but left input behind.

        Args:
            parser_name: Name of the top-level parser
            remaining: Number of unconsumed bytes

        Returns:
            Diagnostic for UNCONSUMED_INPUT
        """
        return Diagnostic(
            code=DiagnosticCode.UNCONSUMED_INPUT,
            message=f"Parser {parser_name} left {remaining} byte(s) unconsumed",
            hint="Use parse() or run() to accept a partial match",
        )

    @staticmethod
    def allocation_limit(max_live: int) -> Diagnostic:
        """Too many growable sequences outstanding."""
        return Diagnostic(
            code=DiagnosticCode.ALLOCATION_LIMIT,
            message=f"Allocator limit of {max_live} live sequences reached",
            hint="Release finalized sequences or raise AllocatorLimits.max_live",
        )

    @staticmethod
    def sequence_item_limit(max_items: int) -> Diagnostic:
        """Growable sequence would exceed its item limit."""
        return Diagnostic(
            code=DiagnosticCode.SEQUENCE_ITEM_LIMIT,
            message=f"Growable sequence limit of {max_items} items exceeded",
            hint="Raise AllocatorLimits.max_items",
        )

    @staticmethod
    def foreign_release() -> Diagnostic:
        """Sequence released to an allocator that did not allocate it."""
        return Diagnostic(
            code=DiagnosticCode.FOREIGN_RELEASE,
            message="Sequence was not allocated by this allocator",
        )

    @staticmethod
    def double_release() -> Diagnostic:
        """Sequence released twice."""
        return Diagnostic(
            code=DiagnosticCode.DOUBLE_RELEASE,
            message="Sequence was already released",
        )

    @staticmethod
    def sequence_finalized(operation: str) -> Diagnostic:
        """Operation on a sequence that was finalized or released.

        Args:
            operation: Name of the rejected operation

        Returns:
            Diagnostic for SEQUENCE_FINALIZED
        """
        return Diagnostic(
            code=DiagnosticCode.SEQUENCE_FINALIZED,
            message=f"Cannot {operation} a finalized or released sequence",
        )

    @staticmethod
    def allocator_leak(live: int) -> Diagnostic:
        """Sequences still outstanding when a leak check ran."""
        return Diagnostic(
            code=DiagnosticCode.ALLOCATOR_LEAK,
            message=f"{live} sequence(s) allocated but never released",
            hint="Release every sequence, including those from aborted parses",
        )

    @staticmethod
    def forward_undefined(name: str) -> Diagnostic:
        """Forward parser used before define()."""
        return Diagnostic(
            code=DiagnosticCode.FORWARD_UNDEFINED,
            message=f"Forward parser {name} was used before it was defined",
            hint="Call define() once the grammar is complete",
        )

    @staticmethod
    def forward_redefined(name: str) -> Diagnostic:
        """Forward parser defined twice."""
        return Diagnostic(
            code=DiagnosticCode.FORWARD_REDEFINED,
            message=f"Forward parser {name} is already defined",
        )
