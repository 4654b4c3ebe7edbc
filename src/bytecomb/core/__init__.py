"""Core parsing model: input views, parse results, and the parser base.

This package is the leaf of the dependency graph:

    diagnostics <- core <- memory, combinators

Exports:
    ByteView: Immutable zero-copy window over a bytes object
    ParseResult: Matched outcome (value plus remaining input)
    Parser: Base class every primitive and combinator derives from
    FnParser: Parser backed by a plain function
    Forward: Forward declaration for recursive grammars

Python 3.13+.
"""

from .parser import FnParser, Forward, ParseFn, Parser
from .view import ByteView, ParseResult

__all__ = ["ByteView", "FnParser", "Forward", "ParseFn", "ParseResult", "Parser"]
