"""Diagnostic system for bytecomb errors.

Provides structured error diagnostics with codes and hints.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    AllocationError,
    AllocatorLeakError,
    BytecombError,
    ForwardRedefinitionError,
    HardError,
    NoMatchError,
    ReleaseError,
    SequenceFinalizedError,
    UndefinedForwardError,
)
from .templates import ErrorTemplate

__all__ = [
    "AllocationError",
    "AllocatorLeakError",
    "BytecombError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "ForwardRedefinitionError",
    "HardError",
    "NoMatchError",
    "ReleaseError",
    "SequenceFinalizedError",
    "UndefinedForwardError",
]
