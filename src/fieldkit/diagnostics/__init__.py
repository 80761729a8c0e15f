"""Diagnostic system for fieldkit errors.

Provides structured error diagnostics with codes and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory
from .errors import (
    ConfigurationError,
    FieldkitError,
    FormatError,
    ParseError,
    RuleError,
)
from .templates import ErrorTemplate

__all__ = [
    "ConfigurationError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
    "ErrorTemplate",
    "FieldkitError",
    "FormatError",
    "ParseError",
    "RuleError",
]
