"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages shared by the date format engine,
the calendar grid builder and the validation rule engine.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
]


class ErrorCategory(StrEnum):
    """Error categorization for fieldkit exceptions.

    Inherits from ``StrEnum`` so that ``str(category)`` yields the plain value
    (``"format"``, ``"parse"``, ...) in logs and serialized output.

    Categories:
        CONFIGURATION: Malformed configuration detected at construction time
        FORMAT: Format string uses a token shape with no defined meaning
        PARSE: Input string matched none of the candidate formats
        RULE: A validation rule failed to evaluate
    """

    CONFIGURATION = "configuration"
    FORMAT = "format"
    PARSE = "parse"
    RULE = "rule"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Configuration errors (locale tables, presets, widget options)
        2000-2999: Format string errors (tokenizer)
        3000-3999: Date parsing errors
        4000-4999: Validation rule errors
    """

    # Configuration errors (1000-1999)
    LOCALE_TABLE_INVALID = 1001
    LOCALE_UNKNOWN = 1002
    PRESET_UNKNOWN = 1003
    CANDIDATE_FORMATS_EMPTY = 1004
    FIRST_DAY_OF_WEEK_INVALID = 1005
    MESSAGE_TEMPLATE_MISSING = 1006
    GRID_OUT_OF_RANGE = 1007

    # Format string errors (2000-2999)
    FORMAT_TOKEN_UNKNOWN = 2001
    FORMAT_EMPTY = 2002

    # Parsing errors (3000-3999)
    PARSE_DATE_FAILED = 3001
    PARSE_DATE_INVALID_TYPE = 3002

    # Validation rule errors (4000-4999)
    RULE_NOT_FOUND = 4001
    RULE_FAILED = 4002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        subject: The offending value (format string, locale code, rule key)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    subject: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in compiler style.

        Example output:
            error[FORMAT_TOKEN_UNKNOWN]: Unknown token 'ddd' in format 'ddd-mm'
              = help: Use d or dd for days

        Returns:
            Formatted error message
        """
        severity = "warning" if self.severity == "warning" else "error"
        parts = [f"{severity}[{self.code.name}]: {self.message}"]
        if self.hint:
            parts.append(f"  = help: {self.hint}")
        return "\n".join(parts)
