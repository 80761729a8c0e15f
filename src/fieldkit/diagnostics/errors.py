"""Exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, ErrorCategory

__all__ = [
    "ConfigurationError",
    "FieldkitError",
    "FormatError",
    "ParseError",
    "RuleError",
]


class FieldkitError(Exception):
    """Base exception for all fieldkit errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
        category: Error category for log aggregation
    """

    category: ErrorCategory = ErrorCategory.CONFIGURATION

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize FieldkitError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class ConfigurationError(FieldkitError):
    """Malformed configuration detected while constructing a widget.

    Examples:
    - Locale table with 11 month names
    - Empty list of candidate date formats
    - first_day_of_week outside 0..6
    """

    category = ErrorCategory.CONFIGURATION


class FormatError(FieldkitError):
    """Format string contains a token run with no defined meaning.

    Raised at configuration time (tokenizing ``"ddd-mm"`` fails because a
    run of three ``d`` characters maps to nothing).

    Attributes:
        format_string: The offending format string
    """

    category = ErrorCategory.FORMAT

    def __init__(self, message: str | Diagnostic, *, format_string: str = "") -> None:
        super().__init__(message)
        self.format_string = format_string


class ParseError(FieldkitError):
    """No candidate format matched a date string.

    Returned inside the ``(result, errors)`` tuple of
    :func:`fieldkit.dates.parse_date`; never raised into UI flow.

    Attributes:
        input_value: The string that failed to parse
        formats: The candidate formats that were tried, in order
    """

    category = ErrorCategory.PARSE

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        input_value: str = "",
        formats: tuple[str, ...] = (),
    ) -> None:
        """Initialize ParseError.

        Args:
            message: Error message string OR Diagnostic object
            input_value: The string that failed to parse
            formats: Candidate formats tried
        """
        super().__init__(message)
        self.input_value = input_value
        self.formats = formats


class RuleError(FieldkitError):
    """Validation rule lookup or evaluation failed.

    Attributes:
        rule_key: Key of the rule involved
    """

    category = ErrorCategory.RULE

    def __init__(self, message: str | Diagnostic, *, rule_key: str = "") -> None:
        super().__init__(message)
        self.rule_key = rule_key
