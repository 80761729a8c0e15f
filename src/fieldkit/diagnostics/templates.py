"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Sequence

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Raise sites build a Diagnostic through one of these factories and pass it
    to the exception, which keeps messages testable and consistent.
    """

    # ------------------------------------------------------------------
    # Configuration (1000-1999)
    # ------------------------------------------------------------------

    @staticmethod
    def locale_table_invalid(field_name: str, expected: int, actual: int) -> Diagnostic:
        """Locale table list has the wrong number of entries.

        Args:
            field_name: Name of the locale table field (e.g. "months")
            expected: Required number of entries
            actual: Number of entries supplied

        Returns:
            Diagnostic for LOCALE_TABLE_INVALID
        """
        msg = f"Locale table '{field_name}' needs {expected} entries, got {actual}"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_TABLE_INVALID,
            message=msg,
            hint="Day lists start on Sunday; month lists start on January",
            subject=field_name,
        )

    @staticmethod
    def locale_unknown(locale_code: str) -> Diagnostic:
        """Locale code unknown to Babel and to the built-in tables.

        Args:
            locale_code: The unknown locale code

        Returns:
            Diagnostic for LOCALE_UNKNOWN
        """
        msg = f"Unknown locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=msg,
            hint="Use BCP 47 locale codes (e.g., 'en_GB', 'nl_NL', 'de_DE')",
            subject=locale_code,
        )

    @staticmethod
    def preset_unknown(country: str, known: Sequence[str]) -> Diagnostic:
        """Country preset not defined.

        Args:
            country: Requested country code
            known: Country codes with presets

        Returns:
            Diagnostic for PRESET_UNKNOWN
        """
        msg = f"No country preset for '{country}'"
        return Diagnostic(
            code=DiagnosticCode.PRESET_UNKNOWN,
            message=msg,
            hint=f"Known presets: {', '.join(known)}; or use CountryPreset.from_babel()",
            subject=country,
        )

    @staticmethod
    def candidate_formats_empty() -> Diagnostic:
        """No candidate formats configured for parsing."""
        return Diagnostic(
            code=DiagnosticCode.CANDIDATE_FORMATS_EMPTY,
            message="At least one candidate date format is required for parsing",
            hint="Include the canonical output format in the candidate list",
        )

    @staticmethod
    def first_day_of_week_invalid(value: object) -> Diagnostic:
        """First day of week outside 0 (Sunday) .. 6 (Saturday).

        Args:
            value: The rejected value

        Returns:
            Diagnostic for FIRST_DAY_OF_WEEK_INVALID
        """
        msg = f"first_day_of_week must be 0 (Sunday) to 6 (Saturday), got {value!r}"
        return Diagnostic(
            code=DiagnosticCode.FIRST_DAY_OF_WEEK_INVALID,
            message=msg,
            hint="Use fieldkit.enums.Weekday members",
            subject=repr(value),
        )

    @staticmethod
    def message_template_missing(key: str) -> Diagnostic:
        """Validation message template missing from the locale table.

        Args:
            key: Message key (e.g. "maxLength")

        Returns:
            Diagnostic for MESSAGE_TEMPLATE_MISSING
        """
        msg = f"Locale table has no message template for '{key}'"
        return Diagnostic(
            code=DiagnosticCode.MESSAGE_TEMPLATE_MISSING,
            message=msg,
            hint="Add the key to LocaleTable.messages",
            subject=key,
        )

    @staticmethod
    def grid_out_of_range(year: int, month: int) -> Diagnostic:
        """Calendar grid of a month would hold days outside years 1..9999.

        Args:
            year: Year of the month
            month: Month (0-based)

        Returns:
            Diagnostic for GRID_OUT_OF_RANGE
        """
        subject = f"{year:04d}-{month + 1:02d}"
        msg = f"Calendar grid for {subject} runs outside years 1..9999"
        return Diagnostic(
            code=DiagnosticCode.GRID_OUT_OF_RANGE,
            message=msg,
            hint="Only the first and last month of the range can overflow; show a month inside it",
            subject=subject,
        )

    # ------------------------------------------------------------------
    # Format strings (2000-2999)
    # ------------------------------------------------------------------

    @staticmethod
    def format_token_unknown(token: str, format_string: str) -> Diagnostic:
        """Format string contains a letter run with no mapping.

        Args:
            token: The offending run (e.g. "ddd")
            format_string: The full format string

        Returns:
            Diagnostic for FORMAT_TOKEN_UNKNOWN
        """
        msg = f"Unknown token '{token}' in format '{format_string}'"
        letter = token[0].lower()
        hints = {
            "d": "Day tokens are d or dd",
            "m": "Month tokens are m, mm, mmm (abbreviated name) or mmmmm (full name)",
            "y": "Year tokens are y, yy or yyyy",
        }
        return Diagnostic(
            code=DiagnosticCode.FORMAT_TOKEN_UNKNOWN,
            message=msg,
            hint=hints.get(letter),
            subject=format_string,
        )

    @staticmethod
    def format_empty() -> Diagnostic:
        """Format string is empty."""
        return Diagnostic(
            code=DiagnosticCode.FORMAT_EMPTY,
            message="Date format string cannot be empty",
            hint="Use a format such as 'dd-mm-yyyy'",
        )

    # ------------------------------------------------------------------
    # Parsing (3000-3999)
    # ------------------------------------------------------------------

    @staticmethod
    def parse_date_failed(value: str, formats: Sequence[str]) -> Diagnostic:
        """No candidate format matched the input.

        Args:
            value: The input string that failed to parse
            formats: The candidate formats that were tried

        Returns:
            Diagnostic for PARSE_DATE_FAILED
        """
        msg = f"Failed to parse date '{value}': no candidate format matched"
        return Diagnostic(
            code=DiagnosticCode.PARSE_DATE_FAILED,
            message=msg,
            hint=f"Accepted formats: {', '.join(formats)}",
            subject=value,
        )

    @staticmethod
    def parse_date_invalid_type(value: object) -> Diagnostic:
        """Non-string input given to the date parser.

        Args:
            value: The rejected value

        Returns:
            Diagnostic for PARSE_DATE_INVALID_TYPE
        """
        msg = f"Expected string, got {type(value).__name__}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_DATE_INVALID_TYPE,
            message=msg,
            subject=str(value),
        )

    # ------------------------------------------------------------------
    # Validation rules (4000-4999)
    # ------------------------------------------------------------------

    @staticmethod
    def rule_not_found(key: str) -> Diagnostic:
        """Rule key not present in the registry.

        Args:
            key: The missing rule key

        Returns:
            Diagnostic for RULE_NOT_FOUND
        """
        msg = f"Validation rule '{key}' not found"
        return Diagnostic(
            code=DiagnosticCode.RULE_NOT_FOUND,
            message=msg,
            hint="Register the rule with RuleRegistry.register() first",
            subject=key,
        )

    @staticmethod
    def rule_failed(key: str, reason: str) -> Diagnostic:
        """Rule evaluator raised while checking a field.

        Args:
            key: The rule key
            reason: Exception text from the evaluator

        Returns:
            Diagnostic for RULE_FAILED
        """
        msg = f"Validation rule '{key}' failed: {reason}"
        return Diagnostic(
            code=DiagnosticCode.RULE_FAILED,
            message=msg,
            hint="Check the marker parameter and the rule implementation",
            subject=key,
        )
