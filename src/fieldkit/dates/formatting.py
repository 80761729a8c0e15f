"""Render CalendarDate values through a format string.

Output is deterministic and total for any valid CalendarDate.

Python 3.13+.
"""

from fieldkit.localization import LocaleTable

from .tokens import TokenKind, tokenize
from .types import CalendarDate, FormatSpec

__all__ = ["format_date"]


def _render(kind: TokenKind, text: str, date: CalendarDate, locale: LocaleTable) -> str:
    match kind:
        case TokenKind.DAY:
            return str(date.day)
        case TokenKind.DAY2:
            return f"{date.day:02d}"
        case TokenKind.MONTH:
            return str(date.month + 1)
        case TokenKind.MONTH2:
            return f"{date.month + 1:02d}"
        case TokenKind.MONTH_ABBR_LOWER:
            return locale.months_abbreviated[date.month].lower()
        case TokenKind.MONTH_ABBR_UPPER:
            return locale.months_abbreviated[date.month].upper()
        case TokenKind.MONTH_ABBR_TITLE:
            return locale.months_abbreviated[date.month]
        case TokenKind.MONTH_FULL_LOWER:
            return locale.months[date.month].lower()
        case TokenKind.MONTH_FULL_UPPER:
            return locale.months[date.month].upper()
        case TokenKind.MONTH_FULL_TITLE:
            return locale.months[date.month]
        case TokenKind.YEAR2:
            return f"{date.year:04d}"[-2:]
        # a single y renders the full year, like yyyy
        case TokenKind.YEAR1 | TokenKind.YEAR4:
            return f"{date.year:04d}"
        case TokenKind.LITERAL:
            return text


def format_date(
    date: CalendarDate,
    fmt: str | FormatSpec,
    locale: LocaleTable,
) -> str:
    """Format a date.

    Title-cased month tokens (``Mmm``, ``Mmmmm``) use the locale table entry
    unchanged; lower and upper tokens force the casing.

    Args:
        date: Date to render
        fmt: Format string, or a FormatSpec (its output_format is used)
        locale: Locale table supplying month names

    Returns:
        Formatted date string

    Raises:
        FormatError: If ``fmt`` is a string with an unknown token

    Examples:
        >>> en = LocaleTable.builtin("en")
        >>> format_date(CalendarDate(2023, 5, 5), "dd-mm-yyyy", en)
        '05-06-2023'
        >>> format_date(CalendarDate(2023, 5, 5), "d MMM yy", en)
        '5 JUN 23'
    """
    format_string = fmt.output_format if isinstance(fmt, FormatSpec) else fmt
    return "".join(
        _render(token.kind, token.text, date, locale) for token in tokenize(format_string)
    )
