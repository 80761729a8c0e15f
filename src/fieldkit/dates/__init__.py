"""Date format engine: tokenize, format and parse date strings.

Format strings use runs of ``d``, ``m`` and ``y`` (see tokens.py for the
full table); everything else is literal text.

Public API:
    CalendarDate: Validated naive Gregorian date (0-based month)
    FormatSpec: Output format plus ordered candidate formats
    FormatToken, TokenKind, tokenize: Format tokenizer
    format_date: Render a date through a format
    parse_date: Parse against candidate formats, returns (result, errors)
    parse_date_or_none: Parse, returning only the date

Example:
    >>> from fieldkit.dates import CalendarDate, format_date, parse_date
    >>> from fieldkit.localization import LocaleTable
    >>> en = LocaleTable.builtin("en")
    >>> result, errors = parse_date("5 june 23", ["d mmmmm yy"], en,
    ...                             today=CalendarDate(2024, 0, 1))
    >>> format_date(result, "dd-mm-yyyy", en)
    '05-06-2023'

Python 3.13+.
"""

from .formatting import format_date
from .parsing import parse_date, parse_date_or_none
from .tokens import FormatToken, TokenKind, tokenize
from .types import CalendarDate, FormatSpec

__all__ = [
    "CalendarDate",
    "FormatSpec",
    "FormatToken",
    "TokenKind",
    "format_date",
    "parse_date",
    "parse_date_or_none",
    "tokenize",
]
