"""Parse date strings against ordered candidate formats.

- parse_date() returns tuple[CalendarDate | None, tuple[ParseError, ...]]
- Never raises for bad input; errors are returned in the tuple
- Malformed candidate formats still raise FormatError (configuration bug)

Matching rules per candidate:
    1. The lower-cased input is split into alternating word / non-word runs
       and must have exactly as many runs as the candidate has tokens.
    2. Day and month runs must be 1-2 digits, year runs 1-4 digits
       ("yy" exactly 2), month names match case-insensitively.
    3. Literal runs must be equal.
    4. Components missing from the format default to today's components.
    5. The assembled date must be a real date: "31-04-2023" is rejected
       rather than rolled over to 1 May.

Two-digit years take their century from today's year, not from any
existing field value.

The first candidate that matches wins; later candidates are not tried.

Python 3.13+.
"""

import logging
import re
from collections.abc import Sequence

from fieldkit.diagnostics import ConfigurationError, ErrorTemplate, ParseError
from fieldkit.localization import LocaleTable

from .tokens import TokenKind, split_input, tokenize_for_parsing
from .types import CalendarDate, FormatSpec

__all__ = ["parse_date", "parse_date_or_none"]

logger = logging.getLogger(__name__)

_ONE_OR_TWO_DIGITS = re.compile(r"[0-9]{1,2}")
_TWO_DIGITS = re.compile(r"[0-9]{2}")
_ONE_TO_FOUR_DIGITS = re.compile(r"[0-9]{1,4}")


def _match_candidate(
    candidate: str,
    runs: Sequence[str],
    locale: LocaleTable,
    today: CalendarDate,
) -> CalendarDate | None:
    """Try one candidate format; return the date or None."""
    tokens = tokenize_for_parsing(candidate)
    if len(tokens) != len(runs):
        return None

    year, month, day = today.year, today.month, today.day

    for token, run in zip(tokens, runs, strict=True):
        kind = token.kind
        if kind in (TokenKind.DAY, TokenKind.DAY2):
            if not _ONE_OR_TWO_DIGITS.fullmatch(run):
                return None
            day = int(run)
        elif kind in (TokenKind.MONTH, TokenKind.MONTH2):
            if not _ONE_OR_TWO_DIGITS.fullmatch(run):
                return None
            month = int(run) - 1
        elif kind.is_month_abbreviation or kind.is_month_name:
            names = locale.months_abbreviated if kind.is_month_abbreviation else locale.months
            lowered = [name.lower() for name in names]
            if run not in lowered:
                return None
            month = lowered.index(run)
        elif kind is TokenKind.YEAR2:
            if not _TWO_DIGITS.fullmatch(run):
                return None
            year = 100 * (today.year // 100) + int(run)
        elif kind in (TokenKind.YEAR1, TokenKind.YEAR4):
            if not _ONE_TO_FOUR_DIGITS.fullmatch(run):
                return None
            year = int(run)
        elif token.text != run:
            return None

    try:
        return CalendarDate(year, month, day)
    except ValueError:
        return None


def parse_date(
    value: str,
    candidates: Sequence[str] | FormatSpec,
    locale: LocaleTable,
    *,
    today: CalendarDate | None = None,
) -> tuple[CalendarDate | None, tuple[ParseError, ...]]:
    """Parse a date string against candidate formats, first match wins.

    Args:
        value: User input (e.g. "5-6-2023", "5 june 23")
        candidates: Ordered candidate formats, or a FormatSpec
        locale: Locale table supplying month names
        today: Reference date for defaults and the 2-digit-year century
            (default: today's date)

    Returns:
        Tuple of (result, errors):
        - result: Parsed CalendarDate, or None if no candidate matched
        - errors: Tuple of ParseError (empty tuple on success)

    Raises:
        ConfigurationError: If no candidate formats are given
        FormatError: If a candidate format contains an unknown token

    Examples:
        >>> en = LocaleTable.builtin("en")
        >>> result, errors = parse_date("5-6-2023", ["d-m-yyyy", "d/m/yyyy"], en)
        >>> result
        CalendarDate(year=2023, month=5, day=5)
        >>> errors
        ()

        >>> result, errors = parse_date("31-04-2023", ["d-m-yyyy"], en)
        >>> result is None
        True
        >>> len(errors)
        1
    """
    formats = candidates.candidates if isinstance(candidates, FormatSpec) else tuple(candidates)
    if not formats:
        raise ConfigurationError(ErrorTemplate.candidate_formats_empty())

    # Type check: value must be string (runtime defense for untyped callers)
    if not isinstance(value, str):
        diagnostic = ErrorTemplate.parse_date_invalid_type(value)  # type: ignore[unreachable]
        return (None, (ParseError(diagnostic, input_value=str(value), formats=formats),))

    reference = today or CalendarDate.today()
    runs = split_input(value)

    for candidate in formats:
        result = _match_candidate(candidate, runs, locale, reference)
        if result is not None:
            logger.debug("Parsed '%s' with format '%s' as %s", value, candidate, result)
            return (result, ())

    diagnostic = ErrorTemplate.parse_date_failed(value, formats)
    return (None, (ParseError(diagnostic, input_value=value, formats=formats),))


def parse_date_or_none(
    value: str,
    candidates: Sequence[str] | FormatSpec,
    locale: LocaleTable,
    *,
    today: CalendarDate | None = None,
) -> CalendarDate | None:
    """Like parse_date, returning only the date (None when nothing matched)."""
    result, _errors = parse_date(value, candidates, locale, today=today)
    return result
