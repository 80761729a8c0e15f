"""Value types for the date format engine.

CalendarDate is a naive Gregorian date with a 0-based month. It can only
hold valid dates: construction rejects day 31 in a 30-day month instead of
rolling over into the next month.

FormatSpec bundles the canonical output format with the ordered candidate
formats used for parsing, and rejects malformed formats at construction.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, timedelta

from fieldkit.constants import MAX_YEAR, MIN_YEAR
from fieldkit.core import days_in_month
from fieldkit.diagnostics import ConfigurationError, ErrorTemplate

from .tokens import tokenize

__all__ = ["CalendarDate", "FormatSpec"]


@dataclass(frozen=True, slots=True, order=True)
class CalendarDate:
    """Naive Gregorian date value.

    Attributes:
        year: Year, 1..9999
        month: Month, 0-based (January = 0)
        day: Day of month, 1-based

    Raises:
        ValueError: If the components do not form a valid date

    Example:
        >>> CalendarDate(2023, 5, 5)
        CalendarDate(year=2023, month=5, day=5)
        >>> CalendarDate(2023, 3, 31)
        Traceback (most recent call last):
            ...
        ValueError: day must be in 1..30 for 2023-04, got 31
    """

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        """Validate component ranges."""
        if not MIN_YEAR <= self.year <= MAX_YEAR:
            msg = f"year must be in {MIN_YEAR}..{MAX_YEAR}, got {self.year}"
            raise ValueError(msg)
        if not 0 <= self.month <= 11:
            msg = f"month must be in 0..11, got {self.month}"
            raise ValueError(msg)
        last = days_in_month(self.year, self.month)
        if not 1 <= self.day <= last:
            msg = f"day must be in 1..{last} for {self.year:04d}-{self.month + 1:02d}, got {self.day}"
            raise ValueError(msg)

    def __str__(self) -> str:
        """ISO 8601 rendering (YYYY-MM-DD)."""
        return f"{self.year:04d}-{self.month + 1:02d}-{self.day:02d}"

    @classmethod
    def from_date(cls, value: date) -> CalendarDate:
        """Convert a ``datetime.date`` (or ``datetime``) to a CalendarDate."""
        return cls(value.year, value.month - 1, value.day)

    @classmethod
    def today(cls) -> CalendarDate:
        """Today's local wall-clock date."""
        return cls.from_date(date.today())

    def to_date(self) -> date:
        """Convert to ``datetime.date``."""
        return date(self.year, self.month + 1, self.day)

    @property
    def weekday(self) -> int:
        """Day of week, Sunday = 0 .. Saturday = 6."""
        return self.to_date().isoweekday() % 7

    def add_days(self, days: int) -> CalendarDate:
        """Return the date ``days`` days later (earlier when negative).

        Raises:
            ValueError: If the result falls outside years 1..9999
        """
        try:
            return CalendarDate.from_date(self.to_date() + timedelta(days=days))
        except OverflowError as e:
            msg = f"{self} plus {days} days is outside years {MIN_YEAR}..{MAX_YEAR}"
            raise ValueError(msg) from e

    def first_of_month(self) -> CalendarDate:
        """Return the first day of this date's month."""
        return CalendarDate(self.year, self.month, 1)


@dataclass(frozen=True, slots=True)
class FormatSpec:
    """Canonical output format plus ordered candidate formats for parsing.

    Every format is tokenized at construction, so a malformed format fails
    when the widget is configured rather than when a user types a date.

    Attributes:
        output_format: Format used by format_date
        candidates: Formats tried in order by parse_date (first match wins)

    Raises:
        FormatError: If any format contains an unknown token
        ConfigurationError: If candidates is empty

    Example:
        >>> spec = FormatSpec("dd-mm-yyyy", ("d-m-yyyy", "d/m/yyyy"))
        >>> spec.candidates
        ('d-m-yyyy', 'd/m/yyyy')
    """

    output_format: str
    candidates: tuple[str, ...]

    def __post_init__(self) -> None:
        """Freeze candidates and tokenize every format."""
        object.__setattr__(self, "candidates", tuple(self.candidates))
        if not self.candidates:
            raise ConfigurationError(ErrorTemplate.candidate_formats_empty())
        tokenize(self.output_format)
        for candidate in self.candidates:
            tokenize(candidate.lower())

    @classmethod
    def of(cls, output_format: str, candidates: Iterable[str] | None = None) -> FormatSpec:
        """Build a spec; candidates default to the output format alone."""
        return cls(output_format, tuple(candidates) if candidates is not None else (output_format,))
