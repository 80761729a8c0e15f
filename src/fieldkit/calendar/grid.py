"""Month-to-week grid layout for the calendar.

A grid covers whole weeks: it starts on the configured first day of the week
at or before the 1st of the reference month and runs until the week holding
the last day of the month is complete. Grids are rebuilt from scratch on
every navigation step; cells are never mutated.

Week numbers follow ISO-8601 (weeks start on Monday, week 1 holds the first
Thursday of the year) regardless of the grid's first day of week.

Python 3.13+.
"""

import logging
import math
from dataclasses import dataclass
from datetime import date, timedelta

from fieldkit.constants import DAYS_PER_WEEK, MAX_YEAR, MIN_YEAR
from fieldkit.core import days_in_month, is_leap_year
from fieldkit.dates import CalendarDate
from fieldkit.diagnostics import ConfigurationError, ErrorTemplate
from fieldkit.enums import Navigation, Weekday

__all__ = [
    "CalendarGrid",
    "GridCell",
    "build_grid",
    "can_navigate",
    "date_equals",
    "days_in_month",
    "grid_fits",
    "is_leap_year",
    "navigate",
    "validate_first_day_of_week",
    "week_number",
]

logger = logging.getLogger(__name__)

_FIRST_ORDINAL = date(MIN_YEAR, 1, 1).toordinal()
_LAST_ORDINAL = date(MAX_YEAR, 12, 31).toordinal()


@dataclass(frozen=True, slots=True)
class GridCell:
    """One day in a calendar grid.

    Attributes:
        date: The day this cell shows
        in_current_month: True when the day belongs to the reference month
        is_today: True when the day is today
        is_selected: True when the day is the selected date
        week_index: Row of the cell (0-based)
        column_index: Column of the cell, 0..6 counted from the first day of week
    """

    date: CalendarDate
    in_current_month: bool
    is_today: bool
    is_selected: bool
    week_index: int
    column_index: int

    @property
    def is_first_of_week(self) -> bool:
        """True for cells in the first column."""
        return self.column_index == 0


@dataclass(frozen=True, slots=True)
class CalendarGrid:
    """A month laid out as complete weeks.

    Attributes:
        reference: Date whose month the grid shows
        start_date: Date of the first cell (may be in the previous month)
        end_date: Date of the last cell (may be in the next month)
        cells: Cells in row-major order; always a positive multiple of 7
        week_numbers: ISO week number of the first cell of each row
    """

    reference: CalendarDate
    start_date: CalendarDate
    end_date: CalendarDate
    cells: tuple[GridCell, ...]
    week_numbers: tuple[int, ...]

    @property
    def weeks(self) -> tuple[tuple[GridCell, ...], ...]:
        """Cells grouped into rows of seven."""
        return tuple(
            self.cells[i : i + DAYS_PER_WEEK] for i in range(0, len(self.cells), DAYS_PER_WEEK)
        )

    def find(self, value: CalendarDate | date) -> GridCell | None:
        """Return the cell showing ``value``, or None when it is not on the grid."""
        for cell in self.cells:
            if date_equals(cell.date, value):
                return cell
        return None


def _as_calendar_date(value: object) -> CalendarDate | None:
    match value:
        case CalendarDate():
            return value
        case date():
            return CalendarDate.from_date(value)
        case _:
            return None


def date_equals(a: object, b: object) -> bool:
    """Compare two dates on year, month and day only.

    Accepts CalendarDate, ``datetime.date`` and ``datetime.datetime``. Any
    other operand (including None) compares unequal instead of raising.

    Examples:
        >>> date_equals(CalendarDate(2024, 0, 1), date(2024, 1, 1))
        True
        >>> date_equals(CalendarDate(2024, 0, 1), None)
        False
    """
    left = _as_calendar_date(a)
    right = _as_calendar_date(b)
    if left is None or right is None:
        return False
    return (left.year, left.month, left.day) == (right.year, right.month, right.day)


def week_number(value: CalendarDate) -> int:
    """ISO-8601 week number of a date.

    The date is moved to the Thursday of its own ISO week; the week number is
    that Thursday's distance in weeks from January 4th of the Thursday's year,
    plus one.

    Examples:
        >>> week_number(CalendarDate(2024, 0, 1))
        1
        >>> week_number(CalendarDate(2024, 11, 31))
        1
        >>> week_number(CalendarDate(2021, 0, 1))
        53
    """
    # Monday = 0 .. Sunday = 6
    iso_weekday = (value.weekday + 6) % 7
    thursday = value.to_date() + timedelta(days=3 - iso_weekday)
    anchor = date(thursday.year, 1, 4)
    return round((thursday - anchor).days / DAYS_PER_WEEK) + 1


def validate_first_day_of_week(value: int) -> Weekday:
    """Return ``value`` as a Weekday.

    Raises:
        ConfigurationError: If value is not an integer in 0..6
    """
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 6:
        raise ConfigurationError(ErrorTemplate.first_day_of_week_invalid(value))
    return Weekday(value)


def _layout(reference: CalendarDate, first_day: Weekday) -> tuple[CalendarDate, int, int]:
    """First of month, leading cell count and total cell count of a grid."""
    first_of_month = reference.first_of_month()
    cell_offset = (first_of_month.weekday + DAYS_PER_WEEK - first_day) % DAYS_PER_WEEK
    month_length = days_in_month(reference.year, reference.month)
    cell_count = math.ceil((cell_offset + month_length) / DAYS_PER_WEEK) * DAYS_PER_WEEK
    return first_of_month, cell_offset, cell_count


def grid_fits(reference: CalendarDate, first_day_of_week: int = Weekday.SUNDAY) -> bool:
    """True when every cell of the month's grid lies within years 1..9999.

    Only January of year 1 and December of year 9999 can fail, and only when
    the month does not start (or end) exactly on a week boundary.

    Raises:
        ConfigurationError: If first_day_of_week is outside 0..6
    """
    first_day = validate_first_day_of_week(first_day_of_week)
    first_of_month, cell_offset, cell_count = _layout(reference, first_day)
    start = first_of_month.to_date().toordinal() - cell_offset
    return start >= _FIRST_ORDINAL and start + cell_count - 1 <= _LAST_ORDINAL


def build_grid(
    reference: CalendarDate,
    first_day_of_week: int = Weekday.SUNDAY,
    selected: CalendarDate | None = None,
    today: CalendarDate | None = None,
) -> CalendarGrid:
    """Lay out the month of ``reference`` as complete weeks.

    Args:
        reference: Any date in the month to show
        first_day_of_week: Weekday of the first column (0 = Sunday .. 6 = Saturday)
        selected: Date to flag as selected (None for no selection)
        today: Date to flag as today (default: today's date)

    Returns:
        CalendarGrid with ``ceil((offset + days_in_month) / 7) * 7`` cells,
        where offset is the number of leading days from the previous month

    Raises:
        ConfigurationError: If first_day_of_week is outside 0..6, or the
            grid would hold days outside years 1..9999 (see grid_fits)

    Example:
        >>> grid = build_grid(CalendarDate(2024, 1, 10), Weekday.MONDAY)
        >>> str(grid.start_date), str(grid.end_date), len(grid.cells)
        ('2024-01-29', '2024-03-03', 35)
    """
    first_day = validate_first_day_of_week(first_day_of_week)
    if not grid_fits(reference, first_day):
        raise ConfigurationError(ErrorTemplate.grid_out_of_range(reference.year, reference.month))
    current = today or CalendarDate.today()

    first_of_month, cell_offset, cell_count = _layout(reference, first_day)
    start = first_of_month.add_days(-cell_offset)
    cells: list[GridCell] = []
    week_numbers: list[int] = []
    day = start
    for i in range(cell_count):
        if i:
            day = day.add_days(1)
        week_index, column_index = divmod(i, DAYS_PER_WEEK)
        if column_index == 0:
            week_numbers.append(week_number(day))
        cells.append(
            GridCell(
                date=day,
                in_current_month=day.month == reference.month,
                is_today=date_equals(day, current),
                is_selected=date_equals(day, selected),
                week_index=week_index,
                column_index=column_index,
            )
        )

    logger.debug(
        "Built grid for %04d-%02d: %s..%s (%d cells)",
        reference.year,
        reference.month + 1,
        start,
        day,
        cell_count,
    )
    return CalendarGrid(
        reference=reference,
        start_date=start,
        end_date=day,
        cells=tuple(cells),
        week_numbers=tuple(week_numbers),
    )


def _step_month(reference: CalendarDate, direction: Navigation) -> tuple[int, int]:
    """Year and 0-based month after a month or year step (unchecked)."""
    year, month = reference.year, reference.month
    match direction:
        case Navigation.PREVIOUS_MONTH:
            return divmod(year * 12 + month - 1, 12)
        case Navigation.NEXT_MONTH:
            return divmod(year * 12 + month + 1, 12)
        case Navigation.PREVIOUS_YEAR:
            return year - 1, month
        case Navigation.NEXT_YEAR:
            return year + 1, month
        case _:
            msg = f"unknown navigation direction: {direction!r}"
            raise ValueError(msg)


def navigate(
    reference: CalendarDate,
    direction: Navigation,
    today: CalendarDate | None = None,
) -> CalendarDate:
    """Compute the reference date after a navigation step.

    Month and year steps land on day 1 of the target month, so moving from
    31 January never overflows into March. ``Navigation.TODAY`` returns today.

    Raises:
        ConfigurationError: If the step leaves years 1..9999

    Examples:
        >>> navigate(CalendarDate(2024, 0, 31), Navigation.PREVIOUS_MONTH)
        CalendarDate(year=2023, month=11, day=1)
        >>> navigate(CalendarDate(2024, 1, 29), Navigation.NEXT_YEAR)
        CalendarDate(year=2025, month=1, day=1)
    """
    if direction == Navigation.TODAY:
        return today or CalendarDate.today()
    year, month = _step_month(reference, direction)
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise ConfigurationError(ErrorTemplate.grid_out_of_range(year, month))
    return CalendarDate(year, month, 1)


def can_navigate(
    reference: CalendarDate,
    direction: Navigation,
    first_day_of_week: int = Weekday.SUNDAY,
    today: CalendarDate | None = None,
) -> bool:
    """True when ``direction`` leads to a month whose grid can be built.

    A UI disables the matching button when this is False.
    """
    if direction == Navigation.TODAY:
        return grid_fits(today or CalendarDate.today(), first_day_of_week)
    year, month = _step_month(reference, direction)
    if not MIN_YEAR <= year <= MAX_YEAR:
        return False
    return grid_fits(CalendarDate(year, month, 1), first_day_of_week)
