"""Tests for the calendar grid builder, week numbers and navigation.

Python 3.13+.
"""

from __future__ import annotations

from datetime import date, datetime

import pytest
from hypothesis import assume, event, given

from fieldkit.calendar import (
    build_grid,
    can_navigate,
    date_equals,
    days_in_month,
    grid_fits,
    is_leap_year,
    navigate,
    week_number,
)
from fieldkit.dates import CalendarDate
from fieldkit.diagnostics import ConfigurationError, DiagnosticCode
from fieldkit.enums import Navigation, Weekday

from tests.strategies import FIRST_DAYS_OF_WEEK, calendar_dates


class TestLeapYears:
    """Gregorian leap year rule and month lengths."""

    @pytest.mark.parametrize(
        ("year", "expected"),
        [(2000, 29), (1900, 28), (2024, 29), (2023, 28), (2100, 28), (2400, 29)],
    )
    def test_february(self, year: int, expected: int) -> None:
        """February has 29 days only in leap years."""
        assert days_in_month(year, 1) == expected
        assert is_leap_year(year) is (expected == 29)

    def test_month_lengths(self) -> None:
        """The other months have fixed lengths."""
        lengths = [days_in_month(2023, month) for month in range(12)]
        assert lengths == [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]

    def test_month_out_of_range(self) -> None:
        """Months are 0-based; 12 is rejected."""
        with pytest.raises(ValueError, match="0..11"):
            days_in_month(2023, 12)

    @given(calendar_dates(min_year=1, max_year=9999))
    def test_matches_datetime(self, value: CalendarDate) -> None:
        """Month lengths agree with the standard library."""
        month_start = date(value.year, value.month + 1, 1)
        if value.month == 11:
            event("month=december")
            following = date(value.year + 1, 1, 1) if value.year < 9999 else None
        else:
            following = date(value.year, value.month + 2, 1)
        if following is not None:
            assert days_in_month(value.year, value.month) == (following - month_start).days


class TestWeekNumber:
    """ISO-8601 week numbers."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (CalendarDate(2024, 0, 1), 1),
            (CalendarDate(2024, 11, 31), 1),
            (CalendarDate(2021, 0, 1), 53),
            (CalendarDate(2021, 0, 4), 1),
            (CalendarDate(2023, 0, 1), 52),
            (CalendarDate(2026, 11, 31), 53),
        ],
    )
    def test_known_weeks(self, value: CalendarDate, expected: int) -> None:
        """Year-boundary weeks."""
        assert week_number(value) == expected

    @given(calendar_dates(min_year=2, max_year=9998))
    def test_matches_isocalendar(self, value: CalendarDate) -> None:
        """Agrees with datetime.date.isocalendar()."""
        expected = value.to_date().isocalendar().week
        event(f"week_53={expected == 53}")
        assert week_number(value) == expected


class TestDateEquals:
    """Component comparison that never raises."""

    def test_equal_dates(self) -> None:
        """CalendarDate, date and datetime compare on year, month and day."""
        value = CalendarDate(2024, 0, 15)
        assert date_equals(value, CalendarDate(2024, 0, 15))
        assert date_equals(value, date(2024, 1, 15))
        assert date_equals(value, datetime(2024, 1, 15, 23, 59))

    def test_different_dates(self) -> None:
        """Any differing component makes dates unequal."""
        assert not date_equals(CalendarDate(2024, 0, 15), CalendarDate(2024, 1, 15))

    @pytest.mark.parametrize("other", [None, "2024-01-15", 20240115, object()])
    def test_malformed_operand(self, other: object) -> None:
        """Operands that are not dates compare unequal."""
        assert not date_equals(CalendarDate(2024, 0, 15), other)
        assert not date_equals(other, CalendarDate(2024, 0, 15))


class TestBuildGrid:
    """Grid layout."""

    def test_february_2024_monday_first(self) -> None:
        """February 2024 starts on a Thursday: three leading January days."""
        grid = build_grid(CalendarDate(2024, 1, 10), Weekday.MONDAY, today=CalendarDate(2024, 1, 14))
        assert grid.start_date == CalendarDate(2024, 0, 29)
        assert grid.end_date == CalendarDate(2024, 2, 3)
        assert len(grid.cells) == 35
        assert len(grid.weeks) == 5
        assert grid.week_numbers == (5, 6, 7, 8, 9)

    def test_sunday_first(self) -> None:
        """With Sunday first, 1 February 2024 sits in column 4."""
        grid = build_grid(CalendarDate(2024, 1, 1), Weekday.SUNDAY)
        first = grid.find(CalendarDate(2024, 1, 1))
        assert first is not None
        assert first.column_index == 4
        assert grid.start_date == CalendarDate(2024, 0, 28)

    def test_month_starting_on_first_day(self) -> None:
        """No leading days when the month starts on the first day of week."""
        # 1 April 2024 is a Monday
        grid = build_grid(CalendarDate(2024, 3, 20), Weekday.MONDAY)
        assert grid.start_date == CalendarDate(2024, 3, 1)
        assert grid.cells[0].in_current_month

    def test_february_exactly_four_weeks(self) -> None:
        """February 2021 starts on Monday and fills exactly 28 cells."""
        grid = build_grid(CalendarDate(2021, 1, 1), Weekday.MONDAY)
        assert len(grid.cells) == 28

    def test_six_week_month(self) -> None:
        """A 31-day month starting on the last column needs six rows."""
        # 1 March 2025 is a Saturday
        grid = build_grid(CalendarDate(2025, 2, 1), Weekday.SUNDAY)
        assert len(grid.weeks) == 6

    def test_flags(self) -> None:
        """Today and selected flags mark exactly one cell each."""
        today = CalendarDate(2024, 1, 14)
        selected = CalendarDate(2024, 1, 20)
        grid = build_grid(CalendarDate(2024, 1, 1), Weekday.MONDAY, selected=selected, today=today)
        assert [c.date for c in grid.cells if c.is_today] == [today]
        assert [c.date for c in grid.cells if c.is_selected] == [selected]

    def test_indices(self) -> None:
        """week_index and column_index follow row-major order."""
        grid = build_grid(CalendarDate(2024, 1, 1), Weekday.MONDAY)
        for i, cell in enumerate(grid.cells):
            assert (cell.week_index, cell.column_index) == divmod(i, 7)
            assert cell.is_first_of_week is (cell.column_index == 0)

    def test_find_outside_grid(self) -> None:
        """find() returns None for dates not on the grid."""
        grid = build_grid(CalendarDate(2024, 1, 1), Weekday.MONDAY)
        assert grid.find(CalendarDate(2024, 5, 1)) is None

    @pytest.mark.parametrize("first_day", [-1, 7, 1.5, True])
    def test_invalid_first_day_of_week(self, first_day: object) -> None:
        """first_day_of_week must be an integer in 0..6."""
        with pytest.raises(ConfigurationError) as exc_info:
            build_grid(CalendarDate(2024, 1, 1), first_day)  # type: ignore[arg-type]
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.FIRST_DAY_OF_WEEK_INVALID


class TestYearRangeEdges:
    """Grids of the first and last month of the year range."""

    def test_first_month_aligned(self) -> None:
        """0001-01-01 is a Monday, so a Monday-first grid starts on it."""
        grid = build_grid(CalendarDate(1, 0, 15), Weekday.MONDAY)
        assert grid.start_date == CalendarDate(1, 0, 1)
        assert grid.week_numbers[0] == 1

    def test_first_month_unaligned(self) -> None:
        """A Sunday-first grid would need 31 December of year 0."""
        assert not grid_fits(CalendarDate(1, 0, 1), Weekday.SUNDAY)
        with pytest.raises(ConfigurationError) as exc_info:
            build_grid(CalendarDate(1, 0, 1), Weekday.SUNDAY)
        diagnostic = exc_info.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.code is DiagnosticCode.GRID_OUT_OF_RANGE
        assert diagnostic.subject == "0001-01"

    def test_last_month_aligned(self) -> None:
        """9999-12-31 is a Friday, so a Saturday-first grid ends on it."""
        grid = build_grid(CalendarDate(9999, 11, 31), Weekday.SATURDAY)
        assert grid.end_date == CalendarDate(9999, 11, 31)
        assert len(grid.cells) == 35

    def test_last_month_unaligned(self) -> None:
        """A Monday-first grid would run into year 10000."""
        assert not grid_fits(CalendarDate(9999, 11, 31), Weekday.MONDAY)
        with pytest.raises(ConfigurationError):
            build_grid(CalendarDate(9999, 11, 31), Weekday.MONDAY)


class TestBuildGridProperties:
    """Grid completeness."""

    @given(calendar_dates(min_year=1, max_year=9999), FIRST_DAYS_OF_WEEK)
    def test_complete_weeks(self, reference: CalendarDate, first_day: int) -> None:
        """Cell count is a positive multiple of 7 starting on the first day of week."""
        if not grid_fits(reference, first_day):
            event("grid=out_of_range")
            assert (reference.year, reference.month) in {(1, 0), (9999, 11)}
            with pytest.raises(ConfigurationError):
                build_grid(reference, first_day, today=reference)
            return
        grid = build_grid(reference, first_day, today=reference)
        event(f"rows={len(grid.weeks)}")
        assert len(grid.cells) > 0
        assert len(grid.cells) % 7 == 0
        assert grid.start_date.weekday == first_day
        assert grid.cells[0].date == grid.start_date
        assert grid.cells[-1].date == grid.end_date

    @given(calendar_dates(min_year=1, max_year=9999), FIRST_DAYS_OF_WEEK)
    def test_month_days_once_each(self, reference: CalendarDate, first_day: int) -> None:
        """Every day of the reference month appears once, flagged in_current_month."""
        assume(grid_fits(reference, first_day))
        grid = build_grid(reference, first_day, today=reference)
        current = [c.date.day for c in grid.cells if c.in_current_month]
        assert current == list(range(1, days_in_month(reference.year, reference.month) + 1))

    @given(calendar_dates(min_year=1, max_year=9999), FIRST_DAYS_OF_WEEK)
    def test_consecutive_days(self, reference: CalendarDate, first_day: int) -> None:
        """Cells hold consecutive days."""
        assume(grid_fits(reference, first_day))
        grid = build_grid(reference, first_day, today=reference)
        ordinals = [c.date.to_date().toordinal() for c in grid.cells]
        assert ordinals == list(range(ordinals[0], ordinals[0] + len(ordinals)))


class TestNavigate:
    """Navigation steps."""

    @pytest.mark.parametrize(
        ("reference", "direction", "expected"),
        [
            (CalendarDate(2024, 0, 31), Navigation.PREVIOUS_MONTH, CalendarDate(2023, 11, 1)),
            (CalendarDate(2024, 0, 31), Navigation.NEXT_MONTH, CalendarDate(2024, 1, 1)),
            (CalendarDate(2024, 11, 15), Navigation.NEXT_MONTH, CalendarDate(2025, 0, 1)),
            (CalendarDate(2024, 1, 29), Navigation.PREVIOUS_YEAR, CalendarDate(2023, 1, 1)),
            (CalendarDate(2024, 1, 29), Navigation.NEXT_YEAR, CalendarDate(2025, 1, 1)),
        ],
    )
    def test_steps(
        self, reference: CalendarDate, direction: Navigation, expected: CalendarDate
    ) -> None:
        """Month and year steps land on day 1."""
        assert navigate(reference, direction) == expected

    def test_today(self) -> None:
        """TODAY returns today's date."""
        today = CalendarDate(2024, 1, 10)
        assert navigate(CalendarDate(1999, 0, 1), Navigation.TODAY, today=today) == today

    def test_beyond_year_range(self) -> None:
        """Stepping past year 9999 raises a grid range diagnostic."""
        with pytest.raises(ConfigurationError) as exc_info:
            navigate(CalendarDate(9999, 11, 1), Navigation.NEXT_MONTH)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.GRID_OUT_OF_RANGE

    def test_before_year_range(self) -> None:
        """Stepping before year 1 raises as well."""
        with pytest.raises(ConfigurationError):
            navigate(CalendarDate(1, 5, 1), Navigation.PREVIOUS_YEAR)

    @pytest.mark.parametrize(
        ("reference", "direction", "first_day", "expected"),
        [
            (CalendarDate(1, 1, 1), Navigation.PREVIOUS_MONTH, Weekday.SUNDAY, False),
            (CalendarDate(1, 1, 1), Navigation.PREVIOUS_MONTH, Weekday.MONDAY, True),
            (CalendarDate(9999, 10, 1), Navigation.NEXT_MONTH, Weekday.MONDAY, False),
            (CalendarDate(9999, 10, 1), Navigation.NEXT_MONTH, Weekday.SATURDAY, True),
            (CalendarDate(9999, 11, 1), Navigation.NEXT_MONTH, Weekday.SATURDAY, False),
            (CalendarDate(2024, 5, 1), Navigation.NEXT_YEAR, Weekday.SUNDAY, True),
        ],
    )
    def test_can_navigate(
        self, reference: CalendarDate, direction: Navigation, first_day: Weekday, expected: bool
    ) -> None:
        """can_navigate is False when the target month's grid leaves the year range."""
        assert can_navigate(reference, direction, first_day) is expected

    def test_string_direction(self) -> None:
        """StrEnum values accept their string form."""
        assert navigate(CalendarDate(2024, 5, 1), Navigation("next_month")) == CalendarDate(
            2024, 6, 1
        )
