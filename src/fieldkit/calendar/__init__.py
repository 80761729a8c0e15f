"""Calendar grid builder and date picker widget core.

Public API:
    build_grid: Lay out a month as complete weeks
    navigate: Reference date after a navigation step
    can_navigate, grid_fits: Whether a month's grid stays inside years 1..9999
    week_number: ISO-8601 week number
    date_equals: Year/month/day comparison that never raises
    days_in_month, is_leap_year: Gregorian arithmetic
    CalendarGrid, GridCell: Grid value types
    DatePicker, PickerConfig: Widget state and configuration

Python 3.13+.
"""

from .grid import (
    CalendarGrid,
    GridCell,
    build_grid,
    can_navigate,
    date_equals,
    days_in_month,
    grid_fits,
    is_leap_year,
    navigate,
    week_number,
)
from .widget import DatePicker, PickerConfig, PickerHandler

__all__ = [
    "CalendarGrid",
    "DatePicker",
    "GridCell",
    "PickerConfig",
    "PickerHandler",
    "build_grid",
    "can_navigate",
    "date_equals",
    "days_in_month",
    "grid_fits",
    "is_leap_year",
    "navigate",
    "week_number",
]
