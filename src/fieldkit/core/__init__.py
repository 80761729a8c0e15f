"""Core utilities shared across the dates, calendar and validation layers.

By isolating these utilities here, we maintain a clean dependency graph:

    core <- dates <- calendar
    core <- dates <- validation

Exports:
    is_leap_year: Gregorian leap year rule
    days_in_month: Leap-year-aware month length (0-based months)

Python 3.13+.
"""

from .gregorian import days_in_month, is_leap_year

__all__ = ["days_in_month", "is_leap_year"]
