"""Gregorian calendar arithmetic shared by the date engine and the grid builder.

Months are 0-based (January = 0) throughout fieldkit.

Python 3.13+. Zero external dependencies.
"""

__all__ = ["days_in_month", "is_leap_year"]

_DAYS_IN_MONTH: tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Every 4th year, except every 100th year, except every 400th year.

    Example:
        >>> is_leap_year(2000), is_leap_year(1900), is_leap_year(2024)
        (True, False, True)
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Number of days in a month.

    Args:
        year: Four-digit year
        month: Month, 0-based (February = 1)

    Returns:
        28, 29, 30 or 31

    Raises:
        ValueError: If month is outside 0..11
    """
    if not 0 <= month <= 11:
        msg = f"month must be in 0..11, got {month}"
        raise ValueError(msg)
    return _DAYS_IN_MONTH[month] + (1 if month == 1 and is_leap_year(year) else 0)
