"""Locale-aware numeric checks.

Python 3.13+. Zero external dependencies.
"""

import functools
import re

__all__ = ["is_numeric", "leading_integer"]

_LEADING_INTEGER = re.compile(r"\s*([-+]?\d+)")


@functools.lru_cache(maxsize=64)
def _numeric_pattern(grouped: bool, group_separator: str, decimal_separator: str) -> re.Pattern[str]:
    digits = rf"\d{{1,3}}(?:{re.escape(group_separator)}\d{{3}})*" if grouped else r"\d+"
    return re.compile(rf"[-+]?{digits}(?:{re.escape(decimal_separator)}\d+)?")


def is_numeric(value: str, group_separator: str = ",", decimal_separator: str = ".") -> bool:
    """Check a value against the numeric grammar of a locale.

    The grammar is an optional sign, the integer part and an optional
    fractional part after the decimal separator. When the group separator
    occurs anywhere in the value, the integer part must be grouped strictly:
    one to three digits, then groups of exactly three digits each preceded
    by the separator. Otherwise the integer part is a plain digit run.

    Args:
        value: Text to check
        group_separator: Thousands separator ("" when the locale has none)
        decimal_separator: Separator before the fractional part

    Examples:
        >>> is_numeric("1,234.56")
        True
        >>> is_numeric("1.234,56", group_separator=".", decimal_separator=",")
        True
        >>> is_numeric("1,23,4")
        False
        >>> is_numeric("-1234")
        True
    """
    grouped = bool(group_separator) and group_separator in value
    pattern = _numeric_pattern(grouped, group_separator, decimal_separator)
    return pattern.fullmatch(value) is not None


def leading_integer(value: str) -> int | None:
    """Integer formed by the leading sign and digits of ``value``.

    Reads like ``parseInt(value, 10)``: leading whitespace is skipped and
    reading stops at the first non-digit, so "1,234" gives 1.

    Examples:
        >>> leading_integer("42abc")
        42
        >>> leading_integer("-7.5")
        -7
        >>> leading_integer("abc") is None
        True
    """
    match = _LEADING_INTEGER.match(value)
    return int(match.group(1)) if match else None
