"""Shared constants for fieldkit.

Centralized configuration constants used across the dates, calendar and
validation packages. Placing constants here avoids circular imports and
provides a single source of truth.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Calendar
    "DAYS_PER_WEEK",
    "MONTHS_PER_YEAR",
    "MIN_YEAR",
    "MAX_YEAR",
    # Cache limits
    "MAX_FORMAT_CACHE_SIZE",
    "MAX_LOCALE_CACHE_SIZE",
    # Validation defaults
    "DEFAULT_TITLE_SEPARATOR",
    "DEFAULT_ERROR_SEPARATOR",
    "DEFAULT_STRIP_SKIP_MARKER",
    "VALUE_PLACEHOLDER",
    # Locale defaults
    "DEFAULT_LANGUAGE",
    "DEFAULT_COUNTRY",
]

# ============================================================================
# CALENDAR
# ============================================================================

DAYS_PER_WEEK: int = 7
MONTHS_PER_YEAR: int = 12

# Four-digit year range; matches datetime.MINYEAR/MAXYEAR so every
# CalendarDate converts to datetime.date.
MIN_YEAR: int = 1
MAX_YEAR: int = 9999

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Tokenized format strings. Widgets use a handful of formats each.
MAX_FORMAT_CACHE_SIZE: int = 256

# Babel Locale objects and LocaleTables built from CLDR data.
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# VALIDATION DEFAULTS
# ============================================================================

# Splits server-side messages carried in a field's title.
DEFAULT_TITLE_SEPARATOR: str = "|"

# Joins messages for display when every error is shown.
DEFAULT_ERROR_SEPARATOR: str = "<br />"

# Marker that opts a single field out of whitespace stripping.
DEFAULT_STRIP_SKIP_MARKER: str = "noStrip"

# Substituted for a value that cannot be read as a number or a missing
# marker parameter.
VALUE_PLACEHOLDER: str = "?"

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

DEFAULT_LANGUAGE: str = "en"
DEFAULT_COUNTRY: str = "GB"
