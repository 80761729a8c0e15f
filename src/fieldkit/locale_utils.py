"""Locale utilities for BCP-47 to POSIX conversion.

Centralizes locale format normalization used throughout the codebase.
Provides canonical locale handling to ensure consistent cache keys and lookups.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from fieldkit.constants import MAX_LOCALE_CACHE_SIZE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "language_of",
    "normalize_locale",
    "territory_of",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-GB), while Babel/POSIX uses underscores (en_GB).

    Args:
        locale_code: BCP-47 locale code (e.g., "en-GB", "nl-NL")

    Returns:
        POSIX-formatted locale code (e.g., "en_GB", "nl_NL")

    Example:
        >>> normalize_locale("nl-NL")
        'nl_NL'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.replace("-", "_")


def language_of(locale_code: str) -> str:
    """Return the lower-cased language subtag ("nl_NL" -> "nl")."""
    return normalize_locale(locale_code).split("_")[0].lower()


def territory_of(locale_code: str) -> str | None:
    """Return the upper-cased territory subtag, or None ("nl_NL" -> "NL")."""
    parts = normalize_locale(locale_code).split("_")
    for part in parts[1:]:
        if len(part) == 2 and part.isalpha():
            return part.upper()
    return None


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("nl-NL")
        >>> locale.language
        'nl'
        >>> locale.territory
        'NL'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))
