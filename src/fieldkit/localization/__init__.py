"""Locale configuration: name tables, UI strings and country presets.

Public API:
    LocaleTable - Immutable day/month names, captions and message templates
    CountryPreset - Date formats, first day of week and number separators
    BUILTIN_LANGUAGES - Languages with hand-maintained tables

Python 3.13+.
"""

from .presets import CountryPreset
from .tables import BUILTIN_LANGUAGES, LocaleTable

__all__ = [
    "BUILTIN_LANGUAGES",
    "CountryPreset",
    "LocaleTable",
]
