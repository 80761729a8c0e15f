"""Country presets: date formats, first day of week and number separators.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from fieldkit.constants import DEFAULT_COUNTRY
from fieldkit.diagnostics import ConfigurationError, ErrorTemplate
from fieldkit.enums import Weekday
from fieldkit.locale_utils import get_babel_locale, normalize_locale, territory_of

__all__ = ["CountryPreset"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CountryPreset:
    """Country-specific defaults for the picker and the validator.

    Attributes:
        country: Upper-case ISO 3166 country code
        date_format: Canonical output format; parsed dates are rewritten to it
        title_format: Format of the picker title (month and year)
        valid_date_formats: Candidate formats tried, in order, when parsing
        first_day_of_week: First column of the calendar grid
        decimal_separator: Separator between integer and fractional part
        group_separator: Separator between thousands groups
    """

    country: str
    date_format: str
    title_format: str
    valid_date_formats: tuple[str, ...]
    first_day_of_week: Weekday
    decimal_separator: str
    group_separator: str

    @classmethod
    def get(cls, country: str = DEFAULT_COUNTRY) -> CountryPreset:
        """Return the built-in preset for ``country`` ("GB" or "NL").

        Raises:
            ConfigurationError: If no preset exists for the country
        """
        preset = _PRESETS.get(country.upper())
        if preset is None:
            raise ConfigurationError(ErrorTemplate.preset_unknown(country, tuple(_PRESETS)))
        return preset

    @classmethod
    def from_babel(cls, locale_code: str) -> CountryPreset:
        """Derive a preset from CLDR data.

        Date formats come from the built-in preset of the locale's territory
        (GB when the territory has none); the first day of week and the number
        separators come from Babel.

        Raises:
            ConfigurationError: If Babel does not know the locale
        """
        from babel import UnknownLocaleError  # noqa: PLC0415

        try:
            locale = get_babel_locale(normalize_locale(locale_code))
        except (UnknownLocaleError, ValueError) as e:
            raise ConfigurationError(ErrorTemplate.locale_unknown(locale_code)) from e

        territory = territory_of(locale_code) or DEFAULT_COUNTRY
        base = _PRESETS.get(territory)
        if base is None:
            logger.debug("No date formats for '%s', using %s", territory, DEFAULT_COUNTRY)
            base = _PRESETS[DEFAULT_COUNTRY]

        # Babel: Monday=0 .. Sunday=6
        first_day = Weekday((locale.first_week_day + 1) % 7)
        symbols = locale.number_symbols
        # Babel >= 2.14 keys number symbols by numbering system
        if "latn" in symbols:
            symbols = symbols["latn"]
        return cls(
            country=territory,
            date_format=base.date_format,
            title_format=base.title_format,
            valid_date_formats=base.valid_date_formats,
            first_day_of_week=first_day,
            decimal_separator=symbols.get("decimal", base.decimal_separator),
            group_separator=symbols.get("group", base.group_separator),
        )


_PRESETS: dict[str, CountryPreset] = {
    "GB": CountryPreset(
        country="GB",
        date_format="yyyy/mm/dd",
        title_format="Mmmmm yyyy",
        valid_date_formats=(
            "yy/m/d", "y/m/d", "yy-m-d", "y-m-d", "m/d", "m-d", "d",
            "d-mmm-yy", "d-mmm-y", "d mmmmm yy", "d mmmmm y", "d mmm yy", "d mmm y",
        ),
        first_day_of_week=Weekday.MONDAY,
        decimal_separator=".",
        group_separator=",",
    ),
    "NL": CountryPreset(
        country="NL",
        date_format="dd-mm-yyyy",
        title_format="Mmmmm yyyy",
        valid_date_formats=(
            "d-m-yy", "d-m-y", "d/m/yy", "d/m/y", "d-m", "d/m", "d",
            "d-mmm-yy", "d-mmm-y", "d mmmmm yy", "d mmmmm y", "d mmm yy", "d mmm y",
        ),
        first_day_of_week=Weekday.MONDAY,
        decimal_separator=",",
        group_separator=".",
    ),
}
