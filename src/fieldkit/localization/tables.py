"""Locale tables: day and month names, UI captions and validation messages.

A LocaleTable is immutable configuration. Widgets receive one at
construction and share it read-only; concurrent widgets may share the same
instance.

Tables come from three places:
    - LocaleTable.builtin("en" | "nl"): the hand-maintained tables
    - LocaleTable.create_or_raise(code): CLDR names through Babel, captions
      and messages from the built-in table of the same language
    - LocaleTable(...) directly, for fully custom tables

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from fieldkit.constants import (
    DAYS_PER_WEEK,
    DEFAULT_LANGUAGE,
    MAX_LOCALE_CACHE_SIZE,
    MONTHS_PER_YEAR,
)
from fieldkit.diagnostics import ConfigurationError, ErrorTemplate
from fieldkit.locale_utils import get_babel_locale, language_of, normalize_locale

if TYPE_CHECKING:
    from babel import Locale

__all__ = ["BUILTIN_LANGUAGES", "LocaleTable"]

logger = logging.getLogger(__name__)


def _freeze(mapping: Mapping[str, str] | None) -> Mapping[str, str]:
    return MappingProxyType(dict(mapping or {}))


@dataclass(frozen=True, slots=True, eq=False)
class LocaleTable:
    """Immutable locale strings consumed by the date engine and widgets.

    Attributes:
        language: Lower-case language subtag the table belongs to
        days: Seven day names, Sunday first
        days_abbreviated: Seven abbreviated day names, Sunday first
        months: Twelve month names, January first
        months_abbreviated: Twelve abbreviated month names
        captions: Picker captions and titles ("captionToday", "titleWeek", ...)
        messages: Validation message templates keyed by rule key, using
            ``#{name}`` placeholders

    Raises:
        ConfigurationError: If a name list has the wrong length

    Example:
        >>> table = LocaleTable.builtin("nl")
        >>> table.months[2]
        'Maart'
        >>> table.message("required")
        'Veld is verplicht'
    """

    language: str
    days: tuple[str, ...]
    days_abbreviated: tuple[str, ...]
    months: tuple[str, ...]
    months_abbreviated: tuple[str, ...]
    captions: Mapping[str, str] = field(default_factory=dict)
    messages: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate list sizes and freeze the mappings."""
        for name, expected in (
            ("days", DAYS_PER_WEEK),
            ("days_abbreviated", DAYS_PER_WEEK),
            ("months", MONTHS_PER_YEAR),
            ("months_abbreviated", MONTHS_PER_YEAR),
        ):
            values = tuple(getattr(self, name))
            if len(values) != expected:
                raise ConfigurationError(
                    ErrorTemplate.locale_table_invalid(name, expected, len(values))
                )
            object.__setattr__(self, name, values)
        object.__setattr__(self, "captions", _freeze(self.captions))
        object.__setattr__(self, "messages", _freeze(self.messages))

    def message(self, key: str) -> str:
        """Return the validation message template for a rule key.

        Raises:
            ConfigurationError: If the table has no template for ``key``
        """
        try:
            return self.messages[key]
        except KeyError:
            raise ConfigurationError(ErrorTemplate.message_template_missing(key)) from None

    def caption(self, key: str, default: str = "") -> str:
        """Return a UI caption or title, or ``default`` when absent."""
        return self.captions.get(key, default)

    def with_messages(self, messages: Mapping[str, str]) -> LocaleTable:
        """Return a copy whose message templates are overridden by ``messages``."""
        return LocaleTable(
            language=self.language,
            days=self.days,
            days_abbreviated=self.days_abbreviated,
            months=self.months,
            months_abbreviated=self.months_abbreviated,
            captions=self.captions,
            messages={**self.messages, **messages},
        )

    @classmethod
    def builtin(cls, language: str = DEFAULT_LANGUAGE) -> LocaleTable:
        """Return the built-in table for a language ("en" or "nl").

        Raises:
            ConfigurationError: If no built-in table exists for the language
        """
        table = _BUILTIN_TABLES.get(language_of(language))
        if table is None:
            raise ConfigurationError(ErrorTemplate.locale_unknown(language))
        return table

    @classmethod
    def create_or_raise(cls, locale_code: str) -> LocaleTable:
        """Build a table from CLDR data for ``locale_code``.

        Day and month names come from Babel. Captions and messages come from
        the built-in table of the same language, falling back to English.

        Raises:
            ConfigurationError: If Babel does not know the locale
        """
        return _table_from_babel(normalize_locale(locale_code))

    @classmethod
    def create(cls, locale_code: str) -> LocaleTable:
        """Build a table from CLDR data, falling back to English.

        Never raises for unknown locales; a warning is logged instead.
        """
        try:
            return cls.create_or_raise(locale_code)
        except ConfigurationError as e:
            logger.warning("Unknown locale '%s': %s. Falling back to en", locale_code, e)
            return cls.builtin(DEFAULT_LANGUAGE)


def _title(name: str) -> str:
    return name[:1].upper() + name[1:]


def _ordered(names: Mapping[int, str], keys: Sequence[int]) -> tuple[str, ...]:
    return tuple(_title(names[k].rstrip(".")) for k in keys)


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _table_from_babel(locale_code: str) -> LocaleTable:
    from babel import UnknownLocaleError  # noqa: PLC0415

    try:
        locale: Locale = get_babel_locale(locale_code)
    except (UnknownLocaleError, ValueError) as e:
        raise ConfigurationError(ErrorTemplate.locale_unknown(locale_code)) from e

    # Babel numbers weekdays Monday=0; tables are Sunday-first.
    sunday_first = (6, 0, 1, 2, 3, 4, 5)
    day_widths = locale.days["format"]
    month_widths = locale.months["format"]
    short_days = day_widths.get("short") or day_widths["abbreviated"]

    base = _BUILTIN_TABLES.get(locale.language) or _BUILTIN_TABLES[DEFAULT_LANGUAGE]
    if base.language != locale.language:
        logger.debug(
            "No built-in messages for '%s', using '%s' captions and messages",
            locale.language,
            base.language,
        )

    table = LocaleTable(
        language=locale.language,
        days=_ordered(day_widths["wide"], sunday_first),
        days_abbreviated=_ordered(short_days, sunday_first),
        months=_ordered(month_widths["wide"], range(1, 13)),
        months_abbreviated=_ordered(month_widths["abbreviated"], range(1, 13)),
        captions=base.captions,
        messages=base.messages,
    )
    logger.debug("Built locale table for %s from CLDR data", locale_code)
    return table


_EN = LocaleTable(
    language="en",
    days=("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"),
    days_abbreviated=("Su", "Mo", "Tu", "We", "Th", "Fr", "Sa"),
    months=(
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
    months_abbreviated=(
        "Jan", "Feb", "Mar", "Apr", "May", "Jun",
        "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
    ),
    captions={
        "captionClose": "Close",
        "captionNextMonth": ">",
        "captionNextYear": ">>",
        "captionPreviousMonth": "<",
        "captionPreviousYear": "<<",
        "captionToday": "Today",
        "captionWeek": "Wk",
        "titleClose": "Close calendar",
        "titleNextMonth": "Next month",
        "titleNextYear": "Next year",
        "titlePreviousMonth": "Previous month",
        "titlePreviousYear": "Previous year",
        "titleToday": "Today's date",
        "titleWeek": "Week",
    },
    messages={
        "confirmation": 'Field should be a confirmation[ of "#{label}"]',
        "date": "Field should be a date (YYYY/MM/DD)",
        "email": "Field should be an e-mail address",
        "maxLength": "Value is too long (maximum length is #{maxLength}, length is #{length})",
        "maxValue": "Value is too high (maximum value is #{maxValue}, value is #{value})",
        "minLength": "Value is too short (minimum length is #{minLength}, length is #{length})",
        "minValue": "Value is too low (minimum value is #{minValue}, value is #{value})",
        "numeric": "Field is not numeric",
        "required": "Field is required",
    },
)

_NL = LocaleTable(
    language="nl",
    days=("Zondag", "Maandag", "Dinsdag", "Woensdag", "Donderdag", "Vrijdag", "Zaterdag"),
    days_abbreviated=("Zo", "Ma", "Di", "Wo", "Do", "Vr", "Za"),
    months=(
        "Januari", "Februari", "Maart", "April", "Mei", "Juni",
        "Juli", "Augustus", "September", "Oktober", "November", "December",
    ),
    months_abbreviated=(
        "Jan", "Feb", "Mar", "Apr", "Mei", "Jun",
        "Jul", "Aug", "Sep", "Okt", "Nov", "Dec",
    ),
    captions={
        "captionClose": "Sluiten",
        "captionNextMonth": ">",
        "captionNextYear": ">>",
        "captionPreviousMonth": "<",
        "captionPreviousYear": "<<",
        "captionToday": "Vandaag",
        "captionWeek": "Wk",
        "titleClose": "Sluit kalender",
        "titleNextMonth": "Volgende maand",
        "titleNextYear": "Volgend jaar",
        "titlePreviousMonth": "Vorige maand",
        "titlePreviousYear": "Vorig jaar",
        "titleToday": "Vandaag",
        "titleWeek": "Week",
    },
    messages={
        "confirmation": 'Veld moet een bevestiging zijn[ van "#{label}"]',
        "date": "Veld moet een datum zijn (DD-MM-JJJJ)",
        "email": "Veld moet een e-mail adres zijn",
        "maxLength": "Waarde is te lang (maximale lengte is #{maxLength}, lengte is #{length})",
        "maxValue": "Waarde is te hoog (maximale waarde is #{maxValue}, waarde is #{value})",
        "minLength": "Waarde is te kort (minimale lengte is #{minLength}, lengte is #{length})",
        "minValue": "Waarde is te laag (minimale waarde is #{minValue}, waarde is #{value})",
        "numeric": "Veld is niet numeriek",
        "required": "Veld is verplicht",
    },
)

_BUILTIN_TABLES: dict[str, LocaleTable] = {"en": _EN, "nl": _NL}

BUILTIN_LANGUAGES: tuple[str, ...] = tuple(_BUILTIN_TABLES)
