"""Validator configuration.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from fieldkit.constants import (
    DEFAULT_COUNTRY,
    DEFAULT_ERROR_SEPARATOR,
    DEFAULT_LANGUAGE,
    DEFAULT_STRIP_SKIP_MARKER,
    DEFAULT_TITLE_SEPARATOR,
)
from fieldkit.dates import FormatSpec
from fieldkit.localization import CountryPreset, LocaleTable

__all__ = ["ValidatorConfig"]

_GB = CountryPreset.get(DEFAULT_COUNTRY)


@dataclass(frozen=True, slots=True)
class ValidatorConfig:
    """Immutable form validator configuration.

    Defaults follow the GB preset with English messages.

    Attributes:
        locale: Month names and message templates
        date_format: Canonical format parsed dates are rewritten to
        valid_date_formats: Candidate formats tried by the ``date`` rule
        decimal_separator: Separator before the fractional part of numbers
        group_separator: Thousands separator of numbers
        first_message_only: Stop evaluating rules after the first message
        use_titles: Seed errors with server-side messages from Field.title
        title_separator: Separator between messages in Field.title
        error_separator: Separator used by ValidationResult.joined()
        strip_fields: Strip whitespace from text and password values
        strip_skip_marker: Marker that exempts a field from stripping

    Raises:
        FormatError: If a date format contains an unknown token
        ConfigurationError: If valid_date_formats is empty
    """

    locale: LocaleTable = field(default_factory=LocaleTable.builtin)
    date_format: str = _GB.date_format
    valid_date_formats: tuple[str, ...] = _GB.valid_date_formats
    decimal_separator: str = _GB.decimal_separator
    group_separator: str = _GB.group_separator
    first_message_only: bool = True
    use_titles: bool = True
    title_separator: str = DEFAULT_TITLE_SEPARATOR
    error_separator: str = DEFAULT_ERROR_SEPARATOR
    strip_fields: bool = True
    strip_skip_marker: str = DEFAULT_STRIP_SKIP_MARKER
    format_spec: FormatSpec = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Tokenize the date formats."""
        object.__setattr__(
            self, "format_spec", FormatSpec(self.date_format, tuple(self.valid_date_formats))
        )
        object.__setattr__(self, "valid_date_formats", self.format_spec.candidates)

    @classmethod
    def for_country(
        cls,
        country: str = DEFAULT_COUNTRY,
        language: str = DEFAULT_LANGUAGE,
        **overrides: object,
    ) -> ValidatorConfig:
        """Build a config from a country preset and a built-in language table.

        Example:
            >>> config = ValidatorConfig.for_country("NL", "nl")
            >>> config.decimal_separator, config.group_separator
            (',', '.')
        """
        preset = CountryPreset.get(country)
        return cls.from_preset(preset, LocaleTable.builtin(language), **overrides)

    @classmethod
    def from_preset(
        cls,
        preset: CountryPreset,
        locale: LocaleTable,
        **overrides: object,
    ) -> ValidatorConfig:
        """Build a config from any preset (e.g. CountryPreset.from_babel()) and table."""
        values: dict[str, object] = {
            "locale": locale,
            "date_format": preset.date_format,
            "valid_date_formats": preset.valid_date_formats,
            "decimal_separator": preset.decimal_separator,
            "group_separator": preset.group_separator,
        }
        values.update(overrides)
        return cls(**values)  # type: ignore[arg-type]
