"""Date picker widget core.

DatePicker holds the state a date picker needs between user interactions
(the selected date, the grid on display, whether it is open) and leaves all
rendering to the caller. The UI layer drives it through method calls and
observes it through the optional handlers on PickerConfig; every handler is
called with the picker as its only argument.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TypeAlias

from fieldkit.constants import DAYS_PER_WEEK, DEFAULT_COUNTRY, DEFAULT_LANGUAGE
from fieldkit.dates import CalendarDate, FormatSpec, format_date, parse_date, tokenize
from fieldkit.enums import Navigation, PickerMode
from fieldkit.localization import CountryPreset, LocaleTable

from .grid import (
    CalendarGrid,
    GridCell,
    build_grid,
    can_navigate,
    grid_fits,
    navigate,
    validate_first_day_of_week,
)

__all__ = ["DatePicker", "PickerConfig", "PickerHandler"]

logger = logging.getLogger(__name__)

PickerHandler: TypeAlias = "Callable[[DatePicker], None]"

_GB = CountryPreset.get(DEFAULT_COUNTRY)


@dataclass(frozen=True, slots=True)
class PickerConfig:
    """Immutable date picker configuration.

    Defaults follow the GB preset with English names. Use for_country() to
    start from another preset.

    Attributes:
        locale: Day and month names, captions and titles
        date_format: Format of the field value and the cell titles
        title_format: Format of the picker title
        valid_date_formats: Candidate formats for reading the field value
        first_day_of_week: First column of the grid (0 = Sunday .. 6 = Saturday)
        default_date: Date shown when the field holds no valid date
            (None for today)
        mode: POPUP fills a field on selection, INLINE reports to on_click
        show_week_numbers: Whether the UI should render a week number column
        on_show: Called after show() populated the grid
        on_click: Called after a cell was selected
        on_close: Called when the picker is closed
        on_populate: Called after every grid rebuild

    Raises:
        FormatError: If a format contains an unknown token
        ConfigurationError: If valid_date_formats is empty or
            first_day_of_week is outside 0..6
    """

    locale: LocaleTable = field(default_factory=LocaleTable.builtin)
    date_format: str = _GB.date_format
    title_format: str = _GB.title_format
    valid_date_formats: tuple[str, ...] = _GB.valid_date_formats
    first_day_of_week: int = _GB.first_day_of_week
    default_date: CalendarDate | None = None
    mode: PickerMode = PickerMode.POPUP
    show_week_numbers: bool = True
    on_show: PickerHandler | None = None
    on_click: PickerHandler | None = None
    on_close: PickerHandler | None = None
    on_populate: PickerHandler | None = None
    format_spec: FormatSpec = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate formats and the first day of week."""
        object.__setattr__(
            self, "first_day_of_week", validate_first_day_of_week(self.first_day_of_week)
        )
        object.__setattr__(
            self, "format_spec", FormatSpec(self.date_format, tuple(self.valid_date_formats))
        )
        object.__setattr__(self, "valid_date_formats", self.format_spec.candidates)
        tokenize(self.title_format)

    @classmethod
    def for_country(
        cls,
        country: str = DEFAULT_COUNTRY,
        language: str = DEFAULT_LANGUAGE,
        **overrides: object,
    ) -> PickerConfig:
        """Build a config from a country preset and a built-in language table.

        Keyword overrides replace individual fields.

        Example:
            >>> config = PickerConfig.for_country("NL", "nl")
            >>> config.date_format, config.locale.language
            ('dd-mm-yyyy', 'nl')
        """
        return cls.from_preset(CountryPreset.get(country), LocaleTable.builtin(language), **overrides)

    @classmethod
    def from_preset(
        cls,
        preset: CountryPreset,
        locale: LocaleTable,
        **overrides: object,
    ) -> PickerConfig:
        """Build a config from any preset (e.g. CountryPreset.from_babel()) and table."""
        values: dict[str, object] = {
            "locale": locale,
            "date_format": preset.date_format,
            "title_format": preset.title_format,
            "valid_date_formats": preset.valid_date_formats,
            "first_day_of_week": preset.first_day_of_week,
        }
        values.update(overrides)
        return cls(**values)  # type: ignore[arg-type]


class DatePicker:
    """UI-independent date picker.

    Example:
        >>> picker = DatePicker(PickerConfig.for_country("NL", "nl"),
        ...                     clock=lambda: CalendarDate(2024, 1, 10))
        >>> picker.show("5-6-2023")
        >>> picker.title
        'Juni 2023'
        >>> picker.next_month()
        >>> picker.title
        'Juli 2023'
        >>> picker.select(CalendarDate(2023, 6, 14))
        '14-07-2023'
        >>> picker.is_open
        False
    """

    __slots__ = ("_clock", "_grid", "config", "date", "is_open")

    def __init__(
        self,
        config: PickerConfig | None = None,
        *,
        clock: Callable[[], CalendarDate] = CalendarDate.today,
    ) -> None:
        """Initialize a closed picker.

        Args:
            config: Picker configuration (default: PickerConfig())
            clock: Source of today's date
        """
        self.config = config or PickerConfig()
        self._clock = clock
        self._grid: CalendarGrid | None = None
        self.date: CalendarDate | None = None
        self.is_open = False

    def __repr__(self) -> str:
        return f"DatePicker(mode={self.config.mode!s}, date={self.date}, open={self.is_open})"

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def grid(self) -> CalendarGrid:
        """The grid on display.

        Raises:
            RuntimeError: If the picker was never shown
        """
        if self._grid is None:
            msg = "DatePicker has no grid; call show() first"
            raise RuntimeError(msg)
        return self._grid

    @property
    def start_date(self) -> CalendarDate:
        """First date on the grid (may be in the previous month)."""
        return self.grid.start_date

    @property
    def end_date(self) -> CalendarDate:
        """Last date on the grid (may be in the next month)."""
        return self.grid.end_date

    @property
    def title(self) -> str:
        """Title of the grid on display, rendered with title_format."""
        return format_date(self.grid.reference, self.config.title_format, self.config.locale)

    @property
    def day_labels(self) -> tuple[str, ...]:
        """Abbreviated day names in column order."""
        return self._rotated(self.config.locale.days_abbreviated)

    @property
    def day_titles(self) -> tuple[str, ...]:
        """Full day names in column order."""
        return self._rotated(self.config.locale.days)

    def _rotated(self, names: tuple[str, ...]) -> tuple[str, ...]:
        first = self.config.first_day_of_week
        return tuple(names[(i + first) % DAYS_PER_WEEK] for i in range(DAYS_PER_WEEK))

    def cell_title(self, cell: GridCell) -> str:
        """Cell date rendered with date_format (the value a click puts in the field)."""
        return format_date(cell.date, self.config.format_spec, self.config.locale)

    def week_title(self, week_index: int) -> str:
        """Tooltip of a week number cell, e.g. "Week 23"."""
        caption = self.config.locale.caption("titleWeek", "Week")
        return f"{caption} {self.grid.week_numbers[week_index]}"

    def cell_at(self, value: CalendarDate) -> GridCell | None:
        """Return the cell showing ``value``, or None when it is not on the grid."""
        return self.grid.find(value)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def show(self, value: str | CalendarDate | None = None) -> None:
        """Open the picker on the month of ``value``.

        A string is parsed against valid_date_formats. When it is empty or
        does not parse, default_date (or today) is used instead. A parsed
        date whose month cannot be laid out (see grid_fits) is treated the
        same way.
        """
        today = self._clock()
        parsed: CalendarDate | None
        if isinstance(value, str):
            parsed = None
            if value:
                parsed, errors = parse_date(
                    value, self.config.format_spec, self.config.locale, today=today
                )
                if errors:
                    logger.debug("Field value '%s' is not a date, using default", value)
                elif parsed is not None and not grid_fits(parsed, self.config.first_day_of_week):
                    logger.debug("No grid for field value '%s', using default", value)
                    parsed = None
        else:
            parsed = value

        self.date = parsed or self.config.default_date or today
        self.is_open = True
        self._populate(self.date)
        if self.config.on_show is not None:
            self.config.on_show(self)

    def _populate(self, reference: CalendarDate) -> None:
        self._grid = build_grid(
            reference,
            self.config.first_day_of_week,
            selected=self.date,
            today=self._clock(),
        )
        if self.config.on_populate is not None:
            self.config.on_populate(self)

    def select(self, value: CalendarDate) -> str | None:
        """Select a date, as when the user clicks a cell.

        In popup mode without an on_click handler, the picker closes and the
        formatted value for the field is returned. Otherwise the picker stays
        open, the grid is rebuilt so the new date is flagged as selected,
        on_click is called (when set) and None is returned.
        """
        self.date = value
        if self.config.on_click is None and self.config.mode is PickerMode.POPUP:
            self.is_open = False
            return format_date(value, self.config.format_spec, self.config.locale)
        if self._grid is not None:
            self._populate(self._grid.reference)
        if self.config.on_click is not None:
            self.config.on_click(self)
        return None

    def close(self) -> None:
        """Close the picker and notify on_close."""
        self.is_open = False
        if self.config.on_close is not None:
            self.config.on_close(self)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def can_navigate(self, direction: Navigation) -> bool:
        """True when a step in ``direction`` has a month to show."""
        return can_navigate(
            self.grid.reference, direction, self.config.first_day_of_week, today=self._clock()
        )

    def _step(self, direction: Navigation) -> None:
        # Steps past the first or last month of the calendar are ignored
        if not self.can_navigate(direction):
            logger.debug("Navigation '%s' from %s ignored", direction, self.grid.reference)
            return
        self._populate(navigate(self.grid.reference, direction, today=self._clock()))

    def previous_month(self) -> None:
        """Show the previous month."""
        self._step(Navigation.PREVIOUS_MONTH)

    def next_month(self) -> None:
        """Show the next month."""
        self._step(Navigation.NEXT_MONTH)

    def previous_year(self) -> None:
        """Show the same month one year earlier."""
        self._step(Navigation.PREVIOUS_YEAR)

    def next_year(self) -> None:
        """Show the same month one year later."""
        self._step(Navigation.NEXT_YEAR)

    def go_to_today(self) -> None:
        """Show the current month."""
        self._step(Navigation.TODAY)

    def go_to_date(self, value: CalendarDate) -> None:
        """Show the month of ``value``.

        Raises:
            ConfigurationError: If the month's grid runs outside years 1..9999
        """
        self._populate(value)


