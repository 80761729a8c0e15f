"""Enumerations for fieldkit type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import IntEnum, StrEnum


class Weekday(IntEnum):
    """Day of week, Sunday-first numbering.

    Matches the ordering of ``LocaleTable.days`` so a member can index the
    day name lists directly.
    """

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


class PickerMode(StrEnum):
    """How a date picker is attached to the page.

    StrEnum provides automatic string conversion: str(PickerMode.POPUP) == "popup"
    """

    POPUP = "popup"
    """Picker opens next to an input field and fills it on selection"""

    INLINE = "inline"
    """Picker lives in an existing container; selection goes to on_click"""


class Navigation(StrEnum):
    """Navigation commands accepted by the calendar grid builder."""

    PREVIOUS_MONTH = "previous_month"
    NEXT_MONTH = "next_month"
    PREVIOUS_YEAR = "previous_year"
    NEXT_YEAR = "next_year"
    TODAY = "today"


class InputKind(StrEnum):
    """Kind of form control a field represents.

    Built-in rules only inspect text-like kinds; ``required`` also
    understands check boxes and radio groups.
    """

    TEXT = "text"
    PASSWORD = "password"
    CHECKBOX = "checkbox"
    RADIO = "radio"
    SELECT = "select"
    TEXTAREA = "textarea"

    @property
    def is_text_like(self) -> bool:
        """True for kinds whose value is free text (text and password)."""
        return self in (InputKind.TEXT, InputKind.PASSWORD)


__all__ = [
    "InputKind",
    "Navigation",
    "PickerMode",
    "Weekday",
]
