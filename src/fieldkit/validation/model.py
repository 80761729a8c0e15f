"""Form model consumed by the validator.

Field is deliberately mutable: validation strips whitespace from text
values and the ``date`` rule rewrites a parsed value to the canonical
format, and the UI layer reads the new value back from the same object.

Python 3.13+.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from fieldkit.enums import InputKind

from .markers import FieldMarker, marker_tokens, parse_markers

__all__ = ["Field", "Form"]


@dataclass(slots=True)
class Field:
    """One form control.

    Attributes:
        name: Control name; radio buttons of one group share it
        value: Current text value
        kind: Kind of control
        markers: Marker tokens, as a whitespace-separated string or a sequence
        disabled: Disabled fields are always valid
        checked: Check state of check boxes and radio buttons
        title: Server-side messages, joined by the title separator
        label: Text of the control's label, if any
        group: Radio group name when it differs from ``name``
    """

    name: str
    value: str = ""
    kind: InputKind = InputKind.TEXT
    markers: tuple[str, ...] = ()
    disabled: bool = False
    checked: bool = False
    title: str = ""
    label: str | None = None
    group: str | None = None

    def __post_init__(self) -> None:
        self.markers = marker_tokens(self.markers)
        self.kind = InputKind(self.kind)

    @property
    def parsed_markers(self) -> tuple[FieldMarker, ...]:
        """Markers parsed into kind/parameter pairs."""
        return parse_markers(self.markers)

    def has_marker(self, kind: str) -> bool:
        """True when a marker of ``kind`` is present."""
        return any(marker.kind == kind for marker in self.parsed_markers)

    @property
    def group_name(self) -> str:
        """Name of the radio group this field belongs to."""
        return self.group or self.name


class Form:
    """Ordered collection of fields."""

    __slots__ = ("fields",)

    def __init__(self, fields: Iterable[Field] = ()) -> None:
        self.fields: list[Field] = list(fields)

    def __repr__(self) -> str:
        return f"Form(fields={[f.name for f in self.fields]!r})"

    def __iter__(self) -> Iterator[Field]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def get(self, name: str) -> Field | None:
        """Return the first field named ``name``, or None."""
        for candidate in self.fields:
            if candidate.name == name:
                return candidate
        return None

    def radio_group(self, name: str) -> tuple[Field, ...]:
        """Return every radio button of the group ``name``."""
        return tuple(
            candidate
            for candidate in self.fields
            if candidate.kind is InputKind.RADIO and candidate.group_name == name
        )
