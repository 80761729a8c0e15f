"""Field marker parsing.

Fields declare what to validate through marker tokens, the way a form
control carries class names: ``"required maxLength:40 date"``. A token
``name:param`` splits at its first colon into kind and parameter.

Markers are parsed once into typed pairs. Rule lookup compares whole kinds,
so ``maxLength`` never matches ``xmaxLength`` or a parameter that happens to
contain the text ``maxLength``.

Python 3.13+.
"""

import functools
from collections.abc import Iterable
from dataclasses import dataclass

from fieldkit.constants import MAX_FORMAT_CACHE_SIZE

__all__ = ["FieldMarker", "marker_tokens", "parse_markers"]


@dataclass(frozen=True, slots=True)
class FieldMarker:
    """One parsed marker.

    Attributes:
        kind: Rule key or plain flag (e.g. "maxLength", "noStrip")
        parameter: Text after the first colon, or None when there is no colon
    """

    kind: str
    parameter: str | None = None

    def __str__(self) -> str:
        return self.kind if self.parameter is None else f"{self.kind}:{self.parameter}"


def marker_tokens(markers: str | Iterable[str]) -> tuple[str, ...]:
    """Normalize a whitespace-separated string or an iterable to a token tuple."""
    if isinstance(markers, str):
        return tuple(markers.split())
    return tuple(token for item in markers for token in item.split())


@functools.lru_cache(maxsize=MAX_FORMAT_CACHE_SIZE)
def _parse_tokens(tokens: tuple[str, ...]) -> tuple[FieldMarker, ...]:
    seen: set[str] = set()
    result: list[FieldMarker] = []
    for token in tokens:
        if token in seen:
            continue
        seen.add(token)
        kind, colon, parameter = token.partition(":")
        result.append(FieldMarker(kind, parameter if colon else None))
    return tuple(result)


def parse_markers(markers: str | Iterable[str]) -> tuple[FieldMarker, ...]:
    """Parse marker tokens into FieldMarker pairs.

    Token order is kept; repeated tokens are dropped.

    Args:
        markers: Whitespace-separated string or iterable of tokens

    Returns:
        Tuple of FieldMarker in declaration order

    Examples:
        >>> parse_markers("required maxLength:40 required")
        (FieldMarker(kind='required', parameter=None), FieldMarker(kind='maxLength', parameter='40'))
        >>> parse_markers(["confirmation:password"])[0].parameter
        'password'
        >>> parse_markers("time:12:30")[0].parameter
        '12:30'
    """
    return _parse_tokens(marker_tokens(markers))
