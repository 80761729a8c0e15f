"""Date format tokenizer.

Format strings use a small letter language:

    Run    | Token             | Renders as
    -------|-------------------|---------------------------------
    d      | DAY               | 5
    dd     | DAY2              | 05
    m      | MONTH             | 6
    mm     | MONTH2            | 06
    mmm    | MONTH_ABBR_LOWER  | jun
    MMM    | MONTH_ABBR_UPPER  | JUN
    Mmm    | MONTH_ABBR_TITLE  | Jun
    mmmmm  | MONTH_FULL_LOWER  | june
    MMMMM  | MONTH_FULL_UPPER  | JUNE
    Mmmmm  | MONTH_FULL_TITLE  | June
    y      | YEAR1             | 2023 (same as yyyy)
    yy     | YEAR2             | 23
    yyyy   | YEAR4             | 2023

Letter case does not split runs ("Mmm" is one run of three). Case only
selects the casing of month names. Every other character is literal text.
Runs of any other length ("ddd", "mmmm", "yyy") are rejected with FormatError.

Python 3.13+.
"""

import functools
import re
from dataclasses import dataclass
from enum import StrEnum

from fieldkit.constants import MAX_FORMAT_CACHE_SIZE
from fieldkit.diagnostics import ErrorTemplate, FormatError

__all__ = ["FormatToken", "TokenKind", "split_input", "tokenize", "tokenize_for_parsing"]

_TOKEN_LETTERS = frozenset("dmy")

# Literal text is matched against input runs of word / non-word characters.
_RUN_PATTERN = re.compile(r"\w+|\W+")


class TokenKind(StrEnum):
    """Kind of a format token."""

    DAY = "day"
    DAY2 = "day2"
    MONTH = "month"
    MONTH2 = "month2"
    MONTH_ABBR_LOWER = "month_abbr_lower"
    MONTH_ABBR_UPPER = "month_abbr_upper"
    MONTH_ABBR_TITLE = "month_abbr_title"
    MONTH_FULL_LOWER = "month_full_lower"
    MONTH_FULL_UPPER = "month_full_upper"
    MONTH_FULL_TITLE = "month_full_title"
    YEAR1 = "year1"
    YEAR2 = "year2"
    YEAR4 = "year4"
    LITERAL = "literal"

    @property
    def is_month_abbreviation(self) -> bool:
        """True for the three abbreviated month name kinds."""
        return self in _ABBR_KINDS

    @property
    def is_month_name(self) -> bool:
        """True for the three full month name kinds."""
        return self in _FULL_KINDS


_ABBR_KINDS = frozenset(
    {TokenKind.MONTH_ABBR_LOWER, TokenKind.MONTH_ABBR_UPPER, TokenKind.MONTH_ABBR_TITLE}
)
_FULL_KINDS = frozenset(
    {TokenKind.MONTH_FULL_LOWER, TokenKind.MONTH_FULL_UPPER, TokenKind.MONTH_FULL_TITLE}
)


@dataclass(frozen=True, slots=True)
class FormatToken:
    """One token of a tokenized format string.

    Attributes:
        kind: Token kind
        text: Source text of the token (the letter run, or the literal text)
    """

    kind: TokenKind
    text: str

    @property
    def is_literal(self) -> bool:
        """True for literal text tokens."""
        return self.kind is TokenKind.LITERAL


def _month_kind(run: str, lower: TokenKind, upper: TokenKind, title: TokenKind) -> TokenKind:
    if run.islower():
        return lower
    if run.isupper():
        return upper
    return title


def _kind_for_run(run: str, format_string: str) -> TokenKind:
    """Map a letter run to its token kind.

    Raises:
        FormatError: If the run length has no defined meaning
    """
    letter = run[0].lower()
    length = len(run)
    match (letter, length):
        case ("d", 1):
            return TokenKind.DAY
        case ("d", 2):
            return TokenKind.DAY2
        case ("m", 1):
            return TokenKind.MONTH
        case ("m", 2):
            return TokenKind.MONTH2
        case ("m", 3):
            return _month_kind(
                run,
                TokenKind.MONTH_ABBR_LOWER,
                TokenKind.MONTH_ABBR_UPPER,
                TokenKind.MONTH_ABBR_TITLE,
            )
        case ("m", 5):
            return _month_kind(
                run,
                TokenKind.MONTH_FULL_LOWER,
                TokenKind.MONTH_FULL_UPPER,
                TokenKind.MONTH_FULL_TITLE,
            )
        case ("y", 1):
            return TokenKind.YEAR1
        case ("y", 2):
            return TokenKind.YEAR2
        case ("y", 4):
            return TokenKind.YEAR4
        case _:
            raise FormatError(
                ErrorTemplate.format_token_unknown(run, format_string),
                format_string=format_string,
            )


@functools.lru_cache(maxsize=MAX_FORMAT_CACHE_SIZE)
def tokenize(format_string: str) -> tuple[FormatToken, ...]:
    """Split a format string into tokens.

    Results are cached per format string.

    Args:
        format_string: Format such as "dd-mm-yyyy" or "d Mmmmm yyyy"

    Returns:
        Tuple of tokens in source order

    Raises:
        FormatError: If the format is empty or contains an unknown letter run

    Examples:
        >>> [t.kind.value for t in tokenize("dd-mm-yyyy")]
        ['day2', 'literal', 'month2', 'literal', 'year4']
        >>> tokenize("Mmm")[0].kind
        <TokenKind.MONTH_ABBR_TITLE: 'month_abbr_title'>
    """
    if not format_string:
        raise FormatError(ErrorTemplate.format_empty(), format_string=format_string)

    tokens: list[FormatToken] = []
    i = 0
    n = len(format_string)

    while i < n:
        letter = format_string[i].lower()

        if letter in _TOKEN_LETTERS:
            j = i + 1
            while j < n and format_string[j].lower() == letter:
                j += 1
            run = format_string[i:j]
            tokens.append(FormatToken(_kind_for_run(run, format_string), run))
            i = j
            continue

        j = i + 1
        while j < n and format_string[j].lower() not in _TOKEN_LETTERS:
            j += 1
        tokens.append(FormatToken(TokenKind.LITERAL, format_string[i:j]))
        i = j

    return tuple(tokens)


@functools.lru_cache(maxsize=MAX_FORMAT_CACHE_SIZE)
def tokenize_for_parsing(format_string: str) -> tuple[FormatToken, ...]:
    """Tokenize a candidate format the way input strings are split.

    The format is lower-cased (names and literals match case-insensitively)
    and literal tokens are split into alternating word / non-word runs so
    that each token lines up with exactly one run of the input string.

    Raises:
        FormatError: If the format is empty or contains an unknown letter run
    """
    tokens: list[FormatToken] = []
    for token in tokenize(format_string.lower()):
        if token.is_literal:
            tokens.extend(
                FormatToken(TokenKind.LITERAL, part) for part in _RUN_PATTERN.findall(token.text)
            )
        else:
            tokens.append(token)
    return tuple(tokens)


def split_input(value: str) -> list[str]:
    """Split an input string into alternating word / non-word runs (lower-cased)."""
    return _RUN_PATTERN.findall(value.lower())
