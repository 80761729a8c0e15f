"""Tests for the date format tokenizer.

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from fieldkit.dates import FormatToken, TokenKind, tokenize
from fieldkit.dates.tokens import split_input, tokenize_for_parsing
from fieldkit.diagnostics import DiagnosticCode, FormatError


def _kinds(format_string: str) -> list[TokenKind]:
    return [token.kind for token in tokenize(format_string)]


class TestTokenizeRuns:
    """Letter runs map to token kinds by length."""

    @pytest.mark.parametrize(
        ("run", "kind"),
        [
            ("d", TokenKind.DAY),
            ("dd", TokenKind.DAY2),
            ("m", TokenKind.MONTH),
            ("mm", TokenKind.MONTH2),
            ("mmm", TokenKind.MONTH_ABBR_LOWER),
            ("MMM", TokenKind.MONTH_ABBR_UPPER),
            ("Mmm", TokenKind.MONTH_ABBR_TITLE),
            ("mmmmm", TokenKind.MONTH_FULL_LOWER),
            ("MMMMM", TokenKind.MONTH_FULL_UPPER),
            ("Mmmmm", TokenKind.MONTH_FULL_TITLE),
            ("y", TokenKind.YEAR1),
            ("yy", TokenKind.YEAR2),
            ("yyyy", TokenKind.YEAR4),
            ("YYYY", TokenKind.YEAR4),
        ],
    )
    def test_single_run(self, run: str, kind: TokenKind) -> None:
        """Each supported run becomes exactly one token of its kind."""
        assert tokenize(run) == (FormatToken(kind, run),)

    def test_mixed_case_month_run_is_title(self) -> None:
        """Any mixture other than all-lower or all-upper selects title casing."""
        assert _kinds("mMm") == [TokenKind.MONTH_ABBR_TITLE]
        assert _kinds("mmmmM") == [TokenKind.MONTH_FULL_TITLE]

    def test_literals_between_runs(self) -> None:
        """Non-letter text accumulates into literal tokens."""
        tokens = tokenize("dd-mm-yyyy")
        assert [t.kind for t in tokens] == [
            TokenKind.DAY2,
            TokenKind.LITERAL,
            TokenKind.MONTH2,
            TokenKind.LITERAL,
            TokenKind.YEAR4,
        ]
        assert tokens[1].text == "-"
        assert tokens[1].is_literal

    def test_multi_character_literal(self) -> None:
        """Adjacent literal characters form one token."""
        tokens = tokenize("d, Mmmmm yyyy")
        assert tokens[1] == FormatToken(TokenKind.LITERAL, ", ")

    def test_other_letters_are_literal(self) -> None:
        """Letters other than d, m and y are literal text."""
        tokens = tokenize("d of Mmmmm")
        assert tokens[1] == FormatToken(TokenKind.LITERAL, " of ")

    def test_results_are_cached(self) -> None:
        """Tokenizing the same format twice returns the same tuple object."""
        assert tokenize("d/m/y") is tokenize("d/m/y")


class TestTokenizeErrors:
    """Unsupported runs are rejected at tokenize time."""

    @pytest.mark.parametrize("format_string", ["ddd", "mmmm", "yyy", "yyyyy", "dd-mmmm-yyyy"])
    def test_unknown_run_length(self, format_string: str) -> None:
        """Runs with no defined meaning raise FormatError."""
        with pytest.raises(FormatError) as exc_info:
            tokenize(format_string)
        assert exc_info.value.format_string == format_string
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.FORMAT_TOKEN_UNKNOWN

    def test_empty_format(self) -> None:
        """An empty format is rejected."""
        with pytest.raises(FormatError) as exc_info:
            tokenize("")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.FORMAT_EMPTY

    def test_error_message_names_run(self) -> None:
        """The error text names the offending run."""
        with pytest.raises(FormatError, match="ddd"):
            tokenize("ddd mm")


class TestTokenizeForParsing:
    """Candidate formats line up with input runs."""

    def test_lowercases_format(self) -> None:
        """Parsing tokens come from the lower-cased format."""
        kinds = [t.kind for t in tokenize_for_parsing("D MMMMM YY")]
        assert kinds[2] is TokenKind.MONTH_FULL_LOWER

    def test_literal_split_into_runs(self) -> None:
        """A literal mixing words and separators splits like input text."""
        tokens = tokenize_for_parsing("d of mmmmm")
        assert [t.text for t in tokens] == ["d", " ", "of", " ", "mmmmm"]

    def test_split_input(self) -> None:
        """Input splits into alternating word and non-word runs."""
        assert split_input("5 June, 2023") == ["5", " ", "june", ", ", "2023"]


class TestTokenizeProperties:
    """Properties of tokenize over generated formats."""

    @given(
        st.lists(
            st.sampled_from(["d", "dd", "mm", "Mmm", "mmmmm", "yy", "yyyy", "-", "/", " ", "."]),
            min_size=1,
            max_size=8,
        )
    )
    def test_tokens_concatenate_to_source(self, parts: list[str]) -> None:
        """Joining token texts reproduces the format string."""
        format_string = "".join(parts)
        try:
            tokens = tokenize(format_string)
        except FormatError:
            # Adjacent runs of one letter can merge into an unsupported length
            event("outcome=merged_run")
            return
        event(f"token_count={len(tokens)}")
        assert "".join(t.text for t in tokens) == format_string
