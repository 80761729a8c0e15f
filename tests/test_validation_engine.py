"""Tests for FormValidator.

Python 3.13+.
"""

from __future__ import annotations

import logging

import pytest

from fieldkit.diagnostics import RuleError
from fieldkit.enums import InputKind
from fieldkit.validation import (
    Field,
    Form,
    FormValidator,
    RuleContext,
    RuleRegistry,
    ValidationResult,
    ValidatorConfig,
)
from fieldkit.validation import rules

from tests.strategies import FIXED_TODAY

REQUIRED = "Field is required"
TOO_SHORT_0 = "Value is too short (minimum length is 2, length is 0)"


def _validator(registry: RuleRegistry | None = None, **overrides: object) -> FormValidator:
    config = ValidatorConfig(**overrides)  # type: ignore[arg-type]
    return FormValidator(config, registry, clock=lambda: FIXED_TODAY)


class TestValidationResult:
    """Result value."""

    def test_valid(self) -> None:
        """No messages means valid."""
        assert ValidationResult().is_valid

    def test_joined_default_separator(self) -> None:
        """Messages join with the HTML line break by default."""
        assert ValidationResult(("a", "b")).joined() == "a<br />b"


class TestValidateField:
    """Single-field validation steps."""

    def test_disabled_is_valid(self) -> None:
        """Disabled fields skip titles and rules."""
        field = Field("a", "", markers="required", title="server error", disabled=True)  # type: ignore[arg-type]
        assert _validator().validate_field(field).is_valid

    def test_unmarked_field_is_valid(self) -> None:
        """Fields without rule markers pass."""
        assert _validator().validate_field(Field("a", "")).is_valid

    def test_unknown_markers_ignored(self) -> None:
        """Markers without a rule are plain flags."""
        field = Field("a", "x", markers="highlight noStrip")  # type: ignore[arg-type]
        assert _validator().validate_field(field).is_valid

    def test_title_seeds_errors(self) -> None:
        """Server messages in the title come first and stop further rules."""
        field = Field("a", "", markers="required", title="Taken|Try again")  # type: ignore[arg-type]
        assert _validator().validate_field(field).errors == ("Taken", "Try again")

    def test_title_then_rules(self) -> None:
        """With every message shown, rule messages follow the title's."""
        field = Field("a", "", markers="required", title="Taken")  # type: ignore[arg-type]
        result = _validator(first_message_only=False).validate_field(field)
        assert result.errors == ("Taken", REQUIRED)

    def test_titles_disabled(self) -> None:
        """use_titles=False ignores the title."""
        field = Field("a", "x", title="Taken")
        assert _validator(use_titles=False).validate_field(field).is_valid

    def test_custom_title_separator(self) -> None:
        """The title separator is configurable."""
        field = Field("a", "x", title="one;two")
        assert _validator(title_separator=";").validate_field(field).errors == ("one", "two")

    def test_strips_text(self) -> None:
        """Text values are stripped before rules run."""
        field = Field("a", "  abc  ", markers="maxLength:3")  # type: ignore[arg-type]
        assert _validator().validate_field(field).is_valid
        assert field.value == "abc"

    def test_whitespace_only_is_empty(self) -> None:
        """Stripping turns whitespace into an empty value."""
        field = Field("a", "   ", markers="required")  # type: ignore[arg-type]
        assert _validator().validate_field(field).errors == (REQUIRED,)

    def test_no_strip_marker(self) -> None:
        """The skip marker keeps surrounding whitespace."""
        field = Field("a", " abc ", markers="maxLength:3 noStrip")  # type: ignore[arg-type]
        assert not _validator().validate_field(field).is_valid
        assert field.value == " abc "

    def test_strip_disabled(self) -> None:
        """strip_fields=False keeps values as typed."""
        field = Field("a", " x ")
        _validator(strip_fields=False).validate_field(field)
        assert field.value == " x "

    def test_textarea_not_stripped(self) -> None:
        """Only text and password values are stripped."""
        field = Field("a", " x ", kind=InputKind.TEXTAREA)
        _validator().validate_field(field)
        assert field.value == " x "

    def test_first_marker_of_kind_wins(self) -> None:
        """Only the first parameter of a repeated kind is used."""
        field = Field("a", "abcd", markers="maxLength:3 maxLength:5")  # type: ignore[arg-type]
        result = _validator().validate_field(field)
        assert result.errors == ("Value is too long (maximum length is 3, length is 4)",)

    def test_date_value_rewritten(self) -> None:
        """The date rule normalizes the field value."""
        field = Field("born", "23/6/5", markers="date")  # type: ignore[arg-type]
        assert _validator().validate_field(field).is_valid
        assert field.value == "2023/06/05"

    def test_logs_rejections(self, caplog: pytest.LogCaptureFixture) -> None:
        """Each rejecting rule is logged at debug level."""
        field = Field("email", "", markers="required")  # type: ignore[arg-type]
        with caplog.at_level(logging.DEBUG, logger="fieldkit.validation.engine"):
            _validator().validate_field(field)
        assert "Rule 'required' rejected field 'email'" in caplog.text

    def test_rule_error_propagates(self) -> None:
        """A rule raising ValueError surfaces as RuleError."""

        def strict(field: Field, parameter: str | None, context: RuleContext) -> str:
            return "" if int(parameter or "") else "zero"

        registry = RuleRegistry()
        registry.register(strict)
        field = Field("a", "x", markers="strict:abc")  # type: ignore[arg-type]
        with pytest.raises(RuleError):
            _validator(registry).validate_field(field)


class TestRuleOrder:
    """Registry order decides which message is shown."""

    def test_default_order_reports_length_before_required(self) -> None:
        """minLength is registered before required."""
        field = Field("a", "", markers="required minLength:2")  # type: ignore[arg-type]
        assert _validator().validate_field(field).errors == (TOO_SHORT_0,)

    def test_marker_order_is_irrelevant(self) -> None:
        """Declaring required first does not change the order."""
        field = Field("a", "", markers="minLength:2 required")  # type: ignore[arg-type]
        assert _validator().validate_field(field).errors == (TOO_SHORT_0,)

    def test_custom_registry_order(self) -> None:
        """A registry with required first reports required first."""
        registry = RuleRegistry()
        registry.register(rules.required)
        registry.register(rules.min_length)
        field = Field("a", "", markers="required minLength:2")  # type: ignore[arg-type]
        assert _validator(registry).validate_field(field).errors == (REQUIRED,)

    def test_all_messages(self) -> None:
        """first_message_only=False collects every message in registry order."""
        field = Field("a", "", markers="required minLength:2")  # type: ignore[arg-type]
        result = _validator(first_message_only=False).validate_field(field)
        assert result.errors == (TOO_SHORT_0, REQUIRED)


class TestFormValidation:
    """Whole-form validation and submission."""

    @staticmethod
    def _signup(password_again: str) -> Form:
        return Form(
            [
                Field("email", " user@example.com ", markers="required email"),  # type: ignore[arg-type]
                Field("password", "s3cret!", markers="required minLength:6", label="Password"),  # type: ignore[arg-type]
                Field("again", password_again, markers="confirmation:password"),  # type: ignore[arg-type]
                Field(
                    "agree",
                    kind=InputKind.CHECKBOX,
                    checked=True,
                    markers="required",  # type: ignore[arg-type]
                ),
            ]
        )

    def test_valid_form(self) -> None:
        """A consistent form is valid and normalized."""
        form = self._signup("s3cret!")
        assert _validator().is_form_valid(form)
        email = form.get("email")
        assert email is not None
        assert email.value == "user@example.com"

    def test_confirmation_across_fields(self) -> None:
        """The confirmation message names the companion's label."""
        form = self._signup("different")
        validator = _validator()
        assert not validator.is_form_valid(form)
        again = form.get("again")
        assert again is not None
        assert validator.validate_field(again, form).errors == (
            'Field should be a confirmation of "Password"',
        )

    def test_every_field_validated(self) -> None:
        """Fields after a failing one are still normalized."""
        form = Form(
            [
                Field("first", "", markers="required"),  # type: ignore[arg-type]
                Field("second", "  padded  "),
            ]
        )
        assert not _validator().is_form_valid(form)
        assert form.fields[1].value == "padded"

    def test_submit_once(self) -> None:
        """on_submit runs once, for the first valid submission."""
        submitted: list[Form] = []
        validator = _validator()
        form = self._signup("s3cret!")
        assert validator.submit(form, submitted.append)
        assert not validator.submit(form, submitted.append)
        assert submitted == [form]
        assert validator.submitted

    def test_invalid_form_not_submitted(self) -> None:
        """An invalid form never reaches on_submit."""
        submitted: list[Form] = []
        validator = _validator()
        assert not validator.submit(self._signup("nope"), submitted.append)
        assert submitted == []
        assert not validator.submitted
        assert validator.submit(self._signup("s3cret!"), submitted.append)

    def test_radio_group_required(self) -> None:
        """A required radio passes once any radio of its group is checked."""
        red = Field("colour", kind=InputKind.RADIO, markers="required")  # type: ignore[arg-type]
        blue = Field("colour", kind=InputKind.RADIO)
        form = Form([red, blue])
        validator = _validator()
        assert not validator.is_form_valid(form)
        blue.checked = True
        assert validator.is_form_valid(form)
