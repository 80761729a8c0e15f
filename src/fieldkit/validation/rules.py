"""Validation rules and the ordered rule registry.

A rule is a function ``(field, parameter, context) -> str`` returning the
empty string when the field passes and a rendered message otherwise.
``parameter`` is the text after the colon of the field's marker
(``"40"`` for ``maxLength:40``) or None.

Architecture:
    - RuleRegistry: insertion-ordered key -> rule mapping; the order decides
      evaluation order and, with first_message_only, which message wins
    - Default keys are generated from function names (min_length -> minLength)
    - Rule exceptions are wrapped in RuleError at call time

Built-in rules, in registration order:

    Key          | Checks                                      | Applies to
    -------------|---------------------------------------------|----------------------
    confirmation | value equals the named companion field      | text, password
    date         | value parses; rewrites it to date_format    | text, password, non-empty
    email        | local@domain.tld grammar                    | text, password, non-empty
    maxLength    | length <= parameter                         | text, password
    maxValue     | numeric and leading integer <= parameter    | text, password, non-empty
    minLength    | length >= parameter                         | text, password
    minValue     | numeric and leading integer >= parameter    | text, password, non-empty
    numeric      | locale numeric grammar                      | text, password, non-empty
    required     | checked / any radio checked / non-empty     | every kind

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from fieldkit.constants import VALUE_PLACEHOLDER
from fieldkit.dates import CalendarDate, format_date, parse_date
from fieldkit.diagnostics import ErrorTemplate, RuleError
from fieldkit.enums import InputKind

from .messages import render_optional, substitute
from .numeric import is_numeric, leading_integer

if TYPE_CHECKING:
    from .config import ValidatorConfig
    from .model import Field, Form

__all__ = [
    "RuleContext",
    "RuleFunction",
    "RuleRegistry",
    "ValidationRule",
    "confirmation",
    "create_default_registry",
    "date",
    "email",
    "max_length",
    "max_value",
    "min_length",
    "min_value",
    "numeric",
    "required",
]

logger = logging.getLogger(__name__)

RuleFunction: TypeAlias = "Callable[[Field, str | None, RuleContext], str]"

_EMAIL = re.compile(r"([a-zA-Z0-9_.\-])+@(([a-zA-Z0-9\-])+\.)+([a-zA-Z0-9]{2,4})+")
_INTEGER_PARAMETER = re.compile(r"\d+")


@dataclass(frozen=True, slots=True)
class RuleContext:
    """What a rule may consult besides the field itself.

    Attributes:
        config: Validator configuration (locale, separators, date formats)
        form: Form the field belongs to, or None for a lone field
        today: Reference date for parsing partial dates
    """

    config: ValidatorConfig
    form: Form | None
    today: CalendarDate

    def message(self, key: str, **values: object) -> str:
        """Render the locale's message template for ``key``."""
        return substitute(self.config.locale.message(key), **values)


@dataclass(frozen=True, slots=True)
class ValidationRule:
    """A registered rule.

    Attributes:
        key: Marker kind that triggers the rule
        evaluate: The rule function
    """

    key: str
    evaluate: RuleFunction


class RuleRegistry:
    """Ordered mapping of marker kinds to rules.

    Registering an existing key replaces the rule but keeps its position.

    Example:
        >>> registry = RuleRegistry()
        >>> registry.register(lambda field, parameter, context: "", key="postcode")
        >>> "postcode" in registry
        True
        >>> list(registry)
        ['postcode']
    """

    __slots__ = ("_rules",)

    def __init__(self) -> None:
        """Initialize empty rule registry."""
        self._rules: dict[str, ValidationRule] = {}

    def register(self, func: RuleFunction, *, key: str | None = None) -> None:
        """Register a rule.

        Args:
            func: Rule function
            key: Marker kind (default: camelCase of the function name)
        """
        if key is None:
            key = self._to_camel_case(getattr(func, "__name__", "unknown"))
        self._rules[key] = ValidationRule(key=key, evaluate=func)

    def unregister(self, key: str) -> None:
        """Remove a rule.

        Raises:
            RuleError: If no rule is registered under ``key``
        """
        if key not in self._rules:
            raise RuleError(ErrorTemplate.rule_not_found(key), rule_key=key)
        del self._rules[key]

    def get(self, key: str) -> ValidationRule | None:
        """Return the rule for ``key``, or None."""
        return self._rules.get(key)

    def rules(self) -> tuple[ValidationRule, ...]:
        """Registered rules in evaluation order."""
        return tuple(self._rules.values())

    def evaluate(
        self,
        key: str,
        field: Field,
        parameter: str | None,
        context: RuleContext,
    ) -> str:
        """Run one rule against a field.

        Returns:
            Empty string when the field passes, else the message

        Raises:
            RuleError: If the rule is unknown, or raises TypeError/ValueError
        """
        rule = self._rules.get(key)
        if rule is None:
            raise RuleError(ErrorTemplate.rule_not_found(key), rule_key=key)

        # Only TypeError and ValueError indicate a bad marker parameter or a
        # bad rule signature; anything else is a bug and propagates.
        try:
            return rule.evaluate(field, parameter, context)
        except (TypeError, ValueError) as e:
            raise RuleError(ErrorTemplate.rule_failed(key, str(e)), rule_key=key) from e

    def __iter__(self) -> Iterator[str]:
        """Iterate over rule keys in evaluation order."""
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, key: object) -> bool:
        return key in self._rules

    def __repr__(self) -> str:
        return f"RuleRegistry(rules={list(self._rules)!r})"

    def copy(self) -> RuleRegistry:
        """Create a shallow copy; registering on the copy leaves this one alone."""
        new_registry = RuleRegistry()
        new_registry._rules = self._rules.copy()
        return new_registry

    @staticmethod
    def _to_camel_case(snake_case: str) -> str:
        """Convert a snake_case function name to a camelCase marker kind.

        Examples:
            >>> RuleRegistry._to_camel_case("max_length")
            'maxLength'
            >>> RuleRegistry._to_camel_case("required")
            'required'
        """
        components = snake_case.strip("_").split("_")
        return components[0] + "".join(comp.capitalize() for comp in components[1:])


# ----------------------------------------------------------------------
# Built-in rules
# ----------------------------------------------------------------------


def _integer_parameter(parameter: str | None) -> int | None:
    if parameter is None or not _INTEGER_PARAMETER.fullmatch(parameter):
        return None
    return int(parameter)


def _placeholder(value: int | None) -> object:
    return VALUE_PLACEHOLDER if value is None else value


def confirmation(field: Field, parameter: str | None, context: RuleContext) -> str:
    """Value must equal the value of the field named by the parameter.

    A missing companion field counts as a mismatch. The optional block of
    the message is kept when the companion has a label.
    """
    if not field.kind.is_text_like:
        return ""
    companion = None
    if parameter and context.form is not None:
        companion = context.form.get(parameter)
    if companion is not None and field.value == companion.value:
        return ""
    label = companion.label if companion is not None else None
    return render_optional(context.config.locale.message("confirmation"), label)


def date(field: Field, parameter: str | None, context: RuleContext) -> str:
    """Value must parse as a date; on success it is rewritten to date_format."""
    if not field.kind.is_text_like or not field.value:
        return ""
    config = context.config
    result, _errors = parse_date(field.value, config.format_spec, config.locale, today=context.today)
    if result is None:
        return context.message("date")
    field.value = format_date(result, config.format_spec, config.locale)
    return ""


def email(field: Field, parameter: str | None, context: RuleContext) -> str:
    """Value must look like an e-mail address."""
    if not field.kind.is_text_like or not field.value:
        return ""
    return "" if _EMAIL.fullmatch(field.value) else context.message("email")


def max_length(field: Field, parameter: str | None, context: RuleContext) -> str:
    """Value must not be longer than the parameter."""
    if not field.kind.is_text_like:
        return ""
    limit = _integer_parameter(parameter)
    length = len(field.value)
    if limit is not None and length <= limit:
        return ""
    return context.message("maxLength", maxLength=_placeholder(limit), length=length)


def min_length(field: Field, parameter: str | None, context: RuleContext) -> str:
    """Value must not be shorter than the parameter."""
    if not field.kind.is_text_like:
        return ""
    limit = _integer_parameter(parameter)
    length = len(field.value)
    if limit is not None and length >= limit:
        return ""
    return context.message("minLength", minLength=_placeholder(limit), length=length)


def _numeric_value(field: Field, context: RuleContext) -> int | None:
    config = context.config
    if not is_numeric(field.value, config.group_separator, config.decimal_separator):
        return None
    return leading_integer(field.value)


def max_value(field: Field, parameter: str | None, context: RuleContext) -> str:
    """Value must be numeric, with a leading integer not above the parameter."""
    if not field.kind.is_text_like or not field.value:
        return ""
    limit = _integer_parameter(parameter)
    value = _numeric_value(field, context)
    if limit is not None and value is not None and value <= limit:
        return ""
    return context.message("maxValue", maxValue=_placeholder(limit), value=_placeholder(value))


def min_value(field: Field, parameter: str | None, context: RuleContext) -> str:
    """Value must be numeric, with a leading integer not below the parameter."""
    if not field.kind.is_text_like or not field.value:
        return ""
    limit = _integer_parameter(parameter)
    value = _numeric_value(field, context)
    if limit is not None and value is not None and value >= limit:
        return ""
    return context.message("minValue", minValue=_placeholder(limit), value=_placeholder(value))


def numeric(field: Field, parameter: str | None, context: RuleContext) -> str:
    """Value must match the locale's numeric grammar."""
    if not field.kind.is_text_like or not field.value:
        return ""
    config = context.config
    if is_numeric(field.value, config.group_separator, config.decimal_separator):
        return ""
    return context.message("numeric")


def required(field: Field, parameter: str | None, context: RuleContext) -> str:
    """Check box checked, some radio of the group checked, or a non-empty value."""
    match field.kind:
        case InputKind.CHECKBOX:
            missing = not field.checked
        case InputKind.RADIO:
            group = context.form.radio_group(field.group_name) if context.form else ()
            missing = not any(radio.checked for radio in group or (field,))
        case _:
            missing = not field.value
    return context.message("required") if missing else ""


def create_default_registry() -> RuleRegistry:
    """Create a registry holding the built-in rules.

    Returns a fresh registry on each call; register custom rules on it
    without affecting other validators.
    """
    registry = RuleRegistry()
    for rule in (
        confirmation,
        date,
        email,
        max_length,
        max_value,
        min_length,
        min_value,
        numeric,
        required,
    ):
        registry.register(rule)
    return registry
