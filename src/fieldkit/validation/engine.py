"""Field and form validation.

validate_field() steps:
    1. Disabled fields are valid; nothing else happens.
    2. With use_titles, the field's title seeds the error list (split on
       title_separator); this carries server-side messages.
    3. With strip_fields, text and password values are stripped unless the
       field carries the strip_skip_marker.
    4. Rules run in registry order, each only when the field carries a
       marker of the rule's key. With first_message_only, evaluation stops
       as soon as the error list is non-empty.

Validation failures are values (ValidationResult), never exceptions.

Python 3.13+.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from fieldkit.constants import DEFAULT_ERROR_SEPARATOR
from fieldkit.dates import CalendarDate

from .config import ValidatorConfig
from .model import Field, Form
from .rules import RuleContext, RuleRegistry, create_default_registry

__all__ = ["FormValidator", "ValidationResult"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Ordered messages for one field; no messages means valid.

    Example:
        >>> ValidationResult(("Field is required",)).is_valid
        False
        >>> ValidationResult(("a", "b")).joined(", ")
        'a, b'
    """

    errors: tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        """True when there are no messages."""
        return not self.errors

    def joined(self, separator: str = DEFAULT_ERROR_SEPARATOR) -> str:
        """Messages joined for display."""
        return separator.join(self.errors)


class FormValidator:
    """Declarative field validator.

    Example:
        >>> validator = FormValidator()
        >>> validator.validate_field(Field("name", "", markers="required")).errors
        ('Field is required',)
        >>> field = Field("born", "5 jun 23", markers="date")
        >>> validator.validate_field(field).is_valid
        True
        >>> field.value
        '2023/06/05'
    """

    __slots__ = ("_clock", "_submitted", "config", "registry")

    def __init__(
        self,
        config: ValidatorConfig | None = None,
        registry: RuleRegistry | None = None,
        *,
        clock: Callable[[], CalendarDate] = CalendarDate.today,
    ) -> None:
        """Initialize validator.

        Args:
            config: Validator configuration (default: ValidatorConfig())
            registry: Rules to apply (default: the built-in rules)
            clock: Source of today's date for partial dates
        """
        self.config = config or ValidatorConfig()
        self.registry = registry if registry is not None else create_default_registry()
        self._clock = clock
        self._submitted = False

    def __repr__(self) -> str:
        return f"FormValidator(rules={len(self.registry)}, submitted={self._submitted})"

    @property
    def submitted(self) -> bool:
        """True once submit() has handed a form to its callback."""
        return self._submitted

    def validate_field(self, field: Field, form: Form | None = None) -> ValidationResult:
        """Validate one field.

        Args:
            field: Field to validate; its value may be stripped or rewritten
            form: Form holding companion fields (confirmation, radio groups)

        Returns:
            ValidationResult with messages in evaluation order

        Raises:
            ConfigurationError: If the locale table lacks a needed message
            RuleError: If a rule raises TypeError or ValueError
        """
        if field.disabled:
            return ValidationResult()

        config = self.config
        errors: list[str] = []
        if config.use_titles and field.title:
            errors = field.title.split(config.title_separator)

        if (
            config.strip_fields
            and field.kind.is_text_like
            and not field.has_marker(config.strip_skip_marker)
        ):
            field.value = field.value.strip()

        parameters: dict[str, str | None] = {}
        for marker in field.parsed_markers:
            parameters.setdefault(marker.kind, marker.parameter)

        context = RuleContext(config=config, form=form, today=self._clock())
        for key in self.registry:
            if errors and config.first_message_only:
                break
            if key not in parameters:
                continue
            message = self.registry.evaluate(key, field, parameters[key], context)
            if message:
                logger.debug("Rule '%s' rejected field '%s'", key, field.name)
                errors.append(message)

        return ValidationResult(tuple(errors))

    def is_form_valid(self, form: Form) -> bool:
        """Validate every field of a form.

        Every field is validated (no early exit), so each one gets its value
        normalized even after an earlier field failed. The browser widget
        stopped at the first invalid field; callers that counted on fields
        after it being left untouched (unstripped, date not rewritten, rules
        not run) must call validate_field themselves.
        """
        results = [self.validate_field(field, form) for field in form]
        return all(result.is_valid for result in results)

    def submit(self, form: Form, on_submit: Callable[[Form], None]) -> bool:
        """Validate a form and hand it to ``on_submit`` when valid.

        The callback runs at most once per validator; later calls return
        False without calling it again.

        Returns:
            True when the form was valid and handed over by this call
        """
        if self.is_form_valid(form) and not self._submitted:
            self._submitted = True
            logger.debug("Submitting form with %d fields", len(form))
            on_submit(form)
            return True
        return False
