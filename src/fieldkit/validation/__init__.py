"""Rule-driven form field validation.

Public API:
    FormValidator: validate_field(), is_form_valid(), submit()
    ValidatorConfig: Locale, separators, policy flags
    ValidationResult: Ordered messages for one field
    Field, Form: Form model
    RuleRegistry, ValidationRule, RuleContext: Rule plumbing
    create_default_registry: Registry holding the built-in rules
    FieldMarker, parse_markers: Marker parsing
    is_numeric, leading_integer: Numeric grammar
    substitute, render_optional: Message templates

Python 3.13+.
"""

from .config import ValidatorConfig
from .engine import FormValidator, ValidationResult
from .markers import FieldMarker, parse_markers
from .messages import render_optional, substitute
from .model import Field, Form
from .numeric import is_numeric, leading_integer
from .rules import (
    RuleContext,
    RuleFunction,
    RuleRegistry,
    ValidationRule,
    create_default_registry,
)

__all__ = [
    "Field",
    "FieldMarker",
    "Form",
    "FormValidator",
    "RuleContext",
    "RuleFunction",
    "RuleRegistry",
    "ValidationResult",
    "ValidationRule",
    "ValidatorConfig",
    "create_default_registry",
    "is_numeric",
    "leading_integer",
    "parse_markers",
    "render_optional",
    "substitute",
]
