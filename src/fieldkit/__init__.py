"""fieldkit - UI-independent cores of a date picker and a form validator.

Provides a tokenized date format mini-language shared by both widgets,
month-to-week calendar grids with ISO week numbers, and a declarative,
marker-driven field validator with locale-aware numeric and date checks.

Public API:
    DatePicker, PickerConfig - Date picker widget core
    FormValidator, ValidatorConfig - Form validator
    Field, Form, ValidationResult - Form model and results
    CalendarDate - Validated naive Gregorian date (0-based month)
    format_date, parse_date - Date format engine
    build_grid - Calendar grid layout
    LocaleTable, CountryPreset - Locale names, messages and country defaults

Exceptions:
    FieldkitError - Base exception class
    FormatError - Unknown token in a format string
    ParseError - No candidate format matched (returned, not raised)
    ConfigurationError - Malformed configuration
    RuleError - Rule lookup or evaluation failed

Submodules:
    fieldkit.dates - Tokenizer, formatting and parsing
    fieldkit.calendar - Grid builder, navigation and the picker
    fieldkit.validation - Markers, rules, registry and the validator
    fieldkit.localization - Locale tables (built-in and Babel/CLDR) and presets
    fieldkit.diagnostics - Diagnostic codes, templates and exceptions
"""

from .calendar import DatePicker, PickerConfig, build_grid
from .dates import CalendarDate, FormatSpec, format_date, parse_date
from .diagnostics import (
    ConfigurationError,
    FieldkitError,
    FormatError,
    ParseError,
    RuleError,
)
from .localization import CountryPreset, LocaleTable
from .validation import Field, Form, FormValidator, ValidationResult, ValidatorConfig

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("fieldkit")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CalendarDate",
    "ConfigurationError",
    "CountryPreset",
    "DatePicker",
    "Field",
    "FieldkitError",
    "Form",
    "FormValidator",
    "FormatError",
    "FormatSpec",
    "LocaleTable",
    "ParseError",
    "PickerConfig",
    "RuleError",
    "ValidationResult",
    "ValidatorConfig",
    "__version__",
    "build_grid",
    "format_date",
    "parse_date",
]
