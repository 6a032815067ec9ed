"""
FormSpec constraint checking.

This package checks form specifications (and the UI schemas generated from
them) against a severity-graded capability configuration, typically loaded
from a `.formspec.yml` file.
"""

from formspec.constraints.defaults import (
    DEFAULT_CONSTRAINTS,
    define_constraints,
    merge_with_defaults,
)
from formspec.constraints.loader import (
    CONFIG_FILE_NAMES,
    LoadConfigResult,
    find_config_file,
    load_config,
    load_config_from_string,
)
from formspec.constraints.types import (
    ConstraintConfig,
    ControlOptionConstraints,
    FieldOptionConstraints,
    FieldTypeConstraints,
    LayoutConstraints,
    LayoutTypeConstraints,
    RuleConstraints,
    RuleEffectConstraints,
    Severity,
    UISchemaConstraints,
)
from formspec.constraints.validators import (
    validate_form_spec,
    validate_form_spec_elements,
    validate_ui_schema,
)

__all__ = [
    "Severity",
    "ConstraintConfig",
    "FieldTypeConstraints",
    "LayoutConstraints",
    "LayoutTypeConstraints",
    "RuleConstraints",
    "RuleEffectConstraints",
    "UISchemaConstraints",
    "FieldOptionConstraints",
    "ControlOptionConstraints",
    "DEFAULT_CONSTRAINTS",
    "merge_with_defaults",
    "define_constraints",
    "CONFIG_FILE_NAMES",
    "LoadConfigResult",
    "find_config_file",
    "load_config",
    "load_config_from_string",
    "validate_form_spec",
    "validate_form_spec_elements",
    "validate_ui_schema",
]
