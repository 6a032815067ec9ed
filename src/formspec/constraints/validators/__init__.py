"""Constraint validators for form specifications and UI schemas."""

from formspec.constraints.validators.field_options import (
    FIELD_OPTIONS,
    FieldOptionsContext,
    extract_field_options,
    get_field_option_severity,
    is_field_option_allowed,
    validate_field_options,
)
from formspec.constraints.validators.field_types import (
    FieldTypeContext,
    get_field_type_severity,
    is_field_type_allowed,
    validate_field_types,
)
from formspec.constraints.validators.formspec import (
    validate_form_spec,
    validate_form_spec_elements,
)
from formspec.constraints.validators.layout import (
    LayoutContext,
    is_layout_type_allowed,
    is_nesting_depth_allowed,
    validate_layout,
    validate_nesting_depth,
)
from formspec.constraints.validators.ui_schema import validate_ui_schema

__all__ = [
    "validate_form_spec",
    "validate_form_spec_elements",
    "validate_ui_schema",
    "validate_field_types",
    "validate_field_options",
    "validate_layout",
    "validate_nesting_depth",
    "extract_field_options",
    "get_field_type_severity",
    "get_field_option_severity",
    "is_field_type_allowed",
    "is_field_option_allowed",
    "is_layout_type_allowed",
    "is_nesting_depth_allowed",
    "FieldTypeContext",
    "FieldOptionsContext",
    "LayoutContext",
    "FIELD_OPTIONS",
]
