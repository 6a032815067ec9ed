"""
Constraint validation of whole form specifications.

Walks the element tree depth-first, carrying the element's location (which
provides the diagnostic path and the current nesting depth), and collects
every issue instead of stopping at the first.
"""

from collections.abc import Mapping, Sequence
from typing import Any, assert_never

from formspec.constraints.defaults import merge_with_defaults
from formspec.constraints.types import ConstraintConfig
from formspec.constraints.validators.field_options import (
    FieldOptionsContext,
    extract_field_options,
    validate_field_options,
)
from formspec.constraints.validators.field_types import (
    FieldTypeContext,
    validate_field_types,
)
from formspec.constraints.validators.layout import (
    LayoutContext,
    validate_layout,
    validate_nesting_depth,
)
from formspec.core.elements import (
    AnyField,
    ArrayField,
    BaseField,
    Conditional,
    FormElement,
    FormSpec,
    Group,
    ObjectField,
)
from formspec.core.issues import ValidationIssue, ValidationResult
from formspec.core.path_utils import ROOT_LOCATION, ElementLocation


def _validate_field(
    field: AnyField,
    constraints: ConstraintConfig,
    location: ElementLocation,
    issues: list[ValidationIssue],
) -> None:
    field_path = location.diagnostic_path(field.name)

    issues.extend(
        validate_field_types(
            FieldTypeContext(field_type=field.kind, field_name=field.name, path=field_path),
            constraints.field_types,
        )
    )

    present_options = extract_field_options(field)
    if present_options:
        issues.extend(
            validate_field_options(
                FieldOptionsContext(
                    field_name=field.name,
                    present_options=present_options,
                    path=field_path,
                    field_type=field.kind,
                ),
                constraints.field_options,
            )
        )

    if isinstance(field, (ArrayField, ObjectField)):
        nested = location.enter_field(field)
        issues.extend(
            validate_nesting_depth(
                nested.depth,
                constraints.layout,
                path=field_path,
                field_name=field.name,
                field_type=field.kind,
            )
        )
        _walk_elements(field.children, constraints, nested, issues)


def _walk_elements(
    elements: Sequence[FormElement],
    constraints: ConstraintConfig,
    location: ElementLocation,
    issues: list[ValidationIssue],
) -> None:
    for element in elements:
        match element:
            case Group():
                nested = location.enter_group(element)
                issues.extend(
                    validate_layout(
                        LayoutContext(
                            layout_type="group",
                            depth=location.depth,
                            label=element.label,
                            path=nested.prefix,
                        ),
                        constraints.layout,
                    )
                )
                # Groups do not add nesting depth
                _walk_elements(element.elements, constraints, nested, issues)

            case Conditional():
                nested = location.enter_conditional(element)
                issues.extend(
                    validate_layout(
                        LayoutContext(
                            layout_type="conditional",
                            depth=location.depth,
                            path=nested.prefix,
                        ),
                        constraints.layout,
                    )
                )
                _walk_elements(element.elements, constraints, nested, issues)

            case BaseField():
                _validate_field(element, constraints, location, issues)

            case _:
                assert_never(element)


def validate_form_spec_elements(
    elements: Sequence[FormElement],
    constraints: ConstraintConfig | Mapping[str, Any] | None = None,
) -> ValidationResult:
    """
    Validate form elements against constraints.

    Params:
        elements: Top-level form elements to validate
        constraints: Resolved configuration, or a partial mapping merged
            with the defaults; None allows everything

    Returns:
        ValidationResult with every issue found

    Example:
        result = validate_form_spec_elements(
            form.elements,
            {"field_types": {"dynamic_enum": "error"}, "layout": {"group": "warn"}},
        )
        if not result.valid:
            for issue in result.errors:
                print(issue)
    """
    resolved = merge_with_defaults(constraints)
    issues: list[ValidationIssue] = []
    _walk_elements(elements, resolved, ROOT_LOCATION, issues)
    return ValidationResult(issues=issues)


def validate_form_spec(
    form: FormSpec,
    constraints: ConstraintConfig | Mapping[str, Any] | None = None,
) -> ValidationResult:
    """Validate a complete form specification against constraints."""
    return validate_form_spec_elements(form.elements, constraints)
