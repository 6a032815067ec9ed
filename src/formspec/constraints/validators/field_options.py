"""
Field option validation against constraint configuration.

Only options that are present on a field are checked; an option the author
did not set can never violate a constraint.
"""

from dataclasses import dataclass

from formspec.constraints.types import FieldOptionConstraints, Severity, severity_for
from formspec.core.elements import AnyField
from formspec.core.issues import IssueCategory, IssueCode, ValidationIssue

FIELD_OPTIONS: tuple[str, ...] = (
    "label",
    "placeholder",
    "required",
    "min_value",
    "max_value",
    "min_items",
    "max_items",
)

# Field attributes mapped to the option they count as
_OPTION_ATTRIBUTES: tuple[tuple[str, str], ...] = (
    ("label", "label"),
    ("placeholder", "placeholder"),
    ("required", "required"),
    ("min", "min_value"),
    ("max", "max_value"),
    ("min_items", "min_items"),
    ("max_items", "max_items"),
)


@dataclass(frozen=True)
class FieldOptionsContext:
    """
    Context for field option validation.

    Params:
        field_name: The field name
        present_options: Options set on the field
        path: Diagnostic path of the field; defaults to its name
        field_type: The field `kind`, when known
    """

    field_name: str
    present_options: tuple[str, ...]
    path: str | None = None
    field_type: str | None = None


def extract_field_options(field: AnyField) -> tuple[str, ...]:
    """
    List the options set on a field.

    `required` counts only when set explicitly, in either direction.

    Params:
        field: Any field element

    Returns:
        Present option names, in FIELD_OPTIONS order
    """
    return tuple(
        option
        for attribute, option in _OPTION_ATTRIBUTES
        if getattr(field, attribute, None) is not None
    )


def get_field_option_severity(option: str, constraints: FieldOptionConstraints) -> Severity:
    return severity_for(constraints, option)


def is_field_option_allowed(option: str, constraints: FieldOptionConstraints) -> bool:
    return get_field_option_severity(option, constraints) is Severity.OFF


def validate_field_options(
    context: FieldOptionsContext, constraints: FieldOptionConstraints
) -> list[ValidationIssue]:
    """
    Validate the options present on a field against constraints.

    Params:
        context: Information about the field and its options
        constraints: Field option constraints

    Returns:
        One issue per present and disallowed option
    """
    issues = []
    for option in context.present_options:
        issue_severity = get_field_option_severity(option, constraints).issue_severity
        if issue_severity is None:
            continue
        issues.append(
            ValidationIssue(
                code=IssueCode.DISALLOWED_FIELD_OPTION,
                message=(
                    f'Field "{context.field_name}" uses the "{option}" option, '
                    "which is not allowed in this project"
                ),
                severity=issue_severity,
                category=IssueCategory.FIELD_OPTIONS,
                path=context.path or context.field_name,
                field_name=context.field_name,
                field_type=context.field_type,
            )
        )
    return issues
