"""Field kind validation against constraint configuration."""

from dataclasses import dataclass

from formspec.constraints.types import FieldTypeConstraints, Severity
from formspec.core.issues import IssueCategory, IssueCode, ValidationIssue

# Field `kind` values mapped to FieldTypeConstraints attribute names
FIELD_TYPE_CONSTRAINT_KEYS: dict[str, str] = {
    "text": "text",
    "number": "number",
    "boolean": "boolean",
    "enum": "static_enum",
    "dynamic_enum": "dynamic_enum",
    "dynamic_schema": "dynamic_schema",
    "array": "array",
    "object": "object",
}

FIELD_TYPE_NAMES: dict[str, str] = {
    "text": "text field",
    "number": "number field",
    "boolean": "boolean field",
    "enum": "static enum field",
    "dynamic_enum": "dynamic enum field",
    "dynamic_schema": "dynamic schema field",
    "array": "array field",
    "object": "object field",
}


@dataclass(frozen=True)
class FieldTypeContext:
    """
    Context for field kind validation.

    Params:
        field_type: The field `kind` (e.g. "text", "enum")
        field_name: The field name
        path: Diagnostic path of the field; defaults to its name
    """

    field_type: str
    field_name: str
    path: str | None = None


def get_field_type_severity(field_type: str, constraints: FieldTypeConstraints) -> Severity:
    """Severity configured for a field kind; unknown kinds are `off`."""
    key = FIELD_TYPE_CONSTRAINT_KEYS.get(field_type)
    if key is None:
        return Severity.OFF
    return getattr(constraints, key)


def is_field_type_allowed(field_type: str, constraints: FieldTypeConstraints) -> bool:
    return get_field_type_severity(field_type, constraints) is Severity.OFF


def validate_field_types(
    context: FieldTypeContext, constraints: FieldTypeConstraints
) -> list[ValidationIssue]:
    """
    Validate a field kind against constraints.

    Params:
        context: Information about the field being validated
        constraints: Field type constraints

    Returns:
        At most one issue; empty when the kind is allowed
    """
    issue_severity = get_field_type_severity(context.field_type, constraints).issue_severity
    if issue_severity is None:
        return []

    type_name = FIELD_TYPE_NAMES.get(context.field_type, context.field_type)
    return [
        ValidationIssue(
            code=IssueCode.DISALLOWED_FIELD_TYPE,
            message=(
                f'Field "{context.field_name}" uses {type_name}, '
                "which is not allowed in this project"
            ),
            severity=issue_severity,
            category=IssueCategory.FIELD_TYPES,
            path=context.path or context.field_name,
            field_name=context.field_name,
            field_type=context.field_type,
        )
    ]
