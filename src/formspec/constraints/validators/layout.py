"""
Layout construct and nesting depth validation.

Groups and Conditionals are checked as constructs. Nesting depth counts
Array/Object boundaries only and is checked independently of whether those
field kinds are themselves allowed.
"""

from dataclasses import dataclass
from typing import Literal

from formspec.constraints.types import LayoutConstraints, Severity
from formspec.core.issues import (
    IssueCategory,
    IssueCode,
    IssueSeverity,
    ValidationIssue,
)

LayoutType = Literal["group", "conditional"]


@dataclass(frozen=True)
class LayoutContext:
    """
    Context for layout validation.

    Params:
        layout_type: "group" or "conditional"
        depth: Current nesting depth
        label: Group label, when validating a group
        path: Diagnostic path of the element
    """

    layout_type: LayoutType
    depth: int = 0
    label: str | None = None
    path: str | None = None


def get_layout_severity(layout_type: LayoutType, constraints: LayoutConstraints) -> Severity:
    if layout_type == "group":
        return constraints.group
    return constraints.conditionals


def is_layout_type_allowed(layout_type: LayoutType, constraints: LayoutConstraints) -> bool:
    return get_layout_severity(layout_type, constraints) is Severity.OFF


def is_nesting_depth_allowed(depth: int, constraints: LayoutConstraints) -> bool:
    """Whether `depth` is within the configured maximum (inclusive)."""
    max_depth = constraints.max_nesting_depth
    return max_depth is None or depth <= max_depth


def validate_layout(
    context: LayoutContext, constraints: LayoutConstraints
) -> list[ValidationIssue]:
    """
    Validate a group or conditional against constraints.

    Params:
        context: Information about the layout element
        constraints: Layout constraints

    Returns:
        At most one issue; empty when the construct is allowed
    """
    issue_severity = get_layout_severity(context.layout_type, constraints).issue_severity
    if issue_severity is None:
        return []

    if context.layout_type == "group":
        label_info = f' "{context.label}"' if context.label else ""
        return [
            ValidationIssue(
                code=IssueCode.DISALLOWED_GROUP,
                message=(
                    f"Group{label_info} is not allowed - "
                    "visual grouping is not supported in this project"
                ),
                severity=issue_severity,
                category=IssueCategory.LAYOUT,
                path=context.path,
            )
        ]

    return [
        ValidationIssue(
            code=IssueCode.DISALLOWED_CONDITIONAL,
            message="Conditional visibility is not allowed in this project",
            severity=issue_severity,
            category=IssueCategory.LAYOUT,
            path=context.path,
        )
    ]


def validate_nesting_depth(
    depth: int,
    constraints: LayoutConstraints,
    path: str | None = None,
    field_name: str | None = None,
    field_type: str | None = None,
) -> list[ValidationIssue]:
    """
    Check a nesting depth against the configured maximum.

    Exceeding the depth is always an error: it has no severity setting.
    """
    if is_nesting_depth_allowed(depth, constraints):
        return []
    return [
        ValidationIssue(
            code=IssueCode.EXCEEDED_NESTING_DEPTH,
            message=(
                f"Nesting depth {depth} exceeds maximum allowed depth of "
                f"{constraints.max_nesting_depth}"
            ),
            severity=IssueSeverity.ERROR,
            category=IssueCategory.LAYOUT,
            path=path,
            field_name=field_name,
            field_type=field_type,
        )
    ]
