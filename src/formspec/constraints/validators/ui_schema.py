"""
Constraint validation of generated JSON Forms UI schemas.

Checks the layout types, rules, rule effects and Control options that a UI
schema uses. Issue paths are JSON pointers into the UI schema document
(`#/elements/0/elements/1`).
"""

from collections.abc import Mapping
from typing import Any

from inflection import underscore

from formspec.constraints.defaults import merge_with_defaults
from formspec.constraints.types import ConstraintConfig, Severity, severity_for
from formspec.core.issues import (
    IssueCategory,
    IssueCode,
    ValidationIssue,
    ValidationResult,
)
from formspec.core.types import UISchema, UISchemaElement

KNOWN_CONTROL_OPTIONS = frozenset(
    {
        "format",
        "readonly",
        "multi",
        "show_unfocused_description",
        "hide_required_asterisk",
    }
)


def _issue(
    code: IssueCode,
    message: str,
    severity: Severity,
    category: IssueCategory,
    path: str,
) -> list[ValidationIssue]:
    issue_severity = severity.issue_severity
    if issue_severity is None:
        return []
    return [
        ValidationIssue(
            code=code,
            message=message,
            severity=issue_severity,
            category=category,
            path=path,
        )
    ]


def _control_option_severity(option: str, constraints: ConstraintConfig) -> Severity:
    control_options = constraints.control_options
    normalized = underscore(option)
    if normalized in KNOWN_CONTROL_OPTIONS:
        return getattr(control_options, normalized)
    return control_options.custom.get(option, Severity.OFF)


def _validate_node(
    node: UISchemaElement,
    constraints: ConstraintConfig,
    path: str,
    issues: list[ValidationIssue],
) -> None:
    node_type = str(node.get("type", ""))
    ui_constraints = constraints.ui_schema

    if node_type != "Control":
        layout_severity = severity_for(ui_constraints.layouts, underscore(node_type))
        issues.extend(
            _issue(
                IssueCode.DISALLOWED_LAYOUT_TYPE,
                f"Layout type {node_type} is not allowed in this project",
                layout_severity,
                IssueCategory.UI_SCHEMA,
                path,
            )
        )

    rule = node.get("rule")
    if isinstance(rule, Mapping):
        issues.extend(
            _issue(
                IssueCode.DISALLOWED_RULE,
                "Rules are not allowed in this project",
                ui_constraints.rules.enabled,
                IssueCategory.UI_SCHEMA,
                path,
            )
        )
        effect = str(rule.get("effect", ""))
        issues.extend(
            _issue(
                IssueCode.DISALLOWED_RULE_EFFECT,
                f"Rule effect {effect} is not allowed in this project",
                severity_for(ui_constraints.rules.effects, effect.lower()),
                IssueCategory.UI_SCHEMA,
                path,
            )
        )

    options = node.get("options")
    if isinstance(options, Mapping):
        for option in options:
            issues.extend(
                _issue(
                    IssueCode.DISALLOWED_CONTROL_OPTION,
                    f'Control option "{option}" is not allowed in this project',
                    _control_option_severity(str(option), constraints),
                    IssueCategory.CONTROL_OPTIONS,
                    path,
                )
            )

    for index, child in enumerate(node.get("elements", ())):
        _validate_node(child, constraints, f"{path}/elements/{index}", issues)


def validate_ui_schema(
    ui_schema: UISchema,
    constraints: ConstraintConfig | Mapping[str, Any] | None = None,
) -> ValidationResult:
    """
    Validate a UI schema against constraints.

    Params:
        ui_schema: UI schema document, e.g. from `generate_ui_schema`
        constraints: Resolved configuration or a partial mapping

    Returns:
        ValidationResult with every issue found
    """
    resolved = merge_with_defaults(constraints)
    issues: list[ValidationIssue] = []
    _validate_node(ui_schema, resolved, "#", issues)
    return ValidationResult(issues=issues)
