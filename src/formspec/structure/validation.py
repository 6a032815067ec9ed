"""
Structural validation of form specifications.

Checks invariants the element models cannot enforce at construction time:

- field names are unique within their scope (the form root or the nearest
  enclosing Array/Object; Groups and Conditionals do not open a scope)
- every Conditional references a field declared somewhere in the tree

Problems are returned as issues rather than raised, so a tree can be
inspected, and every problem reported, before it is rejected.
"""

import logging
from collections import defaultdict
from itertools import count

from formspec.core.elements import (
    ArrayField,
    BaseField,
    Conditional,
    FormSpec,
    ObjectField,
)
from formspec.core.issues import (
    IssueCategory,
    IssueCode,
    IssueSeverity,
    ValidationIssue,
    ValidationResult,
)
from formspec.core.path_utils import ScopeSegment, walk_elements

logger = logging.getLogger(__name__)


def validate_form(form: FormSpec) -> ValidationResult:
    """
    Validate a form specification for structural problems.

    Params:
        form: The form specification to check

    Returns:
        ValidationResult with one issue per duplicated name and one per
        dangling conditional reference

    Example:
        form = FormSpec(elements=[
            TextField(name="name"),
            TextField(name="name"),
            Conditional(field="missing", value="x", elements=[]),
        ])
        result = validate_form(form)
        # result.valid is False; two issues
    """
    names_by_scope: dict[int, dict[str, list[str]]] = defaultdict(lambda: defaultdict(list))
    # Each Array/Object field opens its own scope, even when siblings share a name
    open_scopes: dict[tuple[ScopeSegment, ...], int] = {(): 0}
    scope_ids = count(1)
    declared_names: set[str] = set()
    references: list[tuple[Conditional, str]] = []

    for element, location in walk_elements(form.elements):
        if isinstance(element, BaseField):
            names_by_scope[open_scopes[location.scopes]][element.name].append(
                location.diagnostic_path(element.name)
            )
            declared_names.add(element.name)
            if isinstance(element, (ArrayField, ObjectField)):
                open_scopes[location.enter_field(element).scopes] = next(scope_ids)
        elif isinstance(element, Conditional):
            references.append((element, location.enter_conditional(element).prefix))

    issues: list[ValidationIssue] = []

    for names in names_by_scope.values():
        for name, paths in names.items():
            if len(paths) < 2:
                continue
            issues.append(
                ValidationIssue(
                    code=IssueCode.DUPLICATE_FIELD_NAME,
                    message=(
                        f'Duplicate field name "{name}" found {len(paths)} times at: '
                        f"{', '.join(paths)}"
                    ),
                    severity=IssueSeverity.ERROR,
                    category=IssueCategory.STRUCTURE,
                    path=paths[0],
                    field_name=name,
                )
            )

    for conditional, path in references:
        if conditional.field not in declared_names:
            issues.append(
                ValidationIssue(
                    code=IssueCode.UNKNOWN_CONDITIONAL_FIELD,
                    message=f'Conditional references non-existent field "{conditional.field}"',
                    severity=IssueSeverity.ERROR,
                    category=IssueCategory.STRUCTURE,
                    path=path,
                    field_name=conditional.field,
                )
            )

    return ValidationResult(issues=issues)


def log_validation_issues(result: ValidationResult, form_name: str | None = None) -> None:
    """
    Log every issue of a validation result.

    Errors are logged at ERROR level and warnings at WARNING level.

    Params:
        result: The validation result to log
        form_name: Optional form name prefixed to each message
    """
    prefix = f'FormSpec "{form_name}"' if form_name else "FormSpec"
    for issue in result.issues:
        location = f" at {issue.path}" if issue.path else ""
        if issue.is_error:
            logger.error("%s: %s%s", prefix, issue.message, location)
        else:
            logger.warning("%s: %s%s", prefix, issue.message, location)
