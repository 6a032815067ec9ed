"""
Validation issue records shared by the structural and constraint validators.

Expected problems in a form are returned as data, never raised, so a caller
can report every issue found in one pass.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class IssueSeverity(str, Enum):
    """Severity of a reported issue."""

    ERROR = "error"
    WARNING = "warning"


class IssueCategory(str, Enum):
    """Which check produced an issue."""

    STRUCTURE = "structure"
    FIELD_TYPES = "field_types"
    LAYOUT = "layout"
    FIELD_OPTIONS = "field_options"
    UI_SCHEMA = "ui_schema"
    CONTROL_OPTIONS = "control_options"


class IssueCode(str, Enum):
    """Stable identifiers of every issue kind."""

    DUPLICATE_FIELD_NAME = "DUPLICATE_FIELD_NAME"
    UNKNOWN_CONDITIONAL_FIELD = "UNKNOWN_CONDITIONAL_FIELD"
    DISALLOWED_FIELD_TYPE = "DISALLOWED_FIELD_TYPE"
    DISALLOWED_FIELD_OPTION = "DISALLOWED_FIELD_OPTION"
    DISALLOWED_GROUP = "DISALLOWED_GROUP"
    DISALLOWED_CONDITIONAL = "DISALLOWED_CONDITIONAL"
    EXCEEDED_NESTING_DEPTH = "EXCEEDED_NESTING_DEPTH"
    DISALLOWED_LAYOUT_TYPE = "DISALLOWED_LAYOUT_TYPE"
    DISALLOWED_RULE = "DISALLOWED_RULE"
    DISALLOWED_RULE_EFFECT = "DISALLOWED_RULE_EFFECT"
    DISALLOWED_CONTROL_OPTION = "DISALLOWED_CONTROL_OPTION"


@dataclass(frozen=True)
class ValidationIssue:
    """
    A single problem found while validating a form.

    Params:
        code: Stable identifier of the issue kind
        message: Human-readable description
        severity: `error` fails validation, `warning` does not
        category: Which check produced the issue
        path: Diagnostic path of the offending node
        field_name: Name of the affected field, when the issue concerns one
        field_type: Kind of the affected field, when the issue concerns one
    """

    code: IssueCode
    message: str
    severity: IssueSeverity
    category: IssueCategory
    path: str | None = None
    field_name: str | None = None
    field_type: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is IssueSeverity.ERROR

    def to_dict(self) -> dict[str, Any]:
        """Serialize to plain JSON types with camelCase keys, omitting unset attributes."""
        data: dict[str, Any] = {
            "code": self.code.value,
            "message": self.message,
            "severity": self.severity.value,
            "category": self.category.value,
        }
        if self.path is not None:
            data["path"] = self.path
        if self.field_name is not None:
            data["fieldName"] = self.field_name
        if self.field_type is not None:
            data["fieldType"] = self.field_type
        return data

    def __str__(self) -> str:
        location = f" at {self.path}" if self.path else ""
        return f"[{self.code.value}] {self.message}{location}"


@dataclass
class ValidationResult:
    """Outcome of a validation pass: valid unless an error-severity issue exists."""

    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not any(issue.is_error for issue in self.issues)

    @property
    def errors(self) -> list[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity is IssueSeverity.ERROR]

    @property
    def warnings(self) -> list[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity is IssueSeverity.WARNING]

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Return a result holding the issues of both, this one's first."""
        return ValidationResult(issues=[*self.issues, *other.issues])

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": self.valid,
            "issues": [issue.to_dict() for issue in self.issues],
        }
