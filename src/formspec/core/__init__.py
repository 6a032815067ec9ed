"""
Core FormSpec components.

This package provides the element tree model, the base node class, shared
type aliases, and path/scope resolution.
"""

from formspec.core.elements import (
    FIELD_KINDS,
    AnyField,
    ArrayField,
    BaseField,
    BooleanField,
    Conditional,
    DynamicEnumField,
    DynamicSchemaField,
    EnumOption,
    EnumOptionValue,
    FieldKind,
    FormElement,
    FormSpec,
    Group,
    NumberField,
    ObjectField,
    StaticEnumField,
    TextField,
)
from formspec.core.issues import (
    IssueCategory,
    IssueCode,
    IssueSeverity,
    ValidationIssue,
    ValidationResult,
)
from formspec.core.path_utils import (
    ROOT_LOCATION,
    ElementLocation,
    ScopeSegment,
    escape_pointer_segment,
    format_trigger_value,
    walk_elements,
)
from formspec.core.tree_node import FormNode
from formspec.core.types import JSONSchema, UISchema, UISchemaElement

__all__ = [
    "FormNode",
    "FormSpec",
    "FormElement",
    "AnyField",
    "BaseField",
    "TextField",
    "NumberField",
    "BooleanField",
    "StaticEnumField",
    "DynamicEnumField",
    "DynamicSchemaField",
    "ArrayField",
    "ObjectField",
    "Group",
    "Conditional",
    "EnumOption",
    "EnumOptionValue",
    "FieldKind",
    "FIELD_KINDS",
    "ElementLocation",
    "ScopeSegment",
    "ROOT_LOCATION",
    "escape_pointer_segment",
    "format_trigger_value",
    "walk_elements",
    "IssueCategory",
    "IssueCode",
    "IssueSeverity",
    "ValidationIssue",
    "ValidationResult",
    "JSONSchema",
    "UISchema",
    "UISchemaElement",
]
