"""
FormSpec - Declarative form specifications compiled to JSON Schema and JSON Forms UI schema

FormSpec derives both schemas from one element tree and checks forms against
project-level capability constraints.
"""

from importlib.metadata import version

from formspec.constraints import (
    ConstraintConfig,
    define_constraints,
    load_config,
    validate_form_spec,
    validate_ui_schema,
)
from formspec.core import (
    ArrayField,
    BooleanField,
    Conditional,
    DynamicEnumField,
    DynamicSchemaField,
    EnumOption,
    FormSpec,
    Group,
    NumberField,
    ObjectField,
    StaticEnumField,
    TextField,
    ValidationIssue,
    ValidationResult,
)
from formspec.schema import (
    build_form_schemas,
    generate_json_schema,
    generate_ui_schema,
    write_schemas,
)
from formspec.structure import validate_form

__version__ = version("formspec")

__all__ = [
    "__version__",
    "FormSpec",
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
    "ValidationIssue",
    "ValidationResult",
    "generate_json_schema",
    "generate_ui_schema",
    "build_form_schemas",
    "write_schemas",
    "validate_form",
    "validate_form_spec",
    "validate_ui_schema",
    "ConstraintConfig",
    "define_constraints",
    "load_config",
]
