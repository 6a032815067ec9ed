"""
FormSpec schema derivation.

This package generates JSON Schema (for data validation) and JSON Forms UI
schema (for rendering) from a form specification.
"""

from formspec.schema.build import (
    BuildResult,
    WrittenSchemas,
    build_form_schemas,
    write_schemas,
)
from formspec.schema.json_schema import JSON_SCHEMA_DRAFT, generate_json_schema
from formspec.schema.ui_schema import RuleCondition, ShowRule, generate_ui_schema

__all__ = [
    "generate_json_schema",
    "generate_ui_schema",
    "build_form_schemas",
    "write_schemas",
    "BuildResult",
    "WrittenSchemas",
    "ShowRule",
    "RuleCondition",
    "JSON_SCHEMA_DRAFT",
]
