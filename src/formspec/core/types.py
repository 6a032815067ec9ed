"""
Core type definitions for FormSpec.

This module contains fundamental type aliases shared by the derivation
engines and the constraint validators.
"""

from typing import Any

# Generated JSON Schema (draft-07 subset) and JSON Forms UI schema documents
JSONSchema = dict[str, Any]

UISchema = dict[str, Any]

UISchemaElement = dict[str, Any]
