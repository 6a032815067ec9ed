"""
FormSpec structural validation.

This package checks the invariants of a built element tree: unique field
names per scope and resolvable conditional references.
"""

from formspec.structure.validation import log_validation_issues, validate_form

__all__ = [
    "validate_form",
    "log_validation_issues",
]
