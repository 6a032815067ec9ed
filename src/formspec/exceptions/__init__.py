"""
FormSpec exception classes.

This package provides all exception types used throughout FormSpec
for consistent error handling and reporting.
"""

from formspec.exceptions.core import (
    ConfigError,
    ConfigFileNotFoundError,
    EmptyEnumOptionsError,
    FormLoadError,
    FormSpecError,
    InvalidConfigError,
)

__all__ = [
    "FormSpecError",
    "EmptyEnumOptionsError",
    "ConfigError",
    "ConfigFileNotFoundError",
    "InvalidConfigError",
    "FormLoadError",
]
