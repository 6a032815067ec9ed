"""
Default constraint configuration and partial-override merging.

The default allows everything: every severity is `off` and nesting depth is
unbounded. User configuration is merged shallowly, per category, over the
defaults; a partial category never replaces the whole default category.

Keys may be written in camelCase (as in `.formspec.yml` files shared with
other tooling) or snake_case; both normalise to the attribute names of
`formspec.constraints.types`.
"""

from collections.abc import Mapping
from typing import Any

import attrs
from inflection import underscore

from formspec.constraints.types import ConstraintConfig
from formspec.exceptions import InvalidConfigError

DEFAULT_CONSTRAINTS = ConstraintConfig()

NESTED_SECTIONS = {
    "constraints": (
        "field_types",
        "layout",
        "ui_schema",
        "field_options",
        "control_options",
    ),
    "ui_schema": ("layouts", "rules"),
    "rules": ("effects",),
}


def _normalize_keys(section: Any, section_name: str, source: str) -> dict[str, Any]:
    if not isinstance(section, Mapping):
        raise InvalidConfigError(
            source, f"'{section_name}' must be a mapping, got {type(section).__name__}"
        )
    return {underscore(str(key)): value for key, value in section.items()}


def _merge_section(current: Any, overrides: Any, section_name: str, source: str) -> Any:
    """
    Merge one configuration section over its current value.

    Params:
        current: Resolved attrs instance for this section
        overrides: User-supplied mapping for this section
        section_name: Dotted name used in error messages
        source: Where the configuration came from

    Returns:
        A new attrs instance with the overrides applied

    Raises:
        InvalidConfigError: For unknown keys or invalid values
    """
    if overrides is None:
        return current

    normalized = _normalize_keys(overrides, section_name, source)
    known = {attribute.name for attribute in attrs.fields(type(current))}
    unknown = sorted(set(normalized) - known)
    if unknown:
        raise InvalidConfigError(
            source, f"unknown keys in '{section_name}': {', '.join(unknown)}"
        )

    changes: dict[str, Any] = {}
    for key, value in normalized.items():
        if key in NESTED_SECTIONS.get(section_name.rsplit(".", 1)[-1], ()):
            changes[key] = _merge_section(
                getattr(current, key), value, f"{section_name}.{key}", source
            )
        elif key == "custom":
            # Custom option names are renderer-defined and kept verbatim
            custom = _normalize_custom(value, f"{section_name}.custom", source)
            changes[key] = {**current.custom, **custom}
        else:
            changes[key] = value

    try:
        return attrs.evolve(current, **changes)
    except (TypeError, ValueError) as e:
        raise InvalidConfigError(source, f"'{section_name}': {e}") from e


def _normalize_custom(value: Any, section_name: str, source: str) -> dict[str, Any]:
    if not isinstance(value, Mapping):
        raise InvalidConfigError(
            source, f"'{section_name}' must be a mapping, got {type(value).__name__}"
        )
    return {str(key): severity for key, severity in value.items()}


def merge_with_defaults(
    config: Mapping[str, Any] | ConstraintConfig | None,
    defaults: ConstraintConfig = DEFAULT_CONSTRAINTS,
    source: str = "<mapping>",
) -> ConstraintConfig:
    """
    Merge a partial constraint configuration with defaults.

    Params:
        config: Partial configuration mapping, an already resolved
            configuration (returned unchanged), or None for the defaults
        defaults: Configuration supplying every value not overridden
        source: Where `config` came from, for error messages

    Returns:
        Fully resolved ConstraintConfig

    Raises:
        InvalidConfigError: For unknown keys, unknown severities or an
            invalid nesting depth

    Example:
        config = merge_with_defaults({"fieldTypes": {"dynamicEnum": "error"},
                                      "layout": {"maxNestingDepth": 2}})
        config.field_types.dynamic_enum  # Severity.ERROR
        config.field_types.text          # Severity.OFF
    """
    if config is None:
        return defaults
    if isinstance(config, ConstraintConfig):
        return config
    return _merge_section(defaults, config, "constraints", source)


def define_constraints(config: Mapping[str, Any] | None = None, **sections: Any) -> ConstraintConfig:
    """
    Create a constraint configuration programmatically.

    Sections may be given as a mapping, as keyword arguments, or both
    (keyword arguments win).

    Example:
        define_constraints(field_types={"dynamic_enum": "error"},
                           layout={"group": "warn"})
    """
    merged = {**(config or {}), **sections}
    return merge_with_defaults(merged)
