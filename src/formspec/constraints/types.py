"""
Constraint configuration types for FormSpec.

A constraint configuration assigns a severity to every capability a form
may use: each field kind, each layout construct, each field option and
each UI schema feature, plus a maximum nesting depth. All values are
frozen; partial configurations are merged over the defaults by
`formspec.constraints.defaults.merge_with_defaults`.
"""

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType

import attrs
from attrs import field, frozen

from formspec.core.issues import IssueSeverity


class Severity(str, Enum):
    """
    Severity assigned to a capability.

    - error: using the capability fails validation
    - warn: using the capability is reported but passes
    - off: the capability is allowed
    """

    ERROR = "error"
    WARN = "warn"
    OFF = "off"

    @property
    def issue_severity(self) -> IssueSeverity | None:
        """Severity of the issue produced for a violation, or None when allowed."""
        if self is Severity.ERROR:
            return IssueSeverity.ERROR
        if self is Severity.WARN:
            return IssueSeverity.WARNING
        return None


def to_severity(value: Severity | str | bool) -> Severity:
    """Convert a configured value to a Severity."""
    # YAML 1.1 loads a bare `off` as the boolean False
    if value is False:
        return Severity.OFF
    return Severity(value)


def severity_for(section: object, name: str) -> Severity:
    """
    Severity configured under `name` in a constraint section.

    Only declared attributes are looked up, so names taken from a document
    can never reach dunders or methods. Unknown names are `off`.
    """
    if name in attrs.fields_dict(type(section)):
        value = getattr(section, name)
        if isinstance(value, Severity):
            return value
    return Severity.OFF


def _severity_field():
    return field(default=Severity.OFF, converter=to_severity)


def _severity_map(value: Mapping[str, str] | None) -> Mapping[str, Severity]:
    return MappingProxyType({key: to_severity(sev) for key, sev in (value or {}).items()})


def _check_depth(instance, attribute, value) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"{attribute.name} must be a non-negative integer or None")


@frozen
class FieldTypeConstraints:
    """Which field kinds a form may use."""

    text: Severity = _severity_field()
    number: Severity = _severity_field()
    boolean: Severity = _severity_field()
    static_enum: Severity = _severity_field()
    dynamic_enum: Severity = _severity_field()
    dynamic_schema: Severity = _severity_field()
    array: Severity = _severity_field()
    object: Severity = _severity_field()


@frozen
class LayoutConstraints:
    """
    Grouping, conditional and nesting constraints.

    `max_nesting_depth` counts Array/Object boundaries; None means unbounded
    and 0 allows flat forms only.
    """

    group: Severity = _severity_field()
    conditionals: Severity = _severity_field()
    max_nesting_depth: int | None = field(default=None, validator=_check_depth)


@frozen
class LayoutTypeConstraints:
    """Which JSON Forms layout types a UI schema may use."""

    vertical_layout: Severity = _severity_field()
    horizontal_layout: Severity = _severity_field()
    group: Severity = _severity_field()
    categorization: Severity = _severity_field()
    category: Severity = _severity_field()


@frozen
class RuleEffectConstraints:
    """Which JSON Forms rule effects a UI schema may use."""

    show: Severity = _severity_field()
    hide: Severity = _severity_field()
    enable: Severity = _severity_field()
    disable: Severity = _severity_field()


@frozen
class RuleConstraints:
    enabled: Severity = _severity_field()
    effects: RuleEffectConstraints = field(factory=RuleEffectConstraints)


@frozen
class UISchemaConstraints:
    layouts: LayoutTypeConstraints = field(factory=LayoutTypeConstraints)
    rules: RuleConstraints = field(factory=RuleConstraints)


@frozen
class FieldOptionConstraints:
    """Which field configuration options a form may set."""

    label: Severity = _severity_field()
    placeholder: Severity = _severity_field()
    required: Severity = _severity_field()
    min_value: Severity = _severity_field()
    max_value: Severity = _severity_field()
    min_items: Severity = _severity_field()
    max_items: Severity = _severity_field()


@frozen
class ControlOptionConstraints:
    """
    Which JSON Forms Control options a UI schema may use.

    `custom` maps renderer-specific option names to severities.
    """

    format: Severity = _severity_field()
    readonly: Severity = _severity_field()
    multi: Severity = _severity_field()
    show_unfocused_description: Severity = _severity_field()
    hide_required_asterisk: Severity = _severity_field()
    custom: Mapping[str, Severity] = field(factory=dict, converter=_severity_map)


@frozen
class ConstraintConfig:
    """Fully resolved constraint configuration; every value is set."""

    field_types: FieldTypeConstraints = field(factory=FieldTypeConstraints)
    layout: LayoutConstraints = field(factory=LayoutConstraints)
    ui_schema: UISchemaConstraints = field(factory=UISchemaConstraints)
    field_options: FieldOptionConstraints = field(factory=FieldOptionConstraints)
    control_options: ControlOptionConstraints = field(factory=ControlOptionConstraints)
