"""
Tests for default constraints and partial-override merging.
"""

import pytest

from formspec.constraints import (
    DEFAULT_CONSTRAINTS,
    ConstraintConfig,
    Severity,
    define_constraints,
    merge_with_defaults,
)
from formspec.exceptions import InvalidConfigError


class TestDefaults:
    """Tests for the built-in allow-everything configuration."""

    def test_everything_allowed(self):
        """Every setting defaults to off with unbounded depth."""
        assert DEFAULT_CONSTRAINTS.field_types.dynamic_enum is Severity.OFF
        assert DEFAULT_CONSTRAINTS.layout.group is Severity.OFF
        assert DEFAULT_CONSTRAINTS.layout.max_nesting_depth is None
        assert DEFAULT_CONSTRAINTS.ui_schema.rules.effects.hide is Severity.OFF
        assert dict(DEFAULT_CONSTRAINTS.control_options.custom) == {}

    def test_none_returns_defaults(self):
        """No configuration resolves to the defaults."""
        assert merge_with_defaults(None) == DEFAULT_CONSTRAINTS

    def test_resolved_config_passes_through(self):
        """A resolved config is returned unchanged."""
        config = ConstraintConfig()
        assert merge_with_defaults(config) is config


class TestMerge:
    """Partial categories override only the keys they name."""

    def test_partial_category_keeps_other_defaults(self):
        """Unnamed keys and categories keep their defaults."""
        config = merge_with_defaults({"field_types": {"dynamic_enum": "error"}})
        assert config.field_types.dynamic_enum is Severity.ERROR
        assert config.field_types.text is Severity.OFF
        assert config.layout == DEFAULT_CONSTRAINTS.layout

    def test_camel_case_keys(self):
        """camelCase keys normalize to their snake_case settings."""
        config = merge_with_defaults(
            {
                "fieldTypes": {"dynamicSchema": "warn"},
                "layout": {"maxNestingDepth": 2},
                "uiSchema": {"layouts": {"horizontalLayout": "error"}},
            }
        )
        assert config.field_types.dynamic_schema is Severity.WARN
        assert config.layout.max_nesting_depth == 2
        assert config.ui_schema.layouts.horizontal_layout is Severity.ERROR
        assert config.ui_schema.rules.enabled is Severity.OFF

    def test_nested_rule_effects(self):
        """Rule effects merge one level deeper."""
        config = merge_with_defaults({"ui_schema": {"rules": {"effects": {"hide": "error"}}}})
        assert config.ui_schema.rules.effects.hide is Severity.ERROR
        assert config.ui_schema.rules.effects.show is Severity.OFF

    def test_merge_over_custom_defaults(self):
        """Overrides can be applied over a non-default base."""
        base = merge_with_defaults({"layout": {"group": "warn"}})
        config = merge_with_defaults({"layout": {"conditionals": "error"}}, defaults=base)
        assert config.layout.group is Severity.WARN
        assert config.layout.conditionals is Severity.ERROR

    def test_boolean_false_means_off(self):
        """A YAML bare off loads as False and means off."""
        config = merge_with_defaults({"field_types": {"text": False}})
        assert config.field_types.text is Severity.OFF

    def test_custom_control_options_are_kept_verbatim(self):
        """Custom option names are not case-normalized."""
        config = merge_with_defaults({"control_options": {"custom": {"myWidget": "warn"}}})
        assert config.control_options.custom["myWidget"] is Severity.WARN

    def test_unbounded_depth_can_be_restored(self):
        """An explicit null resets max_nesting_depth."""
        base = merge_with_defaults({"layout": {"max_nesting_depth": 1}})
        config = merge_with_defaults({"layout": {"max_nesting_depth": None}}, defaults=base)
        assert config.layout.max_nesting_depth is None


class TestInvalidConfig:
    """Tests for rejected configuration values."""

    @pytest.mark.parametrize(
        "config",
        [
            {"field_types": {"slider": "error"}},
            {"unknown_section": {}},
            {"field_types": {"text": "forbidden"}},
            {"field_types": "error"},
            {"layout": {"max_nesting_depth": -1}},
            {"layout": {"max_nesting_depth": "deep"}},
        ],
    )
    def test_rejected(self, config):
        """Unknown keys, bad severities and bad depths raise."""
        with pytest.raises(InvalidConfigError):
            merge_with_defaults(config)

    def test_error_names_source_and_key(self):
        """The error names the config source and the offending key."""
        with pytest.raises(InvalidConfigError) as exc_info:
            merge_with_defaults({"layout": {"tabs": "off"}}, source="project.yml")
        message = str(exc_info.value)
        assert "project.yml" in message
        assert "tabs" in message


class TestDefineConstraints:
    """Tests for building a config from keyword sections."""

    def test_keyword_sections(self):
        """Each keyword sets one category."""
        config = define_constraints(field_types={"array": "error"}, layout={"group": "warn"})
        assert config.field_types.array is Severity.ERROR
        assert config.layout.group is Severity.WARN

    def test_keywords_override_mapping(self):
        """Keywords win over the same category in the mapping."""
        config = define_constraints(
            {"layout": {"group": "error"}}, layout={"group": "warn"}
        )
        assert config.layout.group is Severity.WARN

    def test_no_arguments_gives_defaults(self):
        """With no arguments the defaults are returned."""
        assert define_constraints() == DEFAULT_CONSTRAINTS
