"""
Tests for constraint validation of generated UI schemas.
"""

from formspec.constraints import validate_ui_schema
from formspec.constraints.types import LayoutTypeConstraints, Severity, severity_for
from formspec.core.issues import IssueCategory, IssueCode, IssueSeverity
from formspec.schema import generate_ui_schema


class TestLayouts:
    """Tests for layout type constraints."""

    def test_defaults_allow_generated_schema(self, contact_form):
        """Generated UI schemas pass the defaults."""
        assert validate_ui_schema(generate_ui_schema(contact_form)).issues == []

    def test_disallowed_group_layout(self, contact_form):
        """Group layouts are reported at their pointer."""
        result = validate_ui_schema(
            generate_ui_schema(contact_form), {"uiSchema": {"layouts": {"group": "error"}}}
        )
        (issue,) = result.issues
        assert issue.code is IssueCode.DISALLOWED_LAYOUT_TYPE
        assert issue.category is IssueCategory.UI_SCHEMA
        assert issue.path == "#/elements/1"

    def test_root_layout(self, contact_form):
        """The root layout is checked too."""
        result = validate_ui_schema(
            generate_ui_schema(contact_form),
            {"ui_schema": {"layouts": {"vertical_layout": "warn"}}},
        )
        (issue,) = result.issues
        assert issue.path == "#"
        assert issue.severity is IssueSeverity.WARNING

    def test_unknown_layout_type_is_allowed(self):
        """Layout types matching Python attributes rather than settings are off."""
        for node_type in ("__class__", "__init__"):
            result = validate_ui_schema(
                {"type": node_type, "elements": []}, {"ui_schema": {"layouts": {"group": "error"}}}
            )
            assert result.issues == []


class TestRules:
    """Tests for rule and rule effect constraints."""

    def test_rules_disabled(self, contact_form):
        """Any rule is reported when rules are disabled."""
        result = validate_ui_schema(
            generate_ui_schema(contact_form), {"ui_schema": {"rules": {"enabled": "error"}}}
        )
        (issue,) = result.issues
        assert issue.code is IssueCode.DISALLOWED_RULE
        assert issue.path == "#/elements/3"

    def test_rule_effect(self, contact_form):
        """Disallowed effects are named in the message."""
        result = validate_ui_schema(
            generate_ui_schema(contact_form),
            {"ui_schema": {"rules": {"effects": {"show": "warn"}}}},
        )
        (issue,) = result.issues
        assert issue.code is IssueCode.DISALLOWED_RULE_EFFECT
        assert "SHOW" in issue.message

    def test_unknown_effect_is_allowed(self):
        """Effects outside the configured set, dunders included, are never looked up."""
        ui_schema = {
            "type": "VerticalLayout",
            "elements": [{"type": "Control", "scope": "#", "rule": {"effect": "__class__"}}],
        }
        result = validate_ui_schema(
            ui_schema, {"ui_schema": {"rules": {"effects": {"show": "error"}}}}
        )
        assert result.issues == []


class TestControlOptions:
    """Tests for Control option constraints."""

    def ui_schema(self):
        return {
            "type": "VerticalLayout",
            "elements": [
                {
                    "type": "Control",
                    "scope": "#/properties/notes",
                    "options": {"multi": True, "showUnfocusedDescription": True, "slider": True},
                }
            ],
        }

    def test_known_option(self):
        """Known options are checked by name."""
        result = validate_ui_schema(self.ui_schema(), {"control_options": {"multi": "error"}})
        (issue,) = result.issues
        assert issue.code is IssueCode.DISALLOWED_CONTROL_OPTION
        assert issue.category is IssueCategory.CONTROL_OPTIONS
        assert issue.path == "#/elements/0"

    def test_camel_case_option_name(self):
        """Known options accept camelCase config keys."""
        result = validate_ui_schema(
            self.ui_schema(), {"controlOptions": {"showUnfocusedDescription": "warn"}}
        )
        assert [issue.severity for issue in result.issues] == [IssueSeverity.WARNING]

    def test_custom_option(self):
        """Unknown options are checked against the custom map."""
        result = validate_ui_schema(
            self.ui_schema(), {"control_options": {"custom": {"slider": "error"}}}
        )
        (issue,) = result.issues
        assert '"slider"' in issue.message


class TestSeverityFor:
    """Tests for looking up a severity by name in a constraint section."""

    def test_declared_name(self):
        """Declared settings return their configured severity."""
        section = LayoutTypeConstraints(group="warn")
        assert severity_for(section, "group") is Severity.WARN

    def test_undeclared_names_are_off(self):
        """Methods, dunders and unknown names all resolve to off."""
        section = LayoutTypeConstraints(group="error")
        for name in ("__class__", "__eq__", "custom", ""):
            assert severity_for(section, name) is Severity.OFF
