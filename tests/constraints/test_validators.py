"""
Tests for constraint validation of form specifications.

Focus Areas:
1. Field kind and field option checks at each severity
2. Group and conditional checks with their diagnostic paths
3. Nesting depth counting Array/Object boundaries only
"""

from formspec.constraints import define_constraints, validate_form_spec
from formspec.constraints.types import (
    FieldOptionConstraints,
    FieldTypeConstraints,
    LayoutConstraints,
    Severity,
)
from formspec.constraints.validators import (
    FieldOptionsContext,
    FieldTypeContext,
    LayoutContext,
    extract_field_options,
    is_field_type_allowed,
    validate_field_options,
    validate_field_types,
    validate_layout,
)
from formspec.core.elements import (
    ArrayField,
    Conditional,
    FormSpec,
    Group,
    NumberField,
    ObjectField,
    TextField,
)
from formspec.core.issues import IssueCategory, IssueCode, IssueSeverity


def codes(result):
    return [issue.code for issue in result.issues]


class TestFieldTypes:
    """Tests for field kind constraints."""

    def test_all_allowed_by_default(self, contact_form, invoice_form):
        """The defaults report nothing."""
        assert validate_form_spec(contact_form).issues == []
        assert validate_form_spec(invoice_form).issues == []

    def test_error_severity(self, invoice_form):
        """A disallowed kind at error severity invalidates the result."""
        result = validate_form_spec(invoice_form, {"field_types": {"dynamic_enum": "error"}})
        assert not result.valid
        (issue,) = result.issues
        assert issue.code is IssueCode.DISALLOWED_FIELD_TYPE
        assert issue.category is IssueCategory.FIELD_TYPES
        assert issue.path == "customer"
        assert issue.field_name == "customer"
        assert issue.field_type == "dynamic_enum"
        assert issue.message == (
            'Field "customer" uses dynamic enum field, which is not allowed in this project'
        )

    def test_warning_severity_keeps_result_valid(self, invoice_form):
        """Warnings are reported but keep the result valid."""
        result = validate_form_spec(invoice_form, {"field_types": {"object": "warn"}})
        assert result.valid
        (issue,) = result.warnings
        assert issue.path == "lines[]/discount"

    def test_static_enum_key(self, contact_form):
        """Static enums are configured under staticEnum."""
        result = validate_form_spec(contact_form, {"fieldTypes": {"staticEnum": "error"}})
        assert [issue.field_name for issue in result.errors] == ["status"]

    def test_fields_inside_groups_report_group_path(self, contact_form):
        """Issue paths include enclosing groups."""
        result = validate_form_spec(contact_form, {"field_types": {"number": "error"}})
        assert [issue.path for issue in result.issues] == ["[group:Contact]/age"]

    def test_direct_context_api(self):
        """The per-field checks work without a form."""
        constraints = FieldTypeConstraints(array="error")
        assert not is_field_type_allowed("array", constraints)
        assert is_field_type_allowed("text", constraints)
        issues = validate_field_types(
            FieldTypeContext(field_type="array", field_name="rows"), constraints
        )
        assert issues[0].path == "rows"


class TestFieldOptions:
    """Tests for field option constraints."""

    def test_extract_present_options(self):
        """Only options set on the field are extracted."""
        field = NumberField(name="age", label="Age", min=0, required=False)
        assert extract_field_options(field) == ("label", "required", "min_value")

    def test_unset_options_are_not_reported(self):
        """Options left unset are never reported."""
        form = FormSpec(elements=[TextField(name="plain")])
        result = validate_form_spec(form, {"field_options": {"placeholder": "error"}})
        assert result.issues == []

    def test_present_option_is_reported(self, contact_form):
        """A set option that is disallowed is reported."""
        result = validate_form_spec(contact_form, {"fieldOptions": {"placeholder": "warn"}})
        (issue,) = result.issues
        assert issue.code is IssueCode.DISALLOWED_FIELD_OPTION
        assert issue.severity is IssueSeverity.WARNING
        assert issue.path == "[group:Contact]/email"
        assert '"placeholder"' in issue.message

    def test_one_issue_per_option(self):
        """Each disallowed option gets its own issue."""
        issues = validate_field_options(
            FieldOptionsContext(field_name="n", present_options=("min_value", "max_value")),
            FieldOptionConstraints(min_value=Severity.ERROR, max_value=Severity.ERROR),
        )
        assert len(issues) == 2


class TestLayout:
    """Tests for group and conditional constraints."""

    def test_group_disallowed(self, contact_form):
        """A disallowed group is reported at its own path."""
        result = validate_form_spec(contact_form, {"layout": {"group": "error"}})
        (issue,) = result.issues
        assert issue.code is IssueCode.DISALLOWED_GROUP
        assert issue.path == "[group:Contact]"
        assert '"Contact"' in issue.message

    def test_conditional_disallowed(self, contact_form):
        """A disallowed conditional is reported at its when() path."""
        result = validate_form_spec(contact_form, {"layout": {"conditionals": "warn"}})
        (issue,) = result.issues
        assert issue.code is IssueCode.DISALLOWED_CONDITIONAL
        assert issue.path == "when(status=draft)"
        assert result.valid

    def test_children_of_disallowed_group_are_still_checked(self):
        """Checks continue below a disallowed group."""
        form = FormSpec(elements=[Group(label="G", elements=[TextField(name="t")])])
        result = validate_form_spec(
            form, {"layout": {"group": "error"}, "field_types": {"text": "error"}}
        )
        assert codes(result) == [IssueCode.DISALLOWED_GROUP, IssueCode.DISALLOWED_FIELD_TYPE]
        assert result.issues[1].path == "[group:G]/t"

    def test_unlabelled_group_message(self):
        """Groups without a label get a generic message."""
        issues = validate_layout(
            LayoutContext(layout_type="group"), LayoutConstraints(group=Severity.ERROR)
        )
        assert issues[0].message.startswith("Group is not allowed")


class TestNestingDepth:
    """Tests for the maximum nesting depth."""

    def nested_form(self):
        return FormSpec(
            elements=[
                ArrayField(
                    name="outer",
                    items=[
                        ObjectField(
                            name="middle",
                            properties=[
                                ArrayField(name="inner", items=[TextField(name="leaf")]),
                            ],
                        )
                    ],
                )
            ]
        )

    def test_unbounded_by_default(self):
        """Depth is unbounded by default."""
        assert validate_form_spec(self.nested_form()).issues == []

    def test_exceeding_field_reported_once(self):
        """Only the field that crosses the limit is reported."""
        result = validate_form_spec(self.nested_form(), {"layout": {"max_nesting_depth": 2}})
        (issue,) = result.issues
        assert issue.code is IssueCode.EXCEEDED_NESTING_DEPTH
        assert issue.severity is IssueSeverity.ERROR
        assert issue.path == "outer[]/middle/inner"
        assert issue.field_name == "inner"
        assert issue.message == "Nesting depth 3 exceeds maximum allowed depth of 2"

    def test_zero_allows_flat_forms_only(self, contact_form, invoice_form):
        """A limit of 0 rejects every Array and Object."""
        constraints = define_constraints(layout={"max_nesting_depth": 0})
        assert validate_form_spec(contact_form, constraints).valid
        result = validate_form_spec(invoice_form, constraints)
        assert [issue.field_name for issue in result.errors] == ["lines", "discount"]

    def test_groups_and_conditionals_do_not_add_depth(self):
        """Only Array and Object fields count toward depth."""
        form = FormSpec(
            elements=[
                TextField(name="t"),
                Group(
                    label="A",
                    elements=[
                        Conditional(
                            field="t",
                            value="x",
                            elements=[Group(label="B", elements=[ObjectField(name="o")])],
                        )
                    ],
                ),
            ]
        )
        assert validate_form_spec(form, {"layout": {"max_nesting_depth": 1}}).valid
        result = validate_form_spec(form, {"layout": {"max_nesting_depth": 0}})
        (issue,) = result.issues
        assert issue.path == "[group:A]/when(t=x)/[group:B]/o"

    def test_depth_checked_even_when_kind_is_disallowed(self):
        """A disallowed kind is still checked for depth."""
        form = FormSpec(elements=[ObjectField(name="o")])
        result = validate_form_spec(
            form, {"field_types": {"object": "error"}, "layout": {"max_nesting_depth": 0}}
        )
        assert codes(result) == [
            IssueCode.DISALLOWED_FIELD_TYPE,
            IssueCode.EXCEEDED_NESTING_DEPTH,
        ]
