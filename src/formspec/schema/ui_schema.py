"""
JSON Forms UI schema generation for FormSpec forms.

Fields become Controls and Groups become Group layouts nested as declared.
Conditionals render no node of their own: their children are spliced into
the surrounding layout, each carrying a SHOW rule.

Nested conditionals fold into ONE rule per node. A JSON Forms rule holds a
single condition, so the outer and inner conditions are combined under an
`allOf` on the root scope:

    {"effect": "SHOW",
     "condition": {"scope": "#",
                   "schema": {"allOf": [{"properties": {"a": {"const": 1}}},
                                        {"properties": {"b": {"const": 2}}}]}}}
"""

import copy
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, assert_never

from formspec.core.elements import (
    BaseField,
    Conditional,
    FormElement,
    FormSpec,
    Group,
)
from formspec.core.path_utils import POINTER_ROOT, ROOT_LOCATION, ElementLocation
from formspec.core.types import UISchema, UISchemaElement

SHOW_EFFECT = "SHOW"


@dataclass(frozen=True)
class RuleCondition:
    """A single "field equals value" visibility condition."""

    field: str
    value: Any
    scope: str

    def to_schema(self) -> dict[str, Any]:
        return {"const": copy.deepcopy(self.value)}

    def to_fragment(self) -> dict[str, Any]:
        """Express the condition as a schema over the whole data object."""
        return {"properties": {self.field: self.to_schema()}}


@dataclass(frozen=True)
class ShowRule:
    """
    Visibility rule attached to UI schema nodes.

    Holds every condition inherited from enclosing conditionals, outermost
    first; all of them must hold for the node to be shown.
    """

    conditions: tuple[RuleCondition, ...]

    @classmethod
    def for_conditional(
        cls, conditional: Conditional, location: ElementLocation
    ) -> "ShowRule":
        condition = RuleCondition(
            field=conditional.field,
            value=conditional.value,
            scope=location.schema_pointer(conditional.field),
        )
        return cls(conditions=(condition,))

    def combine(self, inner: "ShowRule") -> "ShowRule":
        """AND this rule with the rule of a nested conditional."""
        return ShowRule(conditions=self.conditions + inner.conditions)

    def to_dict(self) -> dict[str, Any]:
        """
        Render the rule in JSON Forms format.

        A fresh dict is built on every call so that nodes never share
        mutable rule objects.
        """
        if len(self.conditions) == 1:
            (condition,) = self.conditions
            return {
                "effect": SHOW_EFFECT,
                "condition": {"scope": condition.scope, "schema": condition.to_schema()},
            }
        return {
            "effect": SHOW_EFFECT,
            "condition": {
                "scope": POINTER_ROOT,
                "schema": {"allOf": [c.to_fragment() for c in self.conditions]},
            },
        }


def _elements_to_ui_schema(
    elements: Sequence[FormElement],
    location: ElementLocation,
    parent_rule: ShowRule | None = None,
) -> list[UISchemaElement]:
    """
    Convert form elements to UI schema elements.

    Params:
        elements: The form elements to convert
        location: Location of `elements` in the tree
        parent_rule: Rule inherited from enclosing conditionals

    Returns:
        UI schema elements in declaration order
    """
    result: list[UISchemaElement] = []

    for element in elements:
        match element:
            case Group():
                group: UISchemaElement = {
                    "type": "Group",
                    "label": element.label,
                    "elements": _elements_to_ui_schema(
                        element.elements, location.enter_group(element), parent_rule
                    ),
                }
                if parent_rule is not None:
                    group["rule"] = parent_rule.to_dict()
                result.append(group)

            case Conditional():
                rule = ShowRule.for_conditional(element, location)
                if parent_rule is not None:
                    rule = parent_rule.combine(rule)
                result.extend(
                    _elements_to_ui_schema(
                        element.elements, location.enter_conditional(element), rule
                    )
                )

            case BaseField():
                control: UISchemaElement = {
                    "type": "Control",
                    "scope": location.schema_pointer(element.name),
                }
                if element.label is not None:
                    control["label"] = element.label
                if parent_rule is not None:
                    control["rule"] = parent_rule.to_dict()
                result.append(control)

            case _:
                assert_never(element)

    return result


def generate_ui_schema(form: FormSpec) -> UISchema:
    """
    Generate a JSON Forms UI schema from a form specification.

    Params:
        form: The form specification to convert

    Returns:
        A VerticalLayout holding the derived Controls and Groups

    Example:
        form = FormSpec(elements=[
            Group(label="Customer", elements=[TextField(name="name", label="Name")]),
            Conditional(field="status", value="draft",
                        elements=[TextField(name="notes", label="Notes")]),
        ])
        generate_ui_schema(form)
        # {"type": "VerticalLayout",
        #  "elements": [
        #    {"type": "Group", "label": "Customer",
        #     "elements": [{"type": "Control", "scope": "#/properties/name",
        #                   "label": "Name"}]},
        #    {"type": "Control", "scope": "#/properties/notes", "label": "Notes",
        #     "rule": {"effect": "SHOW",
        #              "condition": {"scope": "#/properties/status",
        #                            "schema": {"const": "draft"}}}}]}
    """
    return {
        "type": "VerticalLayout",
        "elements": _elements_to_ui_schema(form.elements, ROOT_LOCATION),
    }
