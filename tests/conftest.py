"""
Shared test fixtures for the formspec test suite.
"""

import pytest

from formspec.core.elements import (
    ArrayField,
    BooleanField,
    Conditional,
    DynamicEnumField,
    EnumOption,
    FormSpec,
    Group,
    NumberField,
    ObjectField,
    StaticEnumField,
    TextField,
)


@pytest.fixture
def contact_form():
    """Flat form with a group, a conditional and both enum option styles."""
    return FormSpec(
        elements=[
            TextField(name="name", label="Name"),
            Group(
                label="Contact",
                elements=[
                    TextField(name="email", label="Email", placeholder="you@example.com"),
                    NumberField(name="age", min=0, max=130, required=False),
                ],
            ),
            StaticEnumField(
                name="status",
                label="Status",
                options=[EnumOption(id="draft", label="Draft"), "sent"],
            ),
            Conditional(
                field="status",
                value="draft",
                elements=[TextField(name="notes", label="Notes")],
            ),
        ]
    )


@pytest.fixture
def invoice_form():
    """Form with array and object scopes and a dynamic enum."""
    return FormSpec(
        elements=[
            DynamicEnumField(name="customer", source="customers"),
            ArrayField(
                name="lines",
                items=[
                    TextField(name="sku"),
                    NumberField(name="quantity", min=1),
                    ObjectField(
                        name="discount",
                        required=False,
                        properties=[
                            BooleanField(name="percent"),
                            NumberField(name="amount"),
                        ],
                    ),
                ],
                min_items=1,
            ),
        ]
    )
