"""
Form element models for FormSpec.

The structure IS the definition: nesting implies layout and conditional
visibility. Every element carries a `kind` literal, so a tree can be built
from Python objects or validated from a plain JSON/YAML literal:

    FormSpec.model_validate({"elements": [{"kind": "text", "name": "email"}]})

Construction only rejects type-level mistakes (wrong attribute types, unknown
kinds). Semantic problems such as duplicate names or conditionals pointing at
undeclared fields are reported by `formspec.structure.validate_form`.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import Field

from formspec.core.tree_node import FormNode

FieldKind = Literal[
    "text",
    "number",
    "boolean",
    "enum",
    "dynamic_enum",
    "dynamic_schema",
    "array",
    "object",
]

FIELD_KINDS: tuple[str, ...] = (
    "text",
    "number",
    "boolean",
    "enum",
    "dynamic_enum",
    "dynamic_schema",
    "array",
    "object",
)


class EnumOption(FormNode):
    """An enum option whose stored value (id) differs from its display text."""

    id: str
    label: str


EnumOptionValue = str | EnumOption


class BaseField(FormNode):
    """
    Common attributes of every field kind.

    `required` keeps the author's raw setting so validators can tell an
    explicit `True` from an omitted flag; use `is_required` for the
    effective value.
    """

    name: str
    label: str | None = None
    required: bool | None = None

    @property
    def is_required(self) -> bool:
        """Fields are required unless explicitly marked `required=False`."""
        return self.required is not False

    @property
    def children(self) -> tuple["FormElement", ...]:
        return ()


class TextField(BaseField):
    """A text input field."""

    kind: Literal["text"] = "text"
    placeholder: str | None = None


class NumberField(BaseField):
    """A numeric input field with optional inclusive bounds."""

    kind: Literal["number"] = "number"
    min: int | float | None = None
    max: int | float | None = None


class BooleanField(BaseField):
    """A checkbox/toggle field."""

    kind: Literal["boolean"] = "boolean"


class StaticEnumField(BaseField):
    """A field whose options are known when the form is declared."""

    kind: Literal["enum"] = "enum"
    options: tuple[EnumOptionValue, ...] = ()


class DynamicEnumField(BaseField):
    """
    A field whose options are fetched from a named data source at runtime.

    `params` lists the names of fields whose values the data source needs,
    for cascading selections.
    """

    kind: Literal["dynamic_enum"] = "dynamic_enum"
    source: str
    params: tuple[str, ...] | None = None


class DynamicSchemaField(BaseField):
    """A field whose schema is loaded at runtime (e.g. from an extension)."""

    kind: Literal["dynamic_schema"] = "dynamic_schema"
    schema_source: str


class ArrayField(BaseField):
    """A repeating field; `items` declares the shape of a single item."""

    kind: Literal["array"] = "array"
    items: tuple["FormElement", ...] = ()
    min_items: int | None = None
    max_items: int | None = None

    @property
    def children(self) -> tuple["FormElement", ...]:
        return self.items


class ObjectField(BaseField):
    """A field holding nested properties under a single key."""

    kind: Literal["object"] = "object"
    properties: tuple["FormElement", ...] = ()

    @property
    def children(self) -> tuple["FormElement", ...]:
        return self.properties


class Group(FormNode):
    """A visual grouping of elements; it has no effect on the data shape."""

    kind: Literal["group"] = "group"
    label: str
    elements: tuple["FormElement", ...] = ()

    @property
    def children(self) -> tuple["FormElement", ...]:
        return self.elements


class Conditional(FormNode):
    """
    Shows its elements only while another field equals `value`.

    `value` is any JSON value; `False`, `0`, `""` and `None` are all
    legitimate triggers.
    """

    kind: Literal["conditional"] = "conditional"
    field: str
    value: Any
    elements: tuple["FormElement", ...] = ()

    @property
    def children(self) -> tuple["FormElement", ...]:
        return self.elements


AnyField = (
    TextField
    | NumberField
    | BooleanField
    | StaticEnumField
    | DynamicEnumField
    | DynamicSchemaField
    | ArrayField
    | ObjectField
)

FormElement = Annotated[
    Union[
        TextField,
        NumberField,
        BooleanField,
        StaticEnumField,
        DynamicEnumField,
        DynamicSchemaField,
        ArrayField,
        ObjectField,
        Group,
        Conditional,
    ],
    Field(discriminator="kind"),
]


class FormSpec(FormNode):
    """A complete form specification: the ordered top-level elements."""

    elements: tuple[FormElement, ...] = ()


for _model in (ArrayField, ObjectField, Group, Conditional, FormSpec):
    _model.model_rebuild()
