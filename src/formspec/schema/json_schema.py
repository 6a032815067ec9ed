"""
JSON Schema generation for FormSpec forms.

Groups and Conditionals carry no data shape: their fields splice into the
enclosing object scope. Conditionals still make every descendant optional,
since hidden fields cannot be demanded from the user.
"""

from collections.abc import Sequence
from typing import assert_never

from formspec.core.elements import (
    AnyField,
    ArrayField,
    BooleanField,
    Conditional,
    DynamicEnumField,
    DynamicSchemaField,
    EnumOption,
    FormElement,
    FormSpec,
    Group,
    NumberField,
    ObjectField,
    StaticEnumField,
    TextField,
)
from formspec.core.path_utils import ROOT_LOCATION, ElementLocation
from formspec.core.types import JSONSchema
from formspec.exceptions import EmptyEnumOptionsError

JSON_SCHEMA_DRAFT = "https://json-schema.org/draft-07/schema#"

SOURCE_KEY = "x-formspec-source"
PARAMS_KEY = "x-formspec-params"
SCHEMA_SOURCE_KEY = "x-formspec-schemaSource"


def _enum_schema(field: StaticEnumField, location: ElementLocation) -> JSONSchema:
    """
    Build the schema of a static enum.

    Plain string options become an `enum`. As soon as one option carries a
    separate label, every option becomes a `oneOf` const/title branch so no
    display label is lost.
    """
    options = field.options
    if not options:
        raise EmptyEnumOptionsError(field.name, location.diagnostic_path(field.name))

    if all(isinstance(option, str) for option in options):
        return {"type": "string", "enum": list(options)}

    branches = []
    for option in options:
        if isinstance(option, EnumOption):
            branches.append({"const": option.id, "title": option.label})
        else:
            branches.append({"const": option, "title": option})
    return {"type": "string", "oneOf": branches}


def _field_schema(field: AnyField, location: ElementLocation) -> JSONSchema:
    """Convert a single field into its JSON Schema representation."""
    schema: JSONSchema = {}
    if field.label is not None:
        schema["title"] = field.label

    match field:
        case TextField():
            schema["type"] = "string"
        case NumberField():
            schema["type"] = "number"
            if field.min is not None:
                schema["minimum"] = field.min
            if field.max is not None:
                schema["maximum"] = field.max
        case BooleanField():
            schema["type"] = "boolean"
        case StaticEnumField():
            schema.update(_enum_schema(field, location))
        case DynamicEnumField():
            # Options are resolved at runtime; the stored value is a string
            schema["type"] = "string"
            schema[SOURCE_KEY] = field.source
            if field.params:
                schema[PARAMS_KEY] = list(field.params)
        case DynamicSchemaField():
            schema["type"] = "object"
            schema["additionalProperties"] = True
            schema[SCHEMA_SOURCE_KEY] = field.schema_source
        case ArrayField():
            schema["type"] = "array"
            schema["items"] = _object_schema(field.items, location.enter_field(field))
            if field.min_items is not None:
                schema["minItems"] = field.min_items
            if field.max_items is not None:
                schema["maxItems"] = field.max_items
        case ObjectField():
            schema.update(_object_schema(field.properties, location.enter_field(field)))
        case _:
            assert_never(field)

    return schema


def _collect_fields(
    elements: Sequence[FormElement],
    location: ElementLocation,
    properties: JSONSchema,
    required: list[str],
) -> None:
    """Collect the properties and required names of one object scope."""
    for element in elements:
        match element:
            case Group():
                _collect_fields(
                    element.elements, location.enter_group(element), properties, required
                )
            case Conditional():
                _collect_fields(
                    element.elements,
                    location.enter_conditional(element),
                    properties,
                    required,
                )
            case (
                TextField()
                | NumberField()
                | BooleanField()
                | StaticEnumField()
                | DynamicEnumField()
                | DynamicSchemaField()
                | ArrayField()
                | ObjectField()
            ):
                properties[element.name] = _field_schema(element, location)
                if element.is_required and not location.conditional:
                    if element.name not in required:
                        required.append(element.name)
            case _:
                assert_never(element)


def _object_schema(elements: Sequence[FormElement], location: ElementLocation) -> JSONSchema:
    properties: JSONSchema = {}
    required: list[str] = []
    _collect_fields(elements, location, properties, required)

    schema: JSONSchema = {"type": "object", "properties": properties}
    if required:
        schema["required"] = required
    return schema


def generate_json_schema(form: FormSpec) -> JSONSchema:
    """
    Generate a JSON Schema (draft-07) from a form specification.

    Params:
        form: The form specification to convert

    Returns:
        JSON Schema document describing the form's data

    Raises:
        EmptyEnumOptionsError: If a static enum field declares no options

    Example:
        form = FormSpec(elements=[TextField(name="name", label="Name"),
                                  NumberField(name="age", min=0, required=False)])
        generate_json_schema(form)
        # {"$schema": "https://json-schema.org/draft-07/schema#",
        #  "type": "object",
        #  "properties": {"name": {"title": "Name", "type": "string"},
        #                 "age": {"type": "number", "minimum": 0}},
        #  "required": ["name"]}
    """
    return {"$schema": JSON_SCHEMA_DRAFT, **_object_schema(form.elements, ROOT_LOCATION)}
