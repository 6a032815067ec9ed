"""
Path and scope resolution for FormSpec element trees.

A field's position in a tree maps to two kinds of path:

- a schema pointer, rooted at the nearest enclosing object/array scope and
  blind to Groups and Conditionals, which carry no data shape
  (`#/properties/email`);
- a diagnostic path, which also records every Group and Conditional
  ancestor so messages point at the authored structure
  (`[group:Contact]/email`, `when(status=draft)/notes`, `lines[]/sku`).

Both engines thread an `ElementLocation` through their recursion instead of
re-deriving paths, which keeps the two path flavours consistent everywhere.
"""

import json
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, replace
from typing import Any, assert_never

from formspec.core.elements import (
    ArrayField,
    BaseField,
    Conditional,
    FormElement,
    Group,
    ObjectField,
)

POINTER_ROOT = "#"


def escape_pointer_segment(segment: str) -> str:
    """
    Escape a single JSON pointer reference token (RFC 6901).

    Params:
        segment: Raw property name

    Returns:
        Token with `~` encoded as `~0` and `/` encoded as `~1`
    """
    return segment.replace("~", "~0").replace("/", "~1")


def format_trigger_value(value: Any) -> str:
    """
    Render a conditional trigger value for a diagnostic path.

    Strings render verbatim; every other value renders as JSON so that
    `False`, `0` and `None` stay distinguishable from each other.
    """
    if isinstance(value, str):
        return value
    return json.dumps(value, sort_keys=True, default=str)


@dataclass(frozen=True)
class ScopeSegment:
    """An Array or Object field that opens a new data scope."""

    name: str
    is_array: bool = False


@dataclass(frozen=True)
class ElementLocation:
    """
    Position of an element inside a form tree.

    Params:
        scopes: Enclosing Array/Object fields, outermost first
        segments: Diagnostic path segments of every ancestor
        conditional: Whether any ancestor is a Conditional
    """

    scopes: tuple[ScopeSegment, ...] = ()
    segments: tuple[str, ...] = ()
    conditional: bool = False

    @property
    def depth(self) -> int:
        """Number of Array/Object boundaries between the root and here."""
        return len(self.scopes)

    @property
    def prefix(self) -> str:
        """Diagnostic path of the containing position ("" at the root)."""
        return "/".join(self.segments)

    def diagnostic_path(self, name: str) -> str:
        """Diagnostic path of a node named `name` at this location."""
        return "/".join((*self.segments, name))

    def schema_pointer(self, name: str) -> str:
        """Schema pointer of field `name`, relative to the current scope."""
        return f"{POINTER_ROOT}/properties/{escape_pointer_segment(name)}"

    def absolute_pointer(self, name: str) -> str:
        """
        Schema pointer of field `name` from the document root.

        Walks through every enclosing Object (`/properties/<name>`) and
        Array (`/properties/<name>/items`) scope.
        """
        parts = [POINTER_ROOT]
        for scope in self.scopes:
            parts.append(f"properties/{escape_pointer_segment(scope.name)}")
            if scope.is_array:
                parts.append("items")
        parts.append(f"properties/{escape_pointer_segment(name)}")
        return "/".join(parts)

    def enter_group(self, group: Group) -> "ElementLocation":
        return replace(self, segments=(*self.segments, f"[group:{group.label}]"))

    def enter_conditional(self, conditional: Conditional) -> "ElementLocation":
        trigger = format_trigger_value(conditional.value)
        return replace(
            self,
            segments=(*self.segments, f"when({conditional.field}={trigger})"),
            conditional=True,
        )

    def enter_field(self, field: ArrayField | ObjectField) -> "ElementLocation":
        """Open the data scope owned by an Array or Object field."""
        is_array = isinstance(field, ArrayField)
        segment = f"{field.name}[]" if is_array else field.name
        return replace(
            self,
            scopes=(*self.scopes, ScopeSegment(field.name, is_array)),
            segments=(*self.segments, segment),
        )


ROOT_LOCATION = ElementLocation()


def walk_elements(
    elements: Sequence[FormElement],
    location: ElementLocation = ROOT_LOCATION,
) -> Iterator[tuple[FormElement, ElementLocation]]:
    """
    Depth-first, pre-order traversal of a form tree.

    Params:
        elements: Elements to visit
        location: Location of `elements` within the whole tree

    Returns:
        Iterator of (element, location-of-element) pairs, in declaration order
    """
    for element in elements:
        yield element, location
        match element:
            case Group():
                yield from walk_elements(element.elements, location.enter_group(element))
            case Conditional():
                yield from walk_elements(
                    element.elements, location.enter_conditional(element)
                )
            case ArrayField() | ObjectField():
                yield from walk_elements(element.children, location.enter_field(element))
            case BaseField():
                pass
            case _:
                assert_never(element)
