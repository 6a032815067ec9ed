"""
Combined schema building and writing for FormSpec forms.

`build_form_schemas` derives both artifacts in one call; `write_schemas`
persists them as `<name>-schema.json` and `<name>-uischema.json`.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from formspec.core.elements import FormSpec
from formspec.core.types import JSONSchema, UISchema
from formspec.schema.json_schema import generate_json_schema
from formspec.schema.ui_schema import generate_ui_schema

logger = logging.getLogger(__name__)

DEFAULT_SCHEMA_NAME = "schema"


@dataclass(frozen=True)
class BuildResult:
    """Both schemas derived from one form specification."""

    json_schema: JSONSchema
    ui_schema: UISchema


@dataclass(frozen=True)
class WrittenSchemas:
    """Locations of the files produced by `write_schemas`."""

    json_schema_path: Path
    ui_schema_path: Path


def build_form_schemas(form: FormSpec) -> BuildResult:
    """
    Build both the JSON Schema and the UI schema from a form specification.

    Params:
        form: The form specification to build schemas from

    Returns:
        BuildResult holding `json_schema` and `ui_schema`

    Raises:
        EmptyEnumOptionsError: If a static enum field declares no options
    """
    return BuildResult(
        json_schema=generate_json_schema(form),
        ui_schema=generate_ui_schema(form),
    )


def write_schemas(
    form: FormSpec,
    out_dir: str | Path,
    name: str = DEFAULT_SCHEMA_NAME,
    indent: int = 2,
) -> WrittenSchemas:
    """
    Build both schemas and write them to JSON files.

    The output directory is created when missing. Both schemas are derived
    before anything is written, so a derivation error leaves no partial
    output behind.

    Params:
        form: The form specification to build schemas from
        out_dir: Directory receiving the files
        name: Base name of the files
        indent: JSON indentation width

    Returns:
        WrittenSchemas with the paths of both files
    """
    result = build_form_schemas(form)

    directory = Path(out_dir)
    directory.mkdir(parents=True, exist_ok=True)

    json_schema_path = directory / f"{name}-schema.json"
    ui_schema_path = directory / f"{name}-uischema.json"

    json_schema_path.write_text(
        json.dumps(result.json_schema, indent=indent) + "\n", encoding="utf-8"
    )
    ui_schema_path.write_text(
        json.dumps(result.ui_schema, indent=indent) + "\n", encoding="utf-8"
    )
    logger.debug("Wrote %s and %s", json_schema_path, ui_schema_path)

    return WrittenSchemas(json_schema_path=json_schema_path, ui_schema_path=ui_schema_path)
