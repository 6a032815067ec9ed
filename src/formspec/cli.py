"""
FormSpec command line interface.

Usage:
    formspec build <input> [-o OUT_DIR] [-n NAME] [--indent N]
    formspec check <input> [--config PATH]

The input is a Python file defining a module attribute `form` (or `FORM`)
holding a FormSpec, or a JSON/YAML file holding a form literal:

    elements:
      - {kind: text, name: email, label: Email}
      - kind: conditional
        field: email
        value: ""
        elements:
          - {kind: boolean, name: no_email_ok}

Issues are printed grouped by severity. The exit status is 1 when at least
one error-severity issue exists and 0 otherwise.
"""

import argparse
import importlib.util
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

import yaml
from pydantic import ValidationError

from formspec.constraints import load_config, validate_form_spec, validate_ui_schema
from formspec.core.elements import FormSpec
from formspec.core.issues import ValidationResult
from formspec.exceptions import FormLoadError, FormSpecError
from formspec.schema import generate_ui_schema, write_schemas
from formspec.structure import validate_form

logger = logging.getLogger(__name__)

FORM_ATTRIBUTES = ("form", "FORM")


def _load_python_form(path: Path) -> FormSpec:
    spec = importlib.util.spec_from_file_location(f"_formspec_input_{path.stem}", path)
    if spec is None or spec.loader is None:
        raise FormLoadError(str(path), "not an importable Python file")
    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        raise FormLoadError(str(path), f"error while executing module: {e}") from e

    for attribute in FORM_ATTRIBUTES:
        form = getattr(module, attribute, None)
        if isinstance(form, FormSpec):
            return form
    raise FormLoadError(
        str(path), f"expected a FormSpec in one of: {', '.join(FORM_ATTRIBUTES)}"
    )


def load_form(path: str | Path) -> FormSpec:
    """
    Load a form specification from a Python, JSON or YAML file.

    Params:
        path: File to load

    Returns:
        The loaded FormSpec

    Raises:
        FormLoadError: If the file is missing, unreadable or does not hold
            a valid form
    """
    source = Path(path)
    if not source.is_file():
        raise FormLoadError(str(source), "file does not exist")

    suffix = source.suffix.lower()
    if suffix == ".py":
        return _load_python_form(source)

    try:
        text = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FormLoadError(str(source), f"cannot read file: {e}") from e

    try:
        if suffix == ".json":
            data = json.loads(text)
        elif suffix in (".yml", ".yaml"):
            data = yaml.safe_load(text)
        else:
            raise FormLoadError(str(source), f"unsupported file type '{suffix}'")
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise FormLoadError(str(source), f"malformed content: {e}") from e

    # A bare list is shorthand for the top-level elements
    if isinstance(data, list):
        data = {"elements": data}
    try:
        return FormSpec.model_validate(data)
    except ValidationError as e:
        raise FormLoadError(str(source), str(e)) from e


def print_issues(result: ValidationResult) -> None:
    """Print issues grouped by severity, errors first."""
    for title, issues in (("Errors", result.errors), ("Warnings", result.warnings)):
        if not issues:
            continue
        print(f"{title} ({len(issues)}):")
        for issue in issues:
            print(f"  {issue}")


def _build(args: argparse.Namespace) -> int:
    form = load_form(args.input)

    result = validate_form(form)
    print_issues(result)
    if not result.valid:
        return 1

    name = args.name or Path(args.input).stem
    written = write_schemas(form, args.out_dir, name=name, indent=args.indent)
    print("Generated:")
    print(f"  {written.json_schema_path}")
    print(f"  {written.ui_schema_path}")
    return 0


def _check(args: argparse.Namespace) -> int:
    form = load_form(args.input)
    loaded = load_config(config_path=args.config)
    if loaded.found:
        logger.info("Using constraints from %s", loaded.config_path)

    result = validate_form(form).merge(validate_form_spec(form, loaded.config))
    result = result.merge(validate_ui_schema(generate_ui_schema(form), loaded.config))

    print_issues(result)
    if result.valid:
        print(f"{args.input}: OK")
        return 0
    return 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="formspec",
        description="Generate JSON Schema and UI schema from form specifications",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    build = subparsers.add_parser("build", help="Write JSON Schema and UI schema files")
    build.add_argument("input", help="Python, JSON or YAML file defining the form")
    build.add_argument("-o", "--out-dir", default="./generated", help="Output directory")
    build.add_argument("-n", "--name", default="", help="Base name of the output files")
    build.add_argument("--indent", type=int, default=2, help="JSON indentation")
    build.set_defaults(handler=_build)

    check = subparsers.add_parser("check", help="Validate a form against constraints")
    check.add_argument("input", help="Python, JSON or YAML file defining the form")
    check.add_argument("-c", "--config", default=None, help="Constraint config file")
    check.set_defaults(handler=_check)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return args.handler(args)
    except FormSpecError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
