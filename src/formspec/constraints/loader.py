"""
Loading of constraint configuration from `.formspec.yml` files.

The file's top-level `constraints` mapping is merged over the defaults;
other top-level sections are reserved and ignored. An empty file yields the
defaults.

Example YAML:
    constraints:
      fieldTypes:
        dynamicEnum: error
        dynamicSchema: warn
      layout:
        group: error
        maxNestingDepth: 2
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from formspec.constraints.defaults import merge_with_defaults
from formspec.constraints.types import ConstraintConfig
from formspec.exceptions import ConfigFileNotFoundError, InvalidConfigError

logger = logging.getLogger(__name__)

# Searched in order of priority within each directory
CONFIG_FILE_NAMES = (".formspec.yml", ".formspec.yaml", "formspec.yml")


@dataclass(frozen=True)
class LoadConfigResult:
    """
    Result of loading configuration.

    Params:
        config: The loaded configuration merged with defaults
        config_path: The file that was loaded, if any
        found: Whether a config file was found
    """

    config: ConstraintConfig
    config_path: Path | None
    found: bool


def find_config_file(start_dir: str | Path, search_parents: bool = True) -> Path | None:
    """
    Search for a config file in a directory and optionally its parents.

    Params:
        start_dir: Directory where the search begins
        search_parents: Whether to continue into parent directories

    Returns:
        Path of the first config file found, or None
    """
    current = Path(start_dir).resolve()

    while True:
        for file_name in CONFIG_FILE_NAMES:
            candidate = current / file_name
            if candidate.is_file():
                logger.debug("Found config file %s", candidate)
                return candidate

        if not search_parents or current.parent == current:
            return None
        current = current.parent


def _parse_config(content: str, source: str) -> Mapping[str, Any] | None:
    """Parse YAML content and return its `constraints` section."""
    try:
        parsed = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise InvalidConfigError(source, f"malformed YAML: {e}") from e

    if parsed is None:
        return None
    if not isinstance(parsed, Mapping):
        raise InvalidConfigError(
            source, f"expected a mapping, got {type(parsed).__name__}"
        )
    return parsed.get("constraints")


def load_config_from_string(yaml_content: str, source: str = "<string>") -> ConstraintConfig:
    """
    Load constraint configuration from YAML text.

    Params:
        yaml_content: YAML document with an optional `constraints` section
        source: Name used in error messages

    Returns:
        Configuration merged with defaults

    Raises:
        InvalidConfigError: If the YAML is malformed or has the wrong shape
    """
    return merge_with_defaults(_parse_config(yaml_content, source), source=source)


def load_config(
    cwd: str | Path | None = None,
    config_path: str | Path | None = None,
    search_parents: bool = True,
) -> LoadConfigResult:
    """
    Load constraint configuration from a file.

    Params:
        cwd: Directory to search from (and to resolve `config_path`
            against); defaults to the current working directory
        config_path: Explicit config file; skips the search when given
        search_parents: Whether to search parent directories

    Returns:
        LoadConfigResult; defaults with `found=False` when no file exists

    Raises:
        ConfigFileNotFoundError: If `config_path` does not exist
        InvalidConfigError: If the file content is invalid
    """
    base = Path(cwd) if cwd is not None else Path.cwd()

    if config_path is not None:
        resolved = (base / config_path).resolve()
        if not resolved.is_file():
            raise ConfigFileNotFoundError(str(resolved))
    else:
        resolved = find_config_file(base, search_parents)

    if resolved is None:
        logger.debug("No config file found from %s; using defaults", base)
        return LoadConfigResult(
            config=merge_with_defaults(None), config_path=None, found=False
        )

    try:
        content = resolved.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidConfigError(str(resolved), f"cannot read file: {e}") from e

    config = load_config_from_string(content, str(resolved))
    return LoadConfigResult(config=config, config_path=resolved, found=True)
