"""
Options File Loader

Loads lint options from a YAML file (JSON is accepted, it is a YAML subset).

    good_parts: true
    options:
      indent: 4
      predef: [jQuery, window]
      white: false

Option keys are case-insensitive identifiers. The good parts are applied
first, so explicit options override them.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from lintopts.config.resolved import ConfigBuilder, ResolvedConfig
from lintopts.core.errors import OptionsFileError

logger = logging.getLogger(__name__)

# Environment variable naming an explicit options file
CONFIG_ENV_VAR = "LINTOPTS_CONFIG"

# File names checked in each search directory (in order)
CONFIG_FILENAMES = (".jslintrc.yaml", ".jslintrc.yml", ".jslintrc.json")


class OptionsFile(BaseModel):
    """
    Schema of an options file.

    Attributes:
        good_parts: Enable every option from "The Good Parts" first
        options: Option name -> value, coerced per the option's value type
    """
    model_config = ConfigDict(extra="forbid")

    good_parts: bool = False
    options: dict[str, Any] = Field(default_factory=dict)


def parse_options_document(data: Any, path: Optional[Path] = None) -> ResolvedConfig:
    """
    Build a configuration from an already-parsed document.

    Raises:
        OptionsFileError: If the document does not match the schema.
        UnknownOptionError: If an option key is not in the catalog.
        TypeMismatchError: If an option value has the wrong type.
    """
    if data is None:
        return ResolvedConfig()
    if not isinstance(data, dict):
        raise OptionsFileError(path, f"options must be a mapping, got {type(data).__name__}")

    try:
        doc = OptionsFile.model_validate(data)
    except ValidationError as e:
        raise OptionsFileError(path, str(e)) from e

    builder = ConfigBuilder()
    if doc.good_parts:
        builder.enable_good_parts()
    builder.update(doc.options)
    return builder.build()


def load_options_file(path: Path | str) -> ResolvedConfig:
    """
    Load a configuration from an options file.

    Args:
        path: YAML or JSON options file.

    Returns:
        The resolved configuration (empty for an empty file).

    Raises:
        FileNotFoundError: If the file doesn't exist.
        OptionsFileError: If the file cannot be read, is not valid YAML, or is not a valid options document.
        UnknownOptionError: If an option key is not in the catalog.
        TypeMismatchError: If an option value has the wrong type.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Options file not found: {path}")

    logger.debug("Loading options from %s", path)
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise OptionsFileError(path, f"invalid YAML: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise OptionsFileError(path, f"cannot read options file: {e}") from e

    config = parse_options_document(data, path)
    logger.debug("Loaded %d option(s) from %s", len(config), path)
    return config


def find_options_file(start: Optional[Path] = None) -> Optional[Path]:
    """
    Locate an options file.

    Checks $LINTOPTS_CONFIG, then the CONFIG_FILENAMES in start (default:
    the current directory), then in the home directory.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        candidate = Path(env_path).expanduser()
        if candidate.is_file():
            return candidate
        logger.warning("%s does not point at a file: %s", CONFIG_ENV_VAR, candidate)

    search_dirs = [Path(start) if start else Path.cwd(), Path.home()]
    for directory in search_dirs:
        for name in CONFIG_FILENAMES:
            candidate = directory / name
            if candidate.is_file():
                logger.debug("Found options file %s", candidate)
                return candidate
    return None
