"""YAML option declaration loading with Pydantic validation."""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ..registry import ConfigOptionRegistry
from .models import OptionDefinition, parse_definition

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when a declaration or values file cannot be loaded."""


def load_yaml(path: Path) -> dict:
    """Load a YAML file and return its contents as a dict.

    Args:
        path: Path to the YAML file.

    Returns:
        Parsed YAML contents.

    Raises:
        ConfigError: If the file cannot be read or parsed, or is not a mapping.
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise ConfigError(f"Configuration file not found: {path}") from None
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping at the top of {path}")
    return data


def load_definitions(path: Path) -> list[OptionDefinition]:
    """Load the ``options`` list of a declaration file.

    Each entry is parsed into the option variant named by its ``kind``.

    Raises:
        ConfigError: If the file is unreadable or an entry is malformed.
    """
    data = load_yaml(path)
    entries = data.get("options", [])
    if not isinstance(entries, list):
        raise ConfigError(f"'options' must be a list in {path}")

    definitions = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ConfigError(f"Option #{index} in {path} is not a mapping")
        try:
            definitions.append(parse_definition(entry))
        except ValidationError as e:
            raise ConfigError(f"Invalid option #{index} in {path}: {e}") from e

    logger.debug(f"Loaded {len(definitions)} option definition(s) from {path}")
    return definitions


def load_registry(path: Path) -> ConfigOptionRegistry:
    """Build a registry from a declaration file, in file order.

    Registry errors (duplicate names, invalid defaults) propagate unchanged.
    """
    return ConfigOptionRegistry(load_definitions(path))


def load_values(path: Path) -> dict[str, Any]:
    """Load a flat ``name: value`` mapping of submitted values."""
    return load_yaml(path)
