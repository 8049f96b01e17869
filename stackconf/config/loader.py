"""Configuration document loader with deep merge support."""

import copy
import os
import tomllib
from pathlib import Path
from typing import Any

import yaml

from stackconf.exceptions import ConfigLoadError
from stackconf.observability.logging import get_logger

logger = get_logger(__name__)

BASE_DOCUMENT = "common"

# Lookup order when several formats exist for the same document
DOCUMENT_SUFFIXES: tuple[str, ...] = (".toml", ".yaml", ".yml")


def get_config_dir() -> Path:
    """Get the configuration directory path.

    The config directory can be overridden with STACKCONF_CONFIG_DIR env var.
    Defaults to 'config/' relative to the project root.
    """
    config_dir_env = os.environ.get("STACKCONF_CONFIG_DIR")
    if config_dir_env:
        path = Path(config_dir_env)
        if not path.is_dir():
            raise FileNotFoundError(f"Config directory not found: {config_dir_env}")
        return path

    # Default: look for config/ in current directory or parent directories
    current = Path.cwd()
    for _ in range(5):  # Look up to 5 levels
        config_path = current / "config"
        if config_path.is_dir():
            return config_path
        current = current.parent

    # Fallback to relative path
    return Path("config")


def find_document(config_dir: Path, name: str) -> Path | None:
    """Return the first existing file for a logical document name.

    Args:
        config_dir: Directory holding the configuration documents
        name: Document name without suffix (e.g. "common", "dev")

    Returns:
        Path of the document, or None if no supported file exists
    """
    for suffix in DOCUMENT_SUFFIXES:
        candidate = config_dir / f"{name}{suffix}"
        if candidate.is_file():
            return candidate
    return None


def load_document(file_path: Path) -> dict[str, Any]:
    """Load a TOML or YAML document and return its contents as a dictionary.

    Args:
        file_path: Path to the document

    Returns:
        Dictionary containing the document data

    Raises:
        FileNotFoundError: If the file doesn't exist
        ConfigLoadError: If the file can't be read, decoded or parsed,
            or if its top level is not a mapping
    """
    if not file_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {file_path}")

    try:
        text = file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ConfigLoadError(f"not valid UTF-8 ({e.reason})", file_path) from e
    except OSError as e:
        raise ConfigLoadError(f"unreadable ({e.strerror})", file_path) from e

    suffix = file_path.suffix.lower()
    if suffix == ".toml":
        try:
            # tomllib always yields a table at the top level
            return tomllib.loads(text)
        except tomllib.TOMLDecodeError as e:
            raise ConfigLoadError(f"invalid TOML: {e}", file_path) from e

    if suffix in {".yaml", ".yml"}:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigLoadError(f"invalid YAML: {e}", file_path) from e
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigLoadError(
                f"top level must be a mapping, got {type(data).__name__}",
                file_path,
            )
        return _string_keys(data)

    raise ConfigLoadError(f"unsupported format '{file_path.suffix}'", file_path)


def _string_keys(value: Any) -> Any:
    """Render YAML mapping keys as strings at every level (80: http -> "80")."""
    if isinstance(value, dict):
        return {str(key): _string_keys(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_string_keys(item) for item in value]
    return value


def load_optional_document(config_dir: Path, name: str) -> dict[str, Any]:
    """Load a document if present, otherwise return an empty mapping.

    Only absence is tolerated. A document that exists but is malformed
    raises ConfigLoadError.
    """
    path = find_document(config_dir, name)
    if path is None:
        logger.info(
            "config_document_missing",
            document=name,
            config_dir=str(config_dir),
        )
        return {}

    data = load_document(path)
    logger.debug("config_document_loaded", document=name, path=str(path))
    return data


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence.

    For nested dictionaries, values are merged recursively.
    For any other pair (scalars, lists, or a dict facing a non-dict),
    the override value replaces the base value. Lists are never
    concatenated.

    Neither input is modified and the result shares no mutable values
    with them.

    Args:
        base: Base dictionary
        override: Override dictionary (takes precedence)

    Returns:
        Merged dictionary
    """
    result = copy.deepcopy(base)

    for key, value in override.items():
        if (
            key in result
            and isinstance(result[key], dict)
            and isinstance(value, dict)
        ):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = copy.deepcopy(value)

    return result
