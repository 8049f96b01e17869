"""Stage-aware configuration resolution.

Configuration for a stage is built from two documents in the config
directory:
1. common.toml (shared defaults, optional)
2. {stage}.toml (stage overrides, optional)

YAML files (common.yaml, dev.yml, ...) are accepted as well.

Usage:
    from stackconf.config import resolve_config

    config = resolve_config("dev")
    region = config.aws_region

Resolve once at process entry and pass the result to whatever needs it.
Nothing is cached; every call re-reads the documents.
"""

from pathlib import Path

from pydantic import ValidationError

from stackconf.config.loader import (
    BASE_DOCUMENT,
    deep_merge,
    get_config_dir,
    load_optional_document,
)
from stackconf.config.models import ResolvedConfig
from stackconf.config.settings import RuntimeSettings
from stackconf.exceptions import ConfigLoadError
from stackconf.observability.logging import get_logger

logger = get_logger(__name__)


def resolve_config(stage: str, config_dir: Path | None = None) -> ResolvedConfig:
    """Resolve the configuration for a stage.

    Missing documents are treated as empty. The resolved stage always
    replaces any 'stage' key from either document.

    Args:
        stage: Stage identifier, already checked by the caller
        config_dir: Directory holding the documents (defaults to get_config_dir())

    Returns:
        Validated, immutable configuration

    Raises:
        ConfigLoadError: If a present document is malformed, or the stage
            is not a supported one
    """
    directory = config_dir if config_dir is not None else get_config_dir()

    base = load_optional_document(directory, BASE_DOCUMENT)
    override = load_optional_document(directory, stage)

    merged = deep_merge(base, override)
    merged["stage"] = stage

    try:
        config = ResolvedConfig.model_validate(merged)
    except ValidationError as e:
        # Known fields accept any value, so only the stage can fail here
        raise ConfigLoadError(f"invalid configuration for stage '{stage}': {e}") from e

    logger.debug("config_resolved", stage=stage, keys=sorted(merged))
    return config


__all__ = ["RuntimeSettings", "ResolvedConfig", "resolve_config"]
