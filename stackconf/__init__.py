"""stackconf: stage-aware configuration for infrastructure stacks."""

from stackconf.config import ResolvedConfig, resolve_config
from stackconf.exceptions import (
    ConfigLoadError,
    StackConfError,
    StageError,
    StageNotSetError,
    UnsupportedStageError,
)
from stackconf.naming import StackNaming
from stackconf.stage import SUPPORTED_STAGES, Stage, require_stage

__version__ = "0.1.0"

__all__ = [
    "ConfigLoadError",
    "ResolvedConfig",
    "SUPPORTED_STAGES",
    "StackConfError",
    "StackNaming",
    "Stage",
    "StageError",
    "StageNotSetError",
    "UnsupportedStageError",
    "require_stage",
    "resolve_config",
]
