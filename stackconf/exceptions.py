"""Exception hierarchy for stackconf.

Two families are kept apart so the entry point can tell them apart:
- StageError: the caller did not supply a usable stage
- ConfigLoadError: a configuration document exists but could not be used
"""

from pathlib import Path


class StackConfError(Exception):
    """Base exception for stackconf errors."""

    pass


class ConfigLoadError(StackConfError):
    """Raised when configuration cannot be loaded or validated."""

    def __init__(self, reason: str, path: Path | None = None) -> None:
        self.reason = reason
        self.path = path
        if path is not None:
            message = f"Failed to load configuration from {path}: {reason}"
        else:
            message = f"Failed to load configuration: {reason}"
        super().__init__(message)


class StageError(StackConfError):
    """Base exception for stage precondition failures."""

    pass


class StageNotSetError(StageError):
    """Raised when no stage (or the 'unknown' sentinel) was supplied."""

    pass


class UnsupportedStageError(StageError):
    """Raised when the stage is not one of the supported environments."""

    def __init__(self, stage: str, supported: tuple[str, ...]) -> None:
        self.stage = stage
        self.supported = supported
        super().__init__(
            f"Unsupported stage '{stage}'. Expected one of: {', '.join(supported)}"
        )
