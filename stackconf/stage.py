"""Stage identifiers and the entry-point precondition check."""

from typing import Literal, get_args

from stackconf.exceptions import StageNotSetError, UnsupportedStageError

Stage = Literal["local", "dev", "prod"]

SUPPORTED_STAGES: tuple[str, ...] = get_args(Stage)

# Placeholder some launchers pass when no stage was chosen
UNKNOWN_STAGE = "unknown"

USAGE_HINT = "You need to set the target stage. USAGE: stackconf --stage dev <command>"


def require_stage(stage: str | None) -> Stage:
    """Check that a usable stage was supplied before resolving configuration.

    Args:
        stage: Raw stage value from the command line or environment

    Returns:
        The stage with surrounding whitespace removed

    Raises:
        StageNotSetError: If the stage is missing, blank or 'unknown'
        UnsupportedStageError: If the stage is not a supported environment
    """
    if stage is None or not stage.strip() or stage.strip() == UNKNOWN_STAGE:
        raise StageNotSetError(USAGE_HINT)

    value = stage.strip()
    if value not in SUPPORTED_STAGES:
        raise UnsupportedStageError(value, SUPPORTED_STAGES)

    return value  # type: ignore[return-value]
