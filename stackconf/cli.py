"""Command-line entry point.

Checks the stage, resolves the configuration once and hands it to the
selected command.

Usage:
    stackconf --stage dev show
    stackconf --stage prod names instance --bucket-prefix my-sample-bucket
"""

import argparse
import json
import sys
from typing import Any

from pydantic import ValidationError
from pydantic_settings import SettingsError

from stackconf.config import ResolvedConfig, RuntimeSettings, resolve_config
from stackconf.config.loader import get_config_dir
from stackconf.exceptions import ConfigLoadError, StageError
from stackconf.naming import StackNaming
from stackconf.observability.logging import get_logger, setup_logging
from stackconf.stage import require_stage

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_STAGE_ERROR = 1
EXIT_CONFIG_ERROR = 2
EXIT_USAGE_ERROR = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stackconf",
        description="Resolve stage-specific stack configuration",
    )
    parser.add_argument("--stage", help="Target stage (or STACKCONF_STAGE)")
    parser.add_argument(
        "--config-dir",
        help="Directory holding common and per-stage documents (or STACKCONF_CONFIG_DIR)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Minimum log level",
    )
    parser.add_argument("--log-format", choices=["json", "console"], help="Log output format")

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("show", help="Print the resolved configuration as JSON")

    names = subparsers.add_parser("names", help="Print stage-scoped names for a resource")
    names.add_argument("resource", help="Resource label, e.g. 'instance'")
    names.add_argument(
        "--bucket-prefix",
        help="Also derive a bucket name from this prefix",
    )
    return parser


def settings_from_args(args: argparse.Namespace) -> RuntimeSettings:
    """Build runtime settings, letting flags win over environment variables."""
    overrides: dict[str, Any] = {}
    if args.stage is not None:
        overrides["stage"] = args.stage
    if args.config_dir is not None:
        overrides["config_dir"] = args.config_dir

    logging_overrides: dict[str, Any] = {}
    if args.log_level is not None:
        logging_overrides["level"] = args.log_level
    if args.log_format is not None:
        logging_overrides["format"] = args.log_format
    if logging_overrides:
        overrides["logging"] = logging_overrides

    return RuntimeSettings(**overrides)


def show(config: ResolvedConfig) -> dict[str, Any]:
    return config.as_dict(mode="json")


def names(config: ResolvedConfig, resource: str, bucket_prefix: str | None) -> dict[str, Any]:
    naming = StackNaming(config)
    result: dict[str, Any] = {
        "construct_id": naming.construct_id(resource),
        "tags": naming.resource_tags(resource),
    }
    if bucket_prefix:
        result["bucket_name"] = naming.bucket_name(bucket_prefix)
    return result


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = settings_from_args(args)
    except (ValidationError, SettingsError) as e:
        print(f"Invalid settings: {e}", file=sys.stderr)
        return EXIT_USAGE_ERROR

    setup_logging(
        level=settings.logging.level,
        format=settings.logging.format,
        redact_pii=settings.logging.redact_pii,
    )

    try:
        stage = require_stage(settings.stage)
    except StageError as e:
        print(str(e), file=sys.stderr)
        return EXIT_STAGE_ERROR

    try:
        if settings.config_dir is not None:
            if not settings.config_dir.is_dir():
                raise FileNotFoundError(f"Config directory not found: {settings.config_dir}")
            config_dir = settings.config_dir
        else:
            config_dir = get_config_dir()
        config = resolve_config(stage, config_dir)
    except (ConfigLoadError, FileNotFoundError) as e:
        logger.error("config_load_failed", stage=stage, error=str(e))
        print(str(e), file=sys.stderr)
        return EXIT_CONFIG_ERROR

    if args.command == "show":
        output = show(config)
    else:
        try:
            output = names(config, args.resource, args.bucket_prefix)
        except ValueError as e:
            print(str(e), file=sys.stderr)
            return EXIT_USAGE_ERROR

    print(json.dumps(output, indent=2, sort_keys=True))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
