"""Structured logging configuration using structlog.

Provides JSON logging for CI and console logging for interactive use,
with automatic context binding and redaction of account details.
"""

import logging
import re
import sys
from collections.abc import MutableMapping
from typing import Any, cast

import structlog
from structlog.typing import EventDict, FilteringBoundLogger, WrappedLogger

# Sensitive key names, compared lower-cased
SENSITIVE_KEYS: frozenset[str] = frozenset({
    "aws_account",
    "account",
    "account_id",
    "emailaddress",
    "email_address",
    "email",
    "password",
    "secret",
    "token",
    "api_key",
    "access_key",
    "secret_key",
    "access_key_id",
    "secret_access_key",
    "session_token",
    "private_key",
    "credentials",
})

EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")

REDACTED = "[REDACTED]"


class PIIRedactor:
    """Processor that redacts account details from log events.

    Values under a sensitive key are replaced wholesale; email-shaped
    substrings anywhere else are masked.
    """

    def __call__(
        self,
        _logger: WrappedLogger,
        _method_name: str,
        event_dict: EventDict,
    ) -> EventDict:
        return cast(EventDict, self._redact_dict(event_dict))

    def _redact_value(self, value: Any) -> Any:
        if isinstance(value, dict):
            return self._redact_dict(value)
        if isinstance(value, list):
            return [self._redact_value(item) for item in value]
        if isinstance(value, str):
            return EMAIL_PATTERN.sub("[EMAIL]", value)
        return value

    def _redact_dict(self, data: MutableMapping[str, Any]) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for key, value in data.items():
            if str(key).lower() in SENSITIVE_KEYS:
                result[key] = REDACTED
            else:
                result[key] = self._redact_value(value)
        return result


def build_processors(format: str, redact_pii: bool) -> list[Any]:
    """Processor chain: context, level, timestamp, redaction, renderer."""
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if redact_pii:
        processors.append(PIIRedactor())

    if format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))
    return processors


def setup_logging(
    level: str = "INFO",
    format: str = "console",
    redact_pii: bool = True,
) -> None:
    """Configure structured logging for the process.

    Until this runs (or the host application configures structlog itself),
    loggers from get_logger stay silent.

    Args:
        level: Minimum log level name, case-insensitive
        format: "json" for CI, "console" for terminals
        redact_pii: Whether to redact account details from logs
    """
    level_num = logging.getLevelNamesMapping().get(level.upper(), logging.INFO)

    # Logs go to stderr so stdout stays parseable
    structlog.configure(
        processors=build_processors(format, redact_pii),
        wrapper_class=structlog.make_filtering_bound_logger(level_num),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        cache_logger_on_first_use=False,
    )


def _discard(*_args: Any, **_kwargs: Any) -> None:
    return None


class _QuietUntilConfigured:
    """Defers to structlog once it is configured; drops events before that.

    structlog's built-in defaults print everything to stdout, which is
    where a stack synthesis tool writes its own output.
    """

    def __init__(self, name: str) -> None:
        self._logger = structlog.get_logger(name)

    def __getattr__(self, method: str) -> Any:
        if not structlog.is_configured():
            return _discard
        return getattr(self._logger, method)


def get_logger(name: str) -> FilteringBoundLogger:
    """Get a logger bound to the given name.

    Args:
        name: Logger name (typically __name__ of the module)

    Returns:
        A filtering bound logger, silent until logging is configured
    """
    return cast(FilteringBoundLogger, _QuietUntilConfigured(name))
