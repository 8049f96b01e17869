"""Configuration model exports.

    from stackconf.config.models import ResolvedConfig, LoggingConfig
"""

from stackconf.config.models.observability import LogFormat, LoggingConfig, LogLevel
from stackconf.config.models.stack import ComputeConfig, Ec2Config, ResolvedConfig

__all__ = [
    # Observability
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    # Stack
    "ComputeConfig",
    "Ec2Config",
    "ResolvedConfig",
]
