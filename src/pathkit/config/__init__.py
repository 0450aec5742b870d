"""Configuration management for pathkit."""

from pathkit.config.loader import load_config
from pathkit.config.models import (
    POSIX,
    WINDOWS,
    Config,
    LoggingConfig,
    SeparatorPolicy,
    TempConfig,
)

__all__ = [
    "POSIX",
    "WINDOWS",
    "Config",
    "LoggingConfig",
    "SeparatorPolicy",
    "TempConfig",
    "load_config",
]
