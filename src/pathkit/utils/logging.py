"""loguru setup for pathkit.

Modules log through ``get_logger(__name__)``, which tags every record with
the emitting component. The ``pathkit`` namespace stays disabled until
configure_logging runs, so importing the library never prints anything.
Console output goes to stderr so CLI results on stdout stay parseable.
"""

import logging
import sys
from typing import Any

from loguru import logger

from pathkit.config.models import LoggingConfig

_CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[component]}</cyan> - "
    "<level>{message}</level>"
)

# Records that were not emitted through get_logger still need the field.
_DEFAULT_COMPONENT = "-"


class _InterceptHandler(logging.Handler):
    """Forward stdlib logging records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore[assignment]
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).bind(component=record.name).log(
            level, record.getMessage()
        )


def _sink_options(config: LoggingConfig) -> dict[str, Any]:
    if config.format == "json":
        return {"format": "{message}", "serialize": True, "level": config.level}
    return {"format": _CONSOLE_FORMAT, "serialize": False, "level": config.level}


def configure_logging(config: LoggingConfig) -> None:
    """
    Turn on pathkit logging.

    Replaces every existing sink with a stderr sink, plus a rotating
    file sink when ``config.file`` is set, and routes stdlib logging
    through loguru.

    Args:
        config: Level, format and file settings.
    """
    logger.remove()
    logger.configure(extra={"component": _DEFAULT_COMPONENT})
    logger.enable("pathkit")

    options = _sink_options(config)
    logger.add(sys.stderr, colorize=config.format == "console", **options)
    if config.file:
        logger.add(
            config.file,
            rotation=config.rotation,
            retention=config.retention,
            compression="gz",
            **options,
        )

    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)

    get_logger(__name__).debug(
        "Logging configured: level={} format={} file={}", config.level, config.format, config.file
    )


def get_logger(name: str) -> Any:
    """
    Return a logger that tags its records with a component name.

    Args:
        name: Component name, usually the calling module's ``__name__``.
            The ``pathkit.`` prefix is dropped for brevity.
    """
    return logger.bind(component=name.removeprefix("pathkit."))
