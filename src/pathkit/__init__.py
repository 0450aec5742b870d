"""pathkit: os.path and pathlib style path handling as immutable values."""

from loguru import logger

from pathkit.errors import (
    InvalidArgument,
    InvalidRelation,
    IOFailure,
    NotFound,
    PathKitError,
    PreconditionViolation,
)
from pathkit.paths import Path, PurePath

__version__ = "0.1.0"

# Library default: silent until configure_logging() opts in.
logger.disable("pathkit")

__all__ = [
    "IOFailure",
    "InvalidArgument",
    "InvalidRelation",
    "NotFound",
    "Path",
    "PathKitError",
    "PreconditionViolation",
    "PurePath",
    "__version__",
]
