"""Path algorithms and path value types."""

from pathkit.paths.algorithms import (
    abspath,
    basename,
    dirname,
    isabs,
    join,
    normpath,
    split,
    splitext,
)
from pathkit.paths.local import Path
from pathkit.paths.pure import PurePath
from pathkit.paths.stream import FileStream

__all__ = [
    "FileStream",
    "Path",
    "PurePath",
    "abspath",
    "basename",
    "dirname",
    "isabs",
    "join",
    "normpath",
    "split",
    "splitext",
]
