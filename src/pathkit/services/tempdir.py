"""Temporary directory service.

The temporary root is resolved from an explicit TempConfig on every call,
so tests can point it anywhere without fighting a process-wide cache.
"""

import os
import tempfile
import weakref
from types import TracebackType

from pathkit.config.models import TempConfig
from pathkit.paths.algorithms import abspath
from pathkit.paths.local import Path, default_filesystem
from pathkit.ports.filesystem import EntryKind, FileSystemPort
from pathkit.utils.logging import get_logger

logger = get_logger(__name__)


def gettempdir(
    config: TempConfig | None = None,
    *,
    filesystem: FileSystemPort | None = None,
) -> str:
    """
    Return the directory used for temporary files.

    Checked in order: ``config.directory``, the configured environment
    variables, the fallback directories, and finally the working
    directory.

    Args:
        config: Temp directory configuration; defaults when omitted.
        filesystem: OS collaborator used for directory checks.

    Returns:
        Absolute path of the temporary directory.
    """
    config = TempConfig() if config is None else config
    fs = default_filesystem() if filesystem is None else filesystem

    candidates: list[str] = []
    if config.directory is not None:
        candidates.append(str(config.directory))
    candidates.extend(os.environ[var] for var in config.env_vars if os.environ.get(var))
    candidates.extend(config.fallback_directories)

    cwd = fs.getcwd()
    for candidate in candidates:
        if fs.entry_kind(candidate) is EntryKind.DIRECTORY:
            return abspath(candidate, cwd=cwd)
        logger.trace("Skipping temp directory candidate {}", candidate)

    logger.warning("No temp directory found, using working directory {}", cwd)
    return abspath(cwd, cwd=cwd)


def rmtree(root: Path, delete_root: bool = True) -> None:
    """
    Delete the contents of a directory tree.

    Symbolic links are removed, never followed.

    Args:
        root: Directory to clear.
        delete_root: Also remove ``root`` itself.
    """
    for item in root.iterdir():
        if item.is_symlink() or not item.is_dir():
            item.unlink()
        else:
            rmtree(item, delete_root=True)
    if delete_root:
        root.rmdir()


def _finalize(name: str, filesystem: FileSystemPort) -> None:
    root = Path(name, filesystem=filesystem)
    if root.exists():
        rmtree(root)
        logger.debug("Removed temporary directory {}", name)


class TemporaryDirectory:
    """A uniquely named directory deleted along with its contents.

    Removal happens on ``cleanup()``, on leaving a ``with`` block, or when
    the object is garbage collected, whichever comes first.
    """

    def __init__(
        self,
        suffix: str = "",
        prefix: str | None = None,
        dir: str | os.PathLike[str] | None = None,
        *,
        config: TempConfig | None = None,
        filesystem: FileSystemPort | None = None,
    ) -> None:
        config = TempConfig() if config is None else config
        self._fs = default_filesystem() if filesystem is None else filesystem
        if dir is None:
            dir = gettempdir(config, filesystem=self._fs)
        prefix = config.prefix if prefix is None else prefix
        self.name = tempfile.mkdtemp(suffix=suffix, prefix=prefix, dir=os.fspath(dir))
        self.path = Path(self.name, filesystem=self._fs)
        self._finalizer = weakref.finalize(self, _finalize, self.name, self._fs)
        logger.debug("Created temporary directory {}", self.name)

    def cleanup(self) -> None:
        """Delete the directory and everything in it."""
        if self._finalizer.detach() is not None:
            _finalize(self.name, self._fs)

    def __enter__(self) -> Path:
        return self.path

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.cleanup()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"
