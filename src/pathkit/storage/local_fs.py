"""Local filesystem adapter backed by the ``os`` module."""

import os
import stat
from typing import IO

from pathkit.config.models import SeparatorPolicy
from pathkit.errors import IOFailure, NotFound
from pathkit.paths.algorithms import split
from pathkit.ports.filesystem import EntryKind
from pathkit.utils.logging import get_logger

logger = get_logger(__name__)

_HOST = SeparatorPolicy(sep="\\" if os.sep == "\\" else "/")


def _failure(err: OSError, path: str) -> IOFailure:
    """Translate an OSError into an IOFailure carrying the OS error text."""
    return IOFailure(err.strerror or str(err), path)


class LocalFileSystem:
    """FileSystemPort implementation for the local host.

    No results are cached; every query is a fresh system call.
    """

    def getcwd(self) -> str:
        try:
            return os.getcwd()
        except OSError as e:
            raise _failure(e, ".") from e

    def chdir(self, path: str) -> None:
        try:
            os.chdir(path)
        except FileNotFoundError as e:
            raise NotFound(f"no such directory: {path}", path) from e
        except OSError as e:
            raise _failure(e, path) from e

    def listdir(self, path: str) -> list[str]:
        try:
            return os.listdir(path)
        except OSError as e:
            raise _failure(e, path) from e

    def makedirs(self, path: str, mode: int, exist_ok: bool) -> None:
        """Create ``path`` and any missing ancestors.

        A directory created concurrently by another thread or process
        counts as success when ``exist_ok`` is set.
        """
        if self.entry_kind(path) is EntryKind.DIRECTORY:
            if not exist_ok:
                raise IOFailure("directory exists", path)
            return

        head, tail = split(path, policy=_HOST)
        if not tail:
            head, tail = split(head, policy=_HOST)
        if head and tail and self.entry_kind(head) is not EntryKind.DIRECTORY:
            self.makedirs(head, mode, exist_ok=True)

        try:
            os.mkdir(path, mode)
        except FileExistsError as e:
            if not (exist_ok and self.entry_kind(path) is EntryKind.DIRECTORY):
                raise _failure(e, path) from e
            logger.debug("Directory appeared concurrently: {}", path)
            return
        except OSError as e:
            raise _failure(e, path) from e
        logger.debug("Created directory {} mode={:o}", path, mode)

    def rmdir(self, path: str) -> None:
        try:
            os.rmdir(path)
        except OSError as e:
            raise _failure(e, path) from e
        logger.debug("Removed directory {}", path)

    def unlink(self, path: str) -> None:
        try:
            os.unlink(path)
        except OSError as e:
            raise _failure(e, path) from e
        logger.debug("Removed file {}", path)

    def symlink(self, target: str, link: str) -> None:
        try:
            os.symlink(target, link)
        except OSError as e:
            raise _failure(e, link) from e
        logger.debug("Linked {} -> {}", link, target)

    def entry_kind(self, path: str, follow_symlinks: bool = True) -> EntryKind:
        try:
            info = os.stat(path, follow_symlinks=follow_symlinks)
        except (OSError, ValueError):
            return EntryKind.MISSING

        if stat.S_ISLNK(info.st_mode):
            return EntryKind.SYMLINK
        if stat.S_ISDIR(info.st_mode):
            return EntryKind.DIRECTORY
        if stat.S_ISREG(info.st_mode):
            return EntryKind.FILE
        return EntryKind.OTHER

    def open(self, path: str, mode: str, encoding: str | None = None) -> IO:
        """Open a file; text mode never translates line endings."""
        try:
            if "b" in mode:
                return open(path, mode)
            return open(path, mode, encoding=encoding, newline="")
        except OSError as e:
            raise _failure(e, path) from e
