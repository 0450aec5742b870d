"""Port interface for operating system filesystem access."""

from enum import Enum
from typing import IO, Protocol


class EntryKind(str, Enum):
    """Kind of filesystem entry reported by a stat query."""

    MISSING = "missing"
    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    OTHER = "other"


class FileSystemPort(Protocol):
    """Protocol for the OS calls consumed by filesystem-backed paths.

    Every method takes the string form of a path. Failures are raised
    as NotFound or IOFailure carrying the OS error text.
    """

    def getcwd(self) -> str:
        """Return the current working directory."""
        ...

    def chdir(self, path: str) -> None:
        """Change the current working directory."""
        ...

    def listdir(self, path: str) -> list[str]:
        """List directory entry names, excluding '.' and '..'."""
        ...

    def makedirs(self, path: str, mode: int, exist_ok: bool) -> None:
        """Create a directory and any missing ancestors.

        Args:
            path: Directory to create.
            mode: Permission bits passed through to the OS.
            exist_ok: Treat an existing directory as success.
        """
        ...

    def rmdir(self, path: str) -> None:
        """Remove an empty directory."""
        ...

    def unlink(self, path: str) -> None:
        """Remove a file or symbolic link."""
        ...

    def symlink(self, target: str, link: str) -> None:
        """Create a symbolic link at ``link`` pointing to ``target``."""
        ...

    def entry_kind(self, path: str, follow_symlinks: bool = True) -> EntryKind:
        """Query the kind of entry at ``path`` without caching."""
        ...

    def open(self, path: str, mode: str, encoding: str | None = None) -> IO:
        """Open ``path`` with a validated mode string such as ``"r+b"``."""
        ...
