"""Filesystem-backed paths.

Path composes a PurePath with a FileSystemPort. Structural accessors are
forwarded to the wrapped value and derivations are re-wrapped as Path, so a
Path is never mistaken for a PurePath. Every I/O query goes to the port
afresh; nothing is cached.
"""

from __future__ import annotations

import os
from functools import total_ordering
from typing import TYPE_CHECKING

from pathkit.config.models import SeparatorPolicy
from pathkit.errors import InvalidArgument, IOFailure, NotFound
from pathkit.paths.algorithms import CURDIR, abspath
from pathkit.paths.pure import PathLike, PurePath
from pathkit.paths.stream import FileStream, parse_mode
from pathkit.ports.filesystem import EntryKind
from pathkit.utils.logging import get_logger

if TYPE_CHECKING:
    from pathkit.ports.filesystem import FileSystemPort

logger = get_logger(__name__)


def default_filesystem() -> FileSystemPort:
    """Return the adapter for the local host."""
    from pathkit.storage.local_fs import LocalFileSystem

    return LocalFileSystem()


@total_ordering
class Path:
    """Path on the local filesystem.

    Args:
        path: Path text, a PurePath, another Path, or any os.PathLike.
        filesystem: OS collaborator; the local host when omitted.
        policy: Separator policy for text input.
    """

    __slots__ = ("_fs", "_pure")

    def __init__(
        self,
        path: PathLike | Path = CURDIR,
        *,
        filesystem: FileSystemPort | None = None,
        policy: SeparatorPolicy | None = None,
    ) -> None:
        if isinstance(path, Path):
            if filesystem is None:
                filesystem = path._fs
            path = path._pure
        self._pure = PurePath(path, policy=policy)
        self._fs = default_filesystem() if filesystem is None else filesystem

    def _wrap(self, pure: PurePath) -> Path:
        return Path(pure, filesystem=self._fs)

    @classmethod
    def cwd(cls, filesystem: FileSystemPort | None = None) -> Path:
        """Return the current working directory."""
        fs = default_filesystem() if filesystem is None else filesystem
        return cls(fs.getcwd(), filesystem=fs)

    def absolute(self) -> Path:
        """Return this path made absolute against the filesystem's working directory."""
        policy = self._pure.policy
        if self._pure.is_absolute():
            return self
        text = abspath(str(self), cwd=self._fs.getcwd(), policy=policy)
        return Path(text, filesystem=self._fs, policy=policy)

    def pure(self) -> PurePath:
        """Return the wrapped PurePath."""
        return self._pure

    @property
    def filesystem(self) -> FileSystemPort:
        return self._fs

    # Forwarded structural API

    def __str__(self) -> str:
        return str(self._pure)

    def __fspath__(self) -> str:
        return str(self._pure)

    def __repr__(self) -> str:
        return f"Path({str(self._pure)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._pure == other._pure

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._pure < other._pure

    def __hash__(self) -> int:
        return hash(self._pure)

    @property
    def parts(self) -> tuple[str, ...]:
        return self._pure.parts

    def is_absolute(self) -> bool:
        return self._pure.is_absolute()

    def is_root(self) -> bool:
        return self._pure.is_root()

    @property
    def name(self) -> str:
        return self._pure.name

    @property
    def root(self) -> str:
        return self._pure.root

    @property
    def stem(self) -> str:
        return self._pure.stem

    @property
    def suffix(self) -> str:
        return self._pure.suffix

    @property
    def suffixes(self) -> list[str]:
        return self._pure.suffixes

    def joinpath(self, *others: PathLike | Path) -> Path:
        texts = [str(other) if isinstance(other, Path) else other for other in others]
        return self._wrap(self._pure.joinpath(*texts))

    def __truediv__(self, other: PathLike | Path) -> Path:
        try:
            return self.joinpath(other)
        except TypeError:
            return NotImplemented

    def __rtruediv__(self, other: PathLike) -> Path:
        try:
            return self._wrap(PurePath(other, policy=self._pure.policy).joinpath(self._pure))
        except TypeError:
            return NotImplemented

    @property
    def parent(self) -> Path:
        return self._wrap(self._pure.parent)

    @property
    def parents(self) -> list[Path]:
        return [self._wrap(parent) for parent in self._pure.parents]

    def relative_to(self, other: PathLike | Path) -> Path:
        if isinstance(other, Path):
            other = other._pure
        return self._wrap(self._pure.relative_to(other))

    def with_name(self, name: str) -> Path:
        return self._wrap(self._pure.with_name(name))

    def with_suffix(self, suffix: str) -> Path:
        return self._wrap(self._pure.with_suffix(suffix))

    # Queries

    def exists(self) -> bool:
        return self._fs.entry_kind(str(self)) is not EntryKind.MISSING

    def is_dir(self) -> bool:
        return self._fs.entry_kind(str(self)) is EntryKind.DIRECTORY

    def is_file(self) -> bool:
        return self._fs.entry_kind(str(self)) is EntryKind.FILE

    def is_symlink(self) -> bool:
        """Return True for a symbolic link, without following it."""
        return self._fs.entry_kind(str(self), follow_symlinks=False) is EntryKind.SYMLINK

    # I/O

    def open(self, mode: str = "r", encoding: str | None = "utf-8") -> FileStream:
        """
        Open the file and return a stream.

        ``mode`` is one of ``r``, ``w``, ``x`` or ``a``, optionally followed
        by ``+`` and ``b`` or ``t``. Failing to open, including ``x`` on an
        existing file, returns an invalid stream rather than raising.

        Raises:
            InvalidArgument: If ``mode`` is not a valid mode string.
        """
        parsed = parse_mode(mode)
        if parsed is None:
            raise InvalidArgument(f"invalid file mode: {mode!r}")
        mode, binary = parsed
        path = str(self)
        if mode[0] == "x" and self.exists():
            return FileStream.invalid(f"file exists: {path}", binary)
        try:
            file = self._fs.open(path, mode, encoding)
        except IOFailure as e:
            logger.debug("Open failed for {} mode={}: {}", path, mode, e.reason)
            return FileStream.invalid(e.reason, binary)
        return FileStream(file, binary=binary)

    def mkdir(self, mode: int = 0o777, parents: bool = False, exist_ok: bool = False) -> None:
        """
        Create this directory.

        Args:
            mode: Permission bits passed through to the OS.
            parents: Create missing ancestors as needed.
            exist_ok: Do not fail if the directory already exists.

        Raises:
            NotFound: If the parent is missing and ``parents`` is False.
            IOFailure: If the directory cannot be created.
        """
        if not parents and not self.parent.is_dir():
            raise NotFound(f"no such directory: {self.parent}", str(self.parent))
        self._fs.makedirs(str(self), mode, exist_ok)

    def unlink(self) -> None:
        self._fs.unlink(str(self))

    def rmdir(self) -> None:
        self._fs.rmdir(str(self))

    def symlink_to(self, target: PathLike | Path) -> None:
        """Make this path a symbolic link pointing to ``target``."""
        self._fs.symlink(os.fspath(target), str(self))

    def read_bytes(self) -> bytes:
        return self._read("rb")

    def read_text(self, encoding: str = "utf-8") -> str:
        return self._read("rt", encoding)

    def write_bytes(self, data: bytes) -> None:
        self._write(data, "wb")

    def write_text(self, data: str, encoding: str = "utf-8") -> None:
        self._write(data, "wt", encoding)

    def _read(self, mode: str, encoding: str | None = None) -> bytes | str:
        with self.open(mode, encoding) as stream:
            if not stream:
                raise IOFailure(f"could not read data ({stream.error})", str(self))
            data = stream.read()
            if not stream:
                raise IOFailure(f"could not read data ({stream.error})", str(self))
        return data

    def _write(self, data: bytes | str, mode: str, encoding: str | None = None) -> None:
        stream = self.open(mode, encoding)
        try:
            written = stream.write(data)
        finally:
            stream.close()
        if stream.error is not None or written != len(data):
            raise IOFailure(f"could not write data ({stream.error})", str(self))

    def iterdir(self) -> list[Path]:
        """
        List the directory's children.

        Raises:
            IOFailure: If this is not a readable directory.
        """
        return [self / name for name in self._fs.listdir(str(self))]
