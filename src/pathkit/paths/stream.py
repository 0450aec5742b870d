"""File streams returned by Path.open.

Opening never raises for OS-level failures. A stream that could not be
opened is returned in an invalid state instead: it reads as empty,
writes nothing, and carries the reason in ``error``. A transfer that
fails later marks the stream invalid the same way. Check ``valid`` (or
the stream's truth value) before relying on any transfer.
"""

from __future__ import annotations

from types import TracebackType
from typing import IO, AnyStr, Generic

_VALID_LETTERS = frozenset("rwxa")
_VALID_FLAGS = frozenset("+bt")


def parse_mode(mode: str) -> tuple[str, bool] | None:
    """Validate a mode string.

    Returns:
        (mode, binary) for a valid mode, None otherwise. The returned mode
        is the input unchanged.
    """
    if not mode or mode[0] not in _VALID_LETTERS:
        return None
    flags = mode[1:]
    if len(set(flags)) != len(flags) or not set(flags) <= _VALID_FLAGS:
        return None
    if "b" in flags and "t" in flags:
        return None
    return mode, "b" in flags


class FileStream(Generic[AnyStr]):
    """A possibly-invalid handle on an open file."""

    def __init__(
        self,
        file: IO[AnyStr] | None = None,
        error: str | None = None,
        binary: bool = False,
    ) -> None:
        self._file = file
        self.error = error
        self.binary = binary

    @classmethod
    def invalid(cls, error: str, binary: bool = False) -> FileStream:
        return cls(None, error, binary)

    def _empty(self) -> bytes | str:
        return b"" if self.binary else ""

    @property
    def valid(self) -> bool:
        return self._file is not None and not self._file.closed and self.error is None

    def __bool__(self) -> bool:
        return self.valid

    @property
    def file(self) -> IO[AnyStr] | None:
        """Underlying file object, or None for an invalid stream."""
        return self._file

    def read(self, size: int = -1) -> AnyStr | bytes | str:
        """Read up to ``size`` items, or everything when negative.

        Failures leave the data empty and record the reason in ``error``.
        """
        if self._file is None or self._file.closed:
            return self._empty()
        try:
            return self._file.read(size)
        except OSError as e:
            self.error = e.strerror or str(e)
        except UnicodeError as e:
            self.error = str(e)
        return self._empty()

    def write(self, data: AnyStr) -> int:
        """Write ``data`` and return the number of items written.

        An invalid stream writes nothing and returns 0.
        """
        if self._file is None or self._file.closed:
            return 0
        try:
            written = self._file.write(data)
        except OSError as e:
            self.error = e.strerror or str(e)
            return 0
        except UnicodeError as e:
            self.error = str(e)
            return 0
        return len(data) if written is None else written

    def close(self) -> None:
        """Close the file; a failed flush is recorded in ``error``."""
        if self._file is None or self._file.closed:
            return
        try:
            self._file.close()
        except OSError as e:
            self.error = e.strerror or str(e)

    def __enter__(self) -> FileStream[AnyStr]:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        if self._file is None:
            return f"FileStream(invalid, error={self.error!r})"
        return f"FileStream({getattr(self._file, 'name', '?')!r})"
