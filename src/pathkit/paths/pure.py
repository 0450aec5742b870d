"""Immutable path values.

A PurePath is parsed once into a tuple of components and never changes
afterwards. Every derivation returns a new value. Comparison, ordering
and hashing use the canonical string form.
"""

from __future__ import annotations

import os
from functools import total_ordering
from typing import Union

from pathkit.config.models import POSIX, SeparatorPolicy
from pathkit.errors import InvalidArgument, InvalidRelation
from pathkit.paths.algorithms import CURDIR, EXTSEP, isabs, join, normpath, splitext

PathLike = Union[str, "PurePath", os.PathLike]


def _parse(path: str, policy: SeparatorPolicy) -> tuple[str, ...]:
    """Decompose raw text into a component tuple."""
    sep = policy.sep
    normalized = normpath(path, policy=policy)
    segments = tuple(token for token in normalized.split(sep) if token and token != CURDIR)
    if isabs(normalized, policy=policy):
        return (sep, *segments)
    return segments


@total_ordering
class PurePath:
    """Platform-independent path value.

    Args:
        path: Path text, a PurePath or Path, or any os.PathLike.
        policy: Separator policy; taken from ``path`` when it is a
            PurePath or Path, POSIX otherwise.
    """

    __slots__ = ("_parts", "_policy", "_str")

    def __init__(self, path: PathLike = CURDIR, *, policy: SeparatorPolicy | None = None) -> None:
        # A filesystem-backed Path hands over its wrapped value.
        pure = getattr(path, "pure", None)
        if not isinstance(path, PurePath) and callable(pure):
            path = pure()
        if isinstance(path, PurePath):
            if policy is None:
                policy = path._policy
            text = str(path)
        else:
            text = os.fspath(path)
            if not isinstance(text, str):
                raise TypeError(f"expected str or os.PathLike returning str, not {type(text).__name__}")
        self._policy = POSIX if policy is None else policy
        self._parts = _parse(text, self._policy)
        self._str = self._format()

    @classmethod
    def _from_parts(cls, parts: tuple[str, ...], policy: SeparatorPolicy) -> PurePath:
        value = cls.__new__(cls)
        value._policy = policy
        value._parts = parts
        value._str = value._format()
        return value

    def _format(self) -> str:
        sep = self._policy.sep
        if not self._parts:
            return CURDIR
        if self.is_absolute():
            return sep + sep.join(self._parts[1:])
        return sep.join(self._parts)

    def _coerce(self, other: PathLike) -> str:
        if isinstance(other, PurePath):
            return str(other)
        return os.fspath(other)

    # String forms

    def __str__(self) -> str:
        return self._str

    def __fspath__(self) -> str:
        return self._str

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._str!r})"

    # Comparison

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PurePath):
            return NotImplemented
        return self._policy.sep == other._policy.sep and self._str == other._str

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PurePath):
            return NotImplemented
        return self._str < other._str

    def __hash__(self) -> int:
        return hash((self._policy.sep, self._str))

    # Structural accessors

    @property
    def policy(self) -> SeparatorPolicy:
        return self._policy

    @property
    def parts(self) -> tuple[str, ...]:
        """Path components, root marker first for absolute paths."""
        return self._parts

    def is_absolute(self) -> bool:
        return bool(self._parts) and self._parts[0] == self._policy.sep

    def is_root(self) -> bool:
        """Return True for the relative root ``.`` or the absolute root."""
        return not self._parts or (len(self._parts) == 1 and self.is_absolute())

    @property
    def name(self) -> str:
        """Final component, empty for a root."""
        return "" if self.is_root() else self._parts[-1]

    @property
    def root(self) -> str:
        return self._policy.sep if self.is_absolute() else ""

    @property
    def stem(self) -> str:
        """Final component without its suffix.

        A trailing dot is kept, so ``abc.`` has the stem ``abc.``.
        """
        stem = splitext(self.name)[0]
        if stem == EXTSEP:
            return ""
        if self._parts and self._parts[-1].endswith(EXTSEP):
            stem += EXTSEP
        return stem

    @property
    def suffix(self) -> str:
        suffix = splitext(self.name)[1]
        return "" if suffix == EXTSEP else suffix

    @property
    def suffixes(self) -> list[str]:
        name = self.name
        if name.startswith(EXTSEP) or name.endswith(EXTSEP):
            return []
        return [EXTSEP + token for token in name.split(EXTSEP)[1:]]

    # Derivations

    def joinpath(self, *others: PathLike) -> PurePath:
        """Join this path with one or more others.

        An absolute argument replaces everything before it.
        """
        texts = [self._str, *(self._coerce(other) for other in others)]
        return type(self)(join(texts, policy=self._policy), policy=self._policy)

    def __truediv__(self, other: PathLike) -> PurePath:
        try:
            return self.joinpath(other)
        except TypeError:
            return NotImplemented

    def __rtruediv__(self, other: PathLike) -> PurePath:
        try:
            return type(self)(other, policy=self._policy).joinpath(self)
        except TypeError:
            return NotImplemented

    @property
    def parent(self) -> PurePath:
        if self.is_root():
            return self
        return self._from_parts(self._parts[:-1], self._policy)

    @property
    def parents(self) -> list[PurePath]:
        """All ancestors, direct parent first."""
        ancestors = []
        current = self
        while not current.is_root():
            current = current.parent
            ancestors.append(current)
        return ancestors

    def relative_to(self, other: PathLike) -> PurePath:
        """Return this path relative to ``other``.

        Raises:
            InvalidRelation: If ``other`` is not an ancestor of this path.
        """
        if not isinstance(other, PurePath):
            other = type(self)(other, policy=self._policy)
        count = len(other._parts)
        if count and self._parts[:count] != other._parts:
            raise InvalidRelation(self._str, str(other))
        return self._from_parts(self._parts[count:], self._policy)

    def with_name(self, name: str) -> PurePath:
        """Return a new path with the final component replaced.

        Raises:
            InvalidArgument: If ``name`` is empty, hidden, or contains a
                separator, or if this path has no name to replace.
        """
        if not name or name.startswith(EXTSEP) or self._policy.sep in name:
            raise InvalidArgument(f"invalid name {name!r}")
        if not self.name:
            raise InvalidArgument(f"{self._str!r} has an empty name")
        return self.parent.joinpath(name)

    def with_suffix(self, suffix: str) -> PurePath:
        """Return a new path with the suffix replaced, or removed if empty.

        Raises:
            InvalidArgument: If ``suffix`` is malformed or this path has no
                name.
        """
        if suffix and (
            len(suffix) < 2
            or suffix[0] != EXTSEP
            or suffix[1] == EXTSEP
            or self._policy.sep in suffix
        ):
            raise InvalidArgument(f"invalid suffix {suffix!r}")
        if not self.name:
            raise InvalidArgument(f"{self._str!r} has an empty name")
        return self.with_name(self.stem + suffix)
