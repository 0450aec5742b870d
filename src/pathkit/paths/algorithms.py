"""Pure path algorithms operating on raw path text.

These mirror ``os.path`` semantics for a single-character separator
chosen by a SeparatorPolicy. None of them touch the filesystem except
``abspath``, which asks for the working directory when none is given.
"""

import os
from collections.abc import Sequence

from pathkit.config.models import POSIX, SeparatorPolicy
from pathkit.errors import PreconditionViolation

CURDIR = "."
PARDIR = ".."
EXTSEP = "."


def join(parts: Sequence[str], *, policy: SeparatorPolicy = POSIX) -> str:
    """
    Join path segments into a complete path.

    Separators are added between segments as needed; existing separators
    are left alone, and none is added while the result is still empty.
    A segment starting with the separator discards everything before it.
    Use an empty last segment to force a trailing separator.

    Args:
        parts: Individual path segments.
        policy: Separator policy.

    Returns:
        Joined path.

    Raises:
        PreconditionViolation: If the result exceeds policy.max_path_length.
    """
    sep = policy.sep
    joined = ""
    last = len(parts) - 1
    for index, part in enumerate(parts):
        if part.startswith(sep):
            joined = part
        else:
            joined += part
        if index != last and joined and not joined.endswith(sep):
            joined += sep
    if len(joined) > policy.max_path_length:
        raise PreconditionViolation(
            f"joined path is {len(joined)} characters, limit is {policy.max_path_length}"
        )
    return joined


def split(path: str, *, policy: SeparatorPolicy = POSIX) -> tuple[str, str]:
    """
    Split a path into (head, tail) at the last separator.

    Trailing separators are stripped from head unless head is made up
    of nothing but separators. If path ends in a separator, tail is empty.

    Args:
        path: Input path.
        policy: Separator policy.

    Returns:
        (head, tail) pair.
    """
    sep = policy.sep
    pos = path.rfind(sep)
    if pos == -1:
        return "", path
    pos += len(sep)
    head, tail = path[:pos], path[pos:]
    if head.strip(sep):
        head = head.rstrip(sep)
    return head, tail


def dirname(path: str, *, policy: SeparatorPolicy = POSIX) -> str:
    """Return the directory component, the first item of split()."""
    return split(path, policy=policy)[0]


def basename(path: str, *, policy: SeparatorPolicy = POSIX) -> str:
    """Return the name component, the second item of split()."""
    return split(path, policy=policy)[1]


def isabs(path: str, *, policy: SeparatorPolicy = POSIX) -> bool:
    """Return True if path starts with the separator."""
    return path.startswith(policy.sep)


def normpath(path: str, *, policy: SeparatorPolicy = POSIX) -> str:
    """
    Normalize a path.

    Empty and ``.`` segments are dropped and each ``..`` cancels the
    segment before it. A ``..`` with nothing left to cancel is kept in a
    relative path and dropped in an absolute one, so ascent stops at the
    root. The result is never empty.

    Args:
        path: Input path.
        policy: Separator policy.

    Returns:
        Normalized path.
    """
    sep = policy.sep
    absolute = isabs(path, policy=policy)
    kept: list[str] = []
    for token in path.split(sep):
        if token in ("", CURDIR):
            continue
        if token != PARDIR:
            kept.append(token)
        elif kept and kept[-1] != PARDIR:
            kept.pop()
        elif not absolute:
            kept.append(token)
    result = sep.join(kept)
    if absolute:
        result = sep + result
    return result or CURDIR


def abspath(path: str, *, cwd: str | None = None, policy: SeparatorPolicy = POSIX) -> str:
    """
    Return a normalized absolute path.

    Args:
        path: Input path.
        cwd: Working directory to resolve against. When omitted this
            reads ``os.getcwd()`` directly; callers holding a
            FileSystemPort pass its ``getcwd()`` instead, as
            ``Path.absolute`` does.
        policy: Separator policy.

    Returns:
        Absolute normalized path.
    """
    if isabs(path, policy=policy):
        return normpath(path, policy=policy)
    if cwd is None:
        cwd = os.getcwd()
    return normpath(join([cwd, path], policy=policy), policy=policy)


def splitext(path: str) -> tuple[str, str]:
    """
    Split a path into (root, ext) at the last dot.

    A leading dot marks a hidden name, not an extension.

    Args:
        path: Input path.

    Returns:
        (root, ext) pair where ext is empty or starts with a dot.
    """
    pos = path.rfind(EXTSEP)
    if pos <= 0:
        return path, ""
    return path[:pos], path[pos:]
