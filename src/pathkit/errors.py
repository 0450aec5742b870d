"""pathkit error types.

All custom exceptions inherit from PathKitError to allow
catching any pathkit-specific error. Each one also derives from
the closest builtin so callers can use the usual ``except`` clauses.
"""


class PathKitError(Exception):
    """Base exception for all pathkit errors."""

    pass


class InvalidArgument(PathKitError, ValueError):
    """Malformed input to a path derivation or open call."""

    pass


class InvalidRelation(PathKitError, ValueError):
    """A path is not relative to the requested ancestor."""

    def __init__(self, path: str, other: str) -> None:
        super().__init__(f"{path!r} is not relative to {other!r}")
        self.path = path
        self.other = other


class NotFound(PathKitError, FileNotFoundError):
    """A required filesystem entry does not exist."""

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        return str(self.args[0])


class IOFailure(PathKitError, OSError):
    """An operating system call failed or transferred too little data."""

    def __init__(self, reason: str, path: str) -> None:
        super().__init__(f"{reason}: {path}")
        self.reason = reason
        self.path = path

    def __str__(self) -> str:
        return str(self.args[0])


class PreconditionViolation(PathKitError, AssertionError):
    """An internal limit was exceeded."""

    pass
