"""Tests for pathkit error types."""

import pytest

from pathkit.errors import (
    InvalidArgument,
    InvalidRelation,
    IOFailure,
    NotFound,
    PathKitError,
    PreconditionViolation,
)


class TestErrorHierarchy:
    """Test error class hierarchy."""

    @pytest.mark.parametrize(
        "error_type",
        [InvalidArgument, InvalidRelation, NotFound, IOFailure, PreconditionViolation],
    )
    def test_all_errors_inherit_from_pathkit_error(self, error_type: type) -> None:
        """All custom errors should inherit from PathKitError."""
        assert issubclass(error_type, PathKitError)

    def test_pathkit_error_inherits_from_exception(self) -> None:
        """PathKitError should inherit from Exception."""
        assert issubclass(PathKitError, Exception)

    def test_builtin_bases(self) -> None:
        """Each error can be caught by the matching builtin."""
        assert issubclass(InvalidArgument, ValueError)
        assert issubclass(InvalidRelation, ValueError)
        assert issubclass(NotFound, FileNotFoundError)
        assert issubclass(IOFailure, OSError)
        assert issubclass(PreconditionViolation, AssertionError)


class TestInvalidRelation:
    """Test InvalidRelation specifics."""

    def test_stores_both_paths(self) -> None:
        """InvalidRelation should store both paths."""
        error = InvalidRelation("/abc/xyz", "/def")
        assert error.path == "/abc/xyz"
        assert error.other == "/def"
        assert str(error) == "'/abc/xyz' is not relative to '/def'"


class TestNotFound:
    """Test NotFound specifics."""

    def test_stores_path(self) -> None:
        """NotFound should store the missing path."""
        error = NotFound("no such directory: /abc", "/abc")
        assert error.path == "/abc"
        assert str(error) == "no such directory: /abc"

    def test_caught_as_os_error(self) -> None:
        """NotFound is an OSError for callers that expect one."""
        with pytest.raises(OSError):
            raise NotFound("missing", "/abc")


class TestIOFailure:
    """Test IOFailure specifics."""

    def test_stores_reason_and_path(self) -> None:
        """IOFailure should carry the OS error text and the path."""
        error = IOFailure("Permission denied", "/root/secret")
        assert error.reason == "Permission denied"
        assert error.path == "/root/secret"
        assert str(error) == "Permission denied: /root/secret"
