"""Tests for pathkit configuration models."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from pathkit.config.models import (
    POSIX,
    WINDOWS,
    Config,
    LoggingConfig,
    SeparatorPolicy,
    TempConfig,
)


class TestSeparatorPolicy:
    """Test SeparatorPolicy model."""

    def test_defaults(self) -> None:
        """Default policy is POSIX style."""
        policy = SeparatorPolicy()
        assert policy.sep == "/"
        assert policy.max_path_length == 4096
        assert policy == POSIX

    def test_windows(self) -> None:
        """WINDOWS uses a backslash."""
        assert WINDOWS.sep == "\\"

    def test_frozen(self) -> None:
        """Policies cannot be modified after creation."""
        with pytest.raises(ValidationError):
            POSIX.sep = "\\"  # type: ignore[misc]

    def test_hashable(self) -> None:
        """Frozen policies can be used as dict keys."""
        assert {POSIX: "posix", WINDOWS: "windows"}[SeparatorPolicy()] == "posix"

    @pytest.mark.parametrize("sep", ["", ":", "//"])
    def test_invalid_separator(self, sep: str) -> None:
        """Only / and \\ are accepted."""
        with pytest.raises(ValidationError):
            SeparatorPolicy(sep=sep)  # type: ignore[arg-type]

    def test_invalid_length(self) -> None:
        """The length limit must be positive."""
        with pytest.raises(ValidationError):
            SeparatorPolicy(max_path_length=0)


class TestTempConfig:
    """Test TempConfig model."""

    def test_defaults(self) -> None:
        """Defaults follow the usual Unix lookup order."""
        config = TempConfig()
        assert config.directory is None
        assert config.prefix == "tmp"
        assert config.env_vars == ["TMPDIR", "TEMP", "TMP"]
        assert config.fallback_directories == ["/tmp", "/var/tmp", "/usr/tmp"]

    def test_directory_expands_user(self) -> None:
        """A ~ in the directory is expanded."""
        config = TempConfig(directory="~/scratch")  # type: ignore[arg-type]
        assert config.directory == Path("~/scratch").expanduser()

    @pytest.mark.parametrize("prefix", ["", "a/b", "a\\b"])
    def test_invalid_prefix(self, prefix: str) -> None:
        """Empty prefixes and prefixes with separators are rejected."""
        with pytest.raises(ValidationError):
            TempConfig(prefix=prefix)


class TestLoggingConfig:
    """Test LoggingConfig model."""

    def test_defaults(self) -> None:
        """Library logging is quiet by default."""
        config = LoggingConfig()
        assert config.level == "WARNING"
        assert config.format == "console"
        assert config.file is None

    def test_invalid_level(self) -> None:
        """Unknown levels are rejected."""
        with pytest.raises(ValidationError):
            LoggingConfig(level="VERBOSE")  # type: ignore[arg-type]


class TestConfig:
    """Test root Config settings."""

    def test_defaults(self) -> None:
        """All sections have defaults."""
        config = Config()
        assert config.paths == POSIX
        assert config.tempdir.prefix == "tmp"
        assert config.logging.level == "WARNING"

    def test_env_prefix(self) -> None:
        """Settings are read from PATHKIT_ variables."""
        assert Config.model_config.get("env_prefix") == "PATHKIT_"
        assert Config.model_config.get("env_nested_delimiter") == "__"

    def test_nested_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Nested fields can be set from the environment."""
        monkeypatch.setenv("PATHKIT_LOGGING__LEVEL", "DEBUG")
        monkeypatch.setenv("PATHKIT_PATHS__SEP", "\\")
        config = Config()
        assert config.logging.level == "DEBUG"
        assert config.paths.sep == "\\"
