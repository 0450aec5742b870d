"""Pydantic configuration models for pathkit."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings


class SeparatorPolicy(BaseModel):
    """Path separator and length limit used by the path algorithms.

    Every algorithm and path value takes one of these, so the same
    decomposition logic runs unchanged for either separator style.
    """

    model_config = ConfigDict(frozen=True)

    sep: Literal["/", "\\"] = "/"
    max_path_length: int = Field(default=4096, ge=1)


POSIX = SeparatorPolicy()
WINDOWS = SeparatorPolicy(sep="\\")


class TempConfig(BaseModel):
    """Temporary directory discovery configuration."""

    directory: Path | None = None
    prefix: str = Field(default="tmp", min_length=1)
    env_vars: list[str] = Field(default_factory=lambda: ["TMPDIR", "TEMP", "TMP"])
    fallback_directories: list[str] = Field(
        default_factory=lambda: ["/tmp", "/var/tmp", "/usr/tmp"]
    )

    @field_validator("directory", mode="before")
    @classmethod
    def expand_path(cls, v: Path | str | None) -> Path | None:
        """Expand user path."""
        if v is None:
            return None
        if isinstance(v, str):
            v = Path(v)
        return v.expanduser()

    @field_validator("prefix")
    @classmethod
    def validate_prefix(cls, v: str) -> str:
        """Reject prefixes that would escape the temp directory."""
        if "/" in v or "\\" in v:
            raise ValueError("prefix must not contain a path separator")
        return v


class LoggingConfig(BaseModel):
    """Logging configuration for loguru."""

    level: Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    format: Literal["console", "json"] = "console"
    file: Path | None = None
    rotation: str = "10 MB"
    retention: str = "7 days"


class Config(BaseSettings):
    """Root configuration for pathkit."""

    paths: SeparatorPolicy = Field(default_factory=SeparatorPolicy)
    tempdir: TempConfig = Field(default_factory=TempConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {
        "env_prefix": "PATHKIT_",
        "env_nested_delimiter": "__",
    }
