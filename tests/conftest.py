"""Shared pytest fixtures for pathkit tests."""

import io
from collections.abc import Generator
from pathlib import Path as StdPath

import pytest
from loguru import logger

from pathkit.paths.local import Path


@pytest.fixture
def log_capture() -> Generator[io.StringIO, None, None]:
    """Capture pathkit's loguru output to a string buffer."""
    string_io = io.StringIO()
    logger.enable("pathkit")
    handler_id = logger.add(string_io, format="{level} {message}", level="TRACE")
    yield string_io
    logger.remove(handler_id)
    logger.disable("pathkit")


@pytest.fixture
def root(tmp_path: StdPath) -> Path:
    """Provide a scratch directory as a pathkit Path."""
    return Path(str(tmp_path))
