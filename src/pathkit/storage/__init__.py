"""Filesystem adapters for pathkit."""

from pathkit.storage.local_fs import LocalFileSystem

__all__ = ["LocalFileSystem"]
