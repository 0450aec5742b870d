"""Services built on filesystem-backed paths."""

from pathkit.services.tempdir import TemporaryDirectory, gettempdir, rmtree

__all__ = ["TemporaryDirectory", "gettempdir", "rmtree"]
