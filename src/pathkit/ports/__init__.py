"""Port interfaces for pathkit.

Ports define the contracts that adapters must implement. Path
values depend only on these abstractions, never on ``os`` directly.
"""

from pathkit.ports.filesystem import EntryKind, FileSystemPort

__all__ = [
    "EntryKind",
    "FileSystemPort",
]
