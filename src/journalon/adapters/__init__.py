"""Adapters - I/O implementations of ports."""

from .hashkeep import HashkeepAdapter
from .file_index import FileIndexStore, InMemoryIndexStore

__all__ = [
    "HashkeepAdapter",
    "FileIndexStore",
    "InMemoryIndexStore",
]
