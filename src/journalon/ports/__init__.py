"""Ports - interfaces/protocols for external dependencies."""

from .object_store import ObjectStore
from .index_store import IndexStore

__all__ = [
    "ObjectStore",
    "IndexStore",
]
