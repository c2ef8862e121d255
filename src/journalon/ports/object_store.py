"""Remote object store interface."""

from typing import Protocol


class ObjectStore(Protocol):
    """Interface for a content-addressed blob store keyed by private key."""

    def store(self, private_key: str, blob: str) -> str:
        """Store a blob at the address derived from private_key. Returns the public key."""
        ...

    def fetch(self, public_key: str) -> str:
        """Fetch the blob stored at public_key. Raises NotFoundError if missing."""
        ...
