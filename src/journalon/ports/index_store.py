"""Local index storage interface."""

from typing import Protocol


class IndexStore(Protocol):
    """Interface for the on-device list of journal ids and their private keys."""

    def list_ids(self) -> list[str]:
        """All known journal ids, in insertion order."""
        ...

    def add_id(self, journal_id: str) -> None:
        """Add an id. No-op if already present."""
        ...

    def remove_id(self, journal_id: str) -> None:
        """Remove an id. No-op if absent."""
        ...

    def get_secret(self, journal_id: str) -> str | None:
        """Private key for a journal, or None if this installation lost it."""
        ...

    def set_secret(self, journal_id: str, private_key: str) -> None:
        """Remember the private key for a journal."""
        ...

    def remove_secret(self, journal_id: str) -> None:
        """Forget the private key for a journal. No-op if absent."""
        ...
