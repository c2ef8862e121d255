"""Journal repository - create, read, mutate, export and import journals.

Composes the remote object store, the local index and the session cache.
Every mutation is a read-modify-write that re-publishes the whole journal.
There is no version token exchanged with the store, so two writers
mutating one journal at once resolve as last-writer-wins.
"""

import logging
from dataclasses import replace
from datetime import datetime
from typing import Callable

from journalon.cache import JournalCache
from journalon.core.journal import (
    Entry,
    ExportedJournal,
    Journal,
    deserialize_journal,
    serialize_journal,
    sort_by_modified,
    utc_now,
)
from journalon.core.keys import KeyPair, generate_entry_id
from journalon.errors import ConflictError, InvalidJournalError, JournalonError, NotFoundError
from journalon.ports import IndexStore, ObjectStore

logger = logging.getLogger(__name__)


class JournalRepository:
    """Orchestrates journal storage across the remote store, local index and cache."""

    def __init__(
        self,
        object_store: ObjectStore,
        index: IndexStore,
        cache: JournalCache | None = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.object_store = object_store
        self.index = index
        self.cache = cache if cache is not None else JournalCache()
        self._now = clock

    def _publish(self, journal: Journal) -> None:
        self.object_store.store(journal.private_key, serialize_journal(journal))

    def _require(self, journal_id: str) -> Journal:
        """Fetch a journal for mutation, as a private copy."""
        journal = self.get(journal_id)
        if journal is None:
            raise NotFoundError(f"Journal not found: {journal_id}")
        return journal.copy()

    def create(self, title: str) -> Journal:
        """Create and publish a new journal. Local index changes only after the remote write."""
        keys = KeyPair.generate()
        now = self._now()
        journal = Journal(
            id=keys.public_key,
            private_key=keys.private_key,
            title=title,
            entries=[],
            created_at=now,
            modified_at=now,
        )

        self._publish(journal)

        self.index.add_id(journal.id)
        self.index.set_secret(journal.id, journal.private_key)
        self.cache.put(journal.id, journal)
        logger.info(f"Created journal {journal.id}")
        return journal

    def get(self, journal_id: str) -> Journal | None:
        """
        Get a journal by id.

        Returns None when this installation holds no private key for the id.
        Errors from the remote fetch propagate. A fetched blob must carry the
        requested id and the locally held private key.
        """
        cached = self.cache.get(journal_id)
        if cached is not None:
            return cached

        private_key = self.index.get_secret(journal_id)
        if not private_key:
            logger.warning(f"No private key found for journal {journal_id}")
            return None

        journal = deserialize_journal(self.object_store.fetch(journal_id))
        keys = KeyPair.from_private_key(private_key)
        if keys.public_key != journal_id:
            raise InvalidJournalError(f"Local private key does not match journal {journal_id}")
        if journal.id != journal_id:
            raise InvalidJournalError(f"Blob at {journal_id} belongs to journal {journal.id}")
        if journal.private_key != keys.private_key:
            raise InvalidJournalError(f"Blob at {journal_id} carries a different private key")

        self.cache.put(journal_id, journal)
        return journal

    def list_all(self) -> list[Journal]:
        """
        All accessible journals, most recently modified first.

        Journals that cannot be fetched or parsed are logged and skipped.
        """
        journals = []
        for journal_id in self.index.list_ids():
            try:
                journal = self.get(journal_id)
            except JournalonError as e:
                logger.warning(f"Failed to fetch journal {journal_id}: {e}")
                continue
            if journal is not None:
                journals.append(journal)
        return sort_by_modified(journals)

    def update(self, journal: Journal) -> None:
        """Stamp modified_at, re-publish the whole journal and refresh the cache."""
        if not journal.private_key:
            raise ValueError(f"Journal {journal.id} has no private key")

        journal.modified_at = self._now()
        self._publish(journal)
        self.cache.put(journal.id, journal)

    def rename(self, journal_id: str, title: str) -> Journal:
        journal = self._require(journal_id)
        journal.title = title
        self.update(journal)
        return journal

    def add_entry(self, journal_id: str, content: str) -> Entry:
        journal = self._require(journal_id)
        entry = Entry(id=generate_entry_id(), content=content, timestamp=self._now())
        journal.entries.append(entry)
        self.update(journal)
        return entry

    def update_entry(self, journal_id: str, entry_id: str, content: str) -> Entry:
        journal = self._require(journal_id)
        entry = journal.find_entry(entry_id)
        if entry is None:
            raise NotFoundError(f"Entry not found: {entry_id}")
        entry.content = content
        self.update(journal)
        return entry

    def delete_entry(self, journal_id: str, entry_id: str) -> None:
        """Remove an entry. Removing an entry that is already gone is a no-op filter."""
        journal = self._require(journal_id)
        journal.entries = [e for e in journal.entries if e.id != entry_id]
        self.update(journal)

    def delete(self, journal_id: str) -> None:
        """
        Forget a journal locally.

        The remote blob cannot be erased; this only revokes local access.
        """
        self.cache.remove(journal_id)
        self.index.remove_id(journal_id)
        self.index.remove_secret(journal_id)
        logger.info(f"Deleted journal {journal_id} from local index")

    def export(self, journal: Journal) -> ExportedJournal:
        return journal.to_exported()

    def check_exists(self, journal_id: str) -> Journal | None:
        """Probe for an accessible journal. Every failure reads as absent."""
        try:
            return self.get(journal_id)
        except JournalonError as e:
            logger.debug(f"Existence check for {journal_id} failed: {e}")
            return None

    def import_journal(self, exported: ExportedJournal, overwrite: bool = False) -> Journal:
        """
        Import an exported journal.

        If this installation already has the journal, the import replaces its
        content (only when overwrite is set) and keeps the existing private
        key. Otherwise the import gets a brand new identity, since the
        original private key is not in the export.
        """
        existing = self.get(exported.id)
        entries = [replace(e) for e in exported.entries]

        if existing is not None:
            if not overwrite:
                raise ConflictError(f"Journal with this ID already exists: {exported.id}")

            journal = Journal(
                id=existing.id,
                private_key=existing.private_key,
                title=exported.title,
                entries=entries,
                created_at=exported.created_at,
                modified_at=existing.modified_at,
            )
            self.update(journal)
            logger.info(f"Overwrote journal {journal.id} from import")
            return journal

        keys = KeyPair.generate()
        journal = Journal(
            id=keys.public_key,
            private_key=keys.private_key,
            title=exported.title,
            entries=entries,
            created_at=exported.created_at,
            modified_at=self._now(),
        )

        self._publish(journal)

        self.cache.put(journal.id, journal)
        self.index.add_id(journal.id)
        self.index.set_secret(journal.id, journal.private_key)
        logger.info(f"Imported journal {exported.id} as new journal {journal.id}")
        return journal
