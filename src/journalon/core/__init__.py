"""Functional core - pure journal logic with no I/O."""

from .keys import KeyPair, generate_private_key, derive_public_key, generate_entry_id
from .journal import (
    Entry,
    Journal,
    ExportedJournal,
    serialize_journal,
    deserialize_journal,
    sort_by_modified,
    utc_now,
)

__all__ = [
    # Keys
    "KeyPair",
    "generate_private_key",
    "derive_public_key",
    "generate_entry_id",
    # Journal
    "Entry",
    "Journal",
    "ExportedJournal",
    "serialize_journal",
    "deserialize_journal",
    "sort_by_modified",
    "utc_now",
]
