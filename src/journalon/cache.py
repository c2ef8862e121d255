"""In-memory journal cache."""

from journalon.core.journal import Journal


class JournalCache:
    """
    Session cache of materialized journals, keyed by public id.

    Only saves remote fetches. Every lookup may miss without affecting
    correctness. Owned by one repository; nothing is shared between instances.
    """

    def __init__(self):
        self._journals: dict[str, Journal] = {}

    def get(self, journal_id: str) -> Journal | None:
        return self._journals.get(journal_id)

    def put(self, journal_id: str, journal: Journal) -> None:
        self._journals[journal_id] = journal

    def remove(self, journal_id: str) -> None:
        self._journals.pop(journal_id, None)

    def clear(self) -> None:
        self._journals.clear()

    def __contains__(self, journal_id: object) -> bool:
        return journal_id in self._journals

    def __len__(self) -> int:
        return len(self._journals)
