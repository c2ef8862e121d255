"""Error types raised by the storage layer and repository."""


class JournalonError(Exception):
    """Base class for all Journalon errors."""

    pass


class StorageError(JournalonError):
    """Raised when a local or remote write fails."""

    pass


class NetworkError(StorageError):
    """Raised when the remote store cannot be reached."""

    pass


class NotFoundError(StorageError):
    """Raised when a blob, journal or entry does not exist."""

    pass


class ConflictError(JournalonError):
    """Raised when an import would replace an existing journal."""

    pass


class InvalidJournalError(JournalonError, ValueError):
    """Raised when a blob or export file is not a journal document."""

    pass
