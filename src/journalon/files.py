"""Export file reading and writing."""

import json
import re
from pathlib import Path

from journalon.core.journal import ExportedJournal
from journalon.errors import InvalidJournalError, StorageError


def export_filename(title: str) -> str:
    """File name for an exported journal, e.g. 'journal-my_trip.json'."""
    slug = re.sub(r"[^a-z0-9]", "_", title, flags=re.IGNORECASE).lower()
    return f"journal-{slug}.json"


def write_export(exported: ExportedJournal, directory: Path | str) -> Path:
    """Write an exported journal as pretty-printed JSON. Returns the file path."""
    path = Path(directory).expanduser() / export_filename(exported.title)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(exported.to_dict(), indent=2))
    except OSError as e:
        raise StorageError(f"Failed to write export file {path}: {e}") from e
    return path


def read_export(path: Path | str) -> ExportedJournal:
    """Parse an export file, converting timestamps back into datetimes."""
    path = Path(path).expanduser()
    try:
        content = path.read_text()
    except OSError as e:
        raise StorageError(f"Failed to read file {path}: {e}") from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise InvalidJournalError(f"Invalid JSON file: {e}") from e
    if not isinstance(data, dict):
        raise InvalidJournalError("Invalid JSON file: expected an object")

    return ExportedJournal.from_dict(data)
