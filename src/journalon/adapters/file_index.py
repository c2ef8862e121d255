"""File-based local index adapter."""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from journalon.errors import StorageError

logger = logging.getLogger(__name__)

JOURNAL_IDS_KEY = "journalon_journal_ids"
PRIVATE_KEYS_KEY = "journalon_private_keys"


class FileIndexStore:
    """
    File-based local index.

    Implements IndexStore protocol. Each namespaced key is a JSON file in
    the data directory. Missing or malformed files read as empty; failed
    writes raise StorageError.
    """

    def __init__(self, data_dir: Path | str):
        self.data_dir = Path(data_dir).expanduser()

    def _path_for_key(self, key: str) -> Path:
        """Get the file path for a storage key."""
        return self.data_dir / f"{key}.json"

    def get_value(self, key: str, default: Any) -> Any:
        """Read a JSON value by key, or default if missing or unreadable."""
        path = self._path_for_key(key)
        if not path.exists():
            return default
        try:
            return json.loads(path.read_text())
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to read {key} from {path}: {e}")
            return default

    def set_value(self, key: str, value: Any) -> None:
        """
        Write a JSON value by key.

        The value goes to an owner-only temp file that then replaces the old
        file, so an interrupted write leaves the previous value intact.
        """
        path = self._path_for_key(key)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{key}.", suffix=".tmp")
        except OSError as e:
            raise StorageError(f"Failed to write {key}: {e}") from e

        try:
            with os.fdopen(fd, "w") as f:
                f.write(json.dumps(value))
            os.replace(tmp_name, path)
        except OSError as e:
            Path(tmp_name).unlink(missing_ok=True)
            raise StorageError(f"Failed to write {key}: {e}") from e

    def _read_ids(self) -> list[str]:
        ids = self.get_value(JOURNAL_IDS_KEY, [])
        if not isinstance(ids, list):
            logger.warning(f"Ignoring malformed {JOURNAL_IDS_KEY}: expected a list")
            return []
        return [i for i in ids if isinstance(i, str)]

    def _read_secrets(self) -> dict[str, str]:
        secrets = self.get_value(PRIVATE_KEYS_KEY, {})
        if not isinstance(secrets, dict):
            logger.warning(f"Ignoring malformed {PRIVATE_KEYS_KEY}: expected an object")
            return {}
        return {k: v for k, v in secrets.items() if isinstance(v, str)}

    def list_ids(self) -> list[str]:
        return self._read_ids()

    def add_id(self, journal_id: str) -> None:
        ids = self._read_ids()
        if journal_id not in ids:
            ids.append(journal_id)
            self.set_value(JOURNAL_IDS_KEY, ids)

    def remove_id(self, journal_id: str) -> None:
        ids = self._read_ids()
        new_ids = [i for i in ids if i != journal_id]
        if len(new_ids) != len(ids):
            self.set_value(JOURNAL_IDS_KEY, new_ids)

    def get_secret(self, journal_id: str) -> str | None:
        return self._read_secrets().get(journal_id) or None

    def set_secret(self, journal_id: str, private_key: str) -> None:
        secrets = self._read_secrets()
        secrets[journal_id] = private_key
        self.set_value(PRIVATE_KEYS_KEY, secrets)

    def remove_secret(self, journal_id: str) -> None:
        secrets = self._read_secrets()
        if journal_id in secrets:
            del secrets[journal_id]
            self.set_value(PRIVATE_KEYS_KEY, secrets)


class InMemoryIndexStore:
    """
    In-memory local index.

    Implements IndexStore protocol. Nothing survives the process.
    """

    def __init__(self):
        self._ids: list[str] = []
        self._secrets: dict[str, str] = {}

    def list_ids(self) -> list[str]:
        return list(self._ids)

    def add_id(self, journal_id: str) -> None:
        if journal_id not in self._ids:
            self._ids.append(journal_id)

    def remove_id(self, journal_id: str) -> None:
        self._ids = [i for i in self._ids if i != journal_id]

    def get_secret(self, journal_id: str) -> str | None:
        return self._secrets.get(journal_id)

    def set_secret(self, journal_id: str, private_key: str) -> None:
        self._secrets[journal_id] = private_key

    def remove_secret(self, journal_id: str) -> None:
        self._secrets.pop(journal_id, None)
