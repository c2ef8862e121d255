"""Tests for export file reading and writing."""

import json
from datetime import datetime, timezone

import pytest

from journalon.core.journal import Entry, ExportedJournal
from journalon.errors import InvalidJournalError, StorageError
from journalon.files import export_filename, read_export, write_export


@pytest.fixture
def exported():
    ts = datetime(2025, 1, 15, 9, 30, 0, 250000, tzinfo=timezone.utc)
    return ExportedJournal(
        id="a9993e364706816aba3e25717850c26c9cd0d89d",
        title="My Trip: Day 1!",
        entries=[Entry(id="e1", content="Hello", timestamp=ts)],
        created_at=ts,
        modified_at=ts,
    )


class TestExportFilename:
    def test_sanitizes_title(self):
        assert export_filename("My Trip: Day 1!") == "journal-my_trip__day_1_.json"

    def test_plain_title(self):
        assert export_filename("notes") == "journal-notes.json"


class TestWriteExport:
    def test_writes_pretty_json_without_private_key(self, exported, tmp_path):
        path = write_export(exported, tmp_path)

        assert path == tmp_path / "journal-my_trip__day_1_.json"
        content = path.read_text()
        assert content.startswith("{\n  ")
        data = json.loads(content)
        assert "privateKey" not in data
        assert data["createdAt"] == "2025-01-15T09:30:00.250Z"

    def test_read_back(self, exported, tmp_path):
        path = write_export(exported, tmp_path)
        assert read_export(path) == exported

    def test_unwritable_directory(self, exported, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("file")

        with pytest.raises(StorageError):
            write_export(exported, blocker / "out")


class TestReadExport:
    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{")

        with pytest.raises(InvalidJournalError, match="Invalid JSON file"):
            read_export(path)

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[]")

        with pytest.raises(InvalidJournalError):
            read_export(path)

    def test_missing_fields(self, tmp_path):
        path = tmp_path / "partial.json"
        path.write_text(json.dumps({"id": "x", "title": "t"}))

        with pytest.raises(InvalidJournalError):
            read_export(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(StorageError):
            read_export(tmp_path / "nope.json")
