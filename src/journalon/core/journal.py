"""Pure journal domain model - no I/O dependencies."""

import json
import re
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone

from journalon.errors import InvalidJournalError

_FRACTION_RE = re.compile(r"(\d{2}:\d{2}:\d{2})[.,](\d+)")


def utc_now() -> datetime:
    """Current UTC time, truncated to whole milliseconds."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def format_timestamp(value: datetime) -> str:
    """Serialize a datetime as an ISO-8601 UTC string with milliseconds."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 string into an aware UTC datetime. Naive means UTC."""
    if not isinstance(value, str):
        raise ValueError(f"Expected timestamp string, got {type(value).__name__}")
    text = value.strip()
    if text.endswith("Z") or text.endswith("z"):
        text = text[:-1] + "+00:00"
    # fromisoformat on 3.10 only takes 3 or 6 fractional digits
    text = _FRACTION_RE.sub(lambda m: f"{m[1]}.{(m[2] + '000000')[:6]}", text, count=1)
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def format_entry_date(value: datetime) -> str:
    """Human-readable entry date, e.g. 'Wed, Jan 15, 2025, 3:04 PM'."""
    local = value.astimezone()
    hour = local.hour % 12 or 12
    suffix = "AM" if local.hour < 12 else "PM"
    return f"{local.strftime('%a, %b %d, %Y')}, {hour}:{local.minute:02d} {suffix}"


@dataclass
class Entry:
    """A single journal line item."""

    id: str
    content: str
    timestamp: datetime

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "content": self.content,
            "timestamp": format_timestamp(self.timestamp),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Entry":
        return cls(
            id=str(data["id"]),
            content=str(data.get("content", "")),
            timestamp=parse_timestamp(data["timestamp"]),
        )


@dataclass
class ExportedJournal:
    """A journal without its private key, as written to export files."""

    id: str
    title: str
    entries: list[Entry] = field(default_factory=list)
    created_at: datetime = field(default_factory=utc_now)
    modified_at: datetime = field(default_factory=utc_now)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "entries": [e.to_dict() for e in self.entries],
            "createdAt": format_timestamp(self.created_at),
            "modifiedAt": format_timestamp(self.modified_at),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ExportedJournal":
        """Parse an export document. A stray privateKey field is ignored."""
        try:
            return cls(
                id=str(data["id"]),
                title=str(data["title"]),
                entries=[Entry.from_dict(e) for e in data.get("entries", [])],
                created_at=parse_timestamp(data["createdAt"]),
                modified_at=parse_timestamp(data["modifiedAt"]),
            )
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise InvalidJournalError(f"Invalid journal document: {e}") from e


@dataclass
class Journal:
    """
    A journal and the private key that grants write access to it.

    The id is always the public key derived from private_key; the two are
    set together when the journal is created.
    """

    id: str
    private_key: str
    title: str
    entries: list[Entry] = field(default_factory=list)
    created_at: datetime = field(default_factory=utc_now)
    modified_at: datetime = field(default_factory=utc_now)

    def find_entry(self, entry_id: str) -> Entry | None:
        return next((e for e in self.entries if e.id == entry_id), None)

    def copy(self) -> "Journal":
        """Copy with its own entries list, safe to mutate."""
        return replace(self, entries=[replace(e) for e in self.entries])

    def to_exported(self) -> ExportedJournal:
        return ExportedJournal(
            id=self.id,
            title=self.title,
            entries=[replace(e) for e in self.entries],
            created_at=self.created_at,
            modified_at=self.modified_at,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "privateKey": self.private_key,
            "title": self.title,
            "entries": [e.to_dict() for e in self.entries],
            "createdAt": format_timestamp(self.created_at),
            "modifiedAt": format_timestamp(self.modified_at),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Journal":
        try:
            return cls(
                id=str(data["id"]),
                private_key=str(data["privateKey"]),
                title=str(data["title"]),
                entries=[Entry.from_dict(e) for e in data.get("entries", [])],
                created_at=parse_timestamp(data["createdAt"]),
                modified_at=parse_timestamp(data["modifiedAt"]),
            )
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise InvalidJournalError(f"Invalid journal document: {e}") from e


def serialize_journal(journal: Journal) -> str:
    """Serialize a journal to the JSON blob stored remotely."""
    return json.dumps(journal.to_dict())


def deserialize_journal(blob: str) -> Journal:
    """Parse a stored JSON blob back into a Journal."""
    try:
        data = json.loads(blob)
    except json.JSONDecodeError as e:
        raise InvalidJournalError(f"Journal blob is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise InvalidJournalError("Journal blob is not a JSON object")
    return Journal.from_dict(data)


def sort_by_modified(journals: list[Journal]) -> list[Journal]:
    """Sort journals newest-modified first."""
    return sorted(journals, key=lambda j: j.modified_at, reverse=True)
