"""Shared fixtures."""

from datetime import datetime, timedelta, timezone

import pytest

from journalon.adapters.file_index import InMemoryIndexStore
from journalon.cache import JournalCache
from journalon.core.keys import derive_public_key
from journalon.errors import NetworkError, NotFoundError
from journalon.repository import JournalRepository


class FakeObjectStore:
    """In-memory ObjectStore that behaves like hashkeep."""

    def __init__(self):
        self.blobs: dict[str, str] = {}
        self.store_calls = 0
        self.fetch_calls = 0
        self.fail_store = False
        self.fail_fetch = False

    def store(self, private_key: str, blob: str) -> str:
        self.store_calls += 1
        if self.fail_store:
            raise NetworkError("store unreachable")
        public_key = derive_public_key(private_key)
        self.blobs[public_key] = blob
        return public_key

    def fetch(self, public_key: str) -> str:
        self.fetch_calls += 1
        if self.fail_fetch:
            raise NetworkError("store unreachable")
        if public_key not in self.blobs:
            raise NotFoundError("Hashkeep: 404")
        return self.blobs[public_key]


class SteppingClock:
    """Clock that advances one second per call."""

    def __init__(self, start: datetime | None = None):
        self.current = start or datetime(2025, 1, 15, 9, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        value = self.current
        self.current += timedelta(seconds=1)
        return value


@pytest.fixture
def object_store():
    return FakeObjectStore()


@pytest.fixture
def index():
    return InMemoryIndexStore()


@pytest.fixture
def clock():
    return SteppingClock()


@pytest.fixture
def repo(object_store, index, clock):
    return JournalRepository(object_store, index, JournalCache(), clock=clock)
