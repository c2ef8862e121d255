"""Hashkeep adapter - HTTP client for the remote blob store."""

import logging

import requests

from journalon.config import DEFAULT_STORE_URL, Config
from journalon.core.keys import derive_public_key
from journalon.errors import NetworkError, NotFoundError, StorageError

logger = logging.getLogger(__name__)


def _is_success(resp: requests.Response) -> bool:
    return 200 <= resp.status_code < 300


class HashkeepAdapter:
    """
    Hashkeep API adapter.

    Implements ObjectStore protocol. Blobs are written with the private key
    as the write token and read back by the public key derived from it.
    There is no delete endpoint. No retries - a failed call fails the
    caller's whole operation.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_STORE_URL,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()

    @classmethod
    def from_config(cls, config: Config) -> "HashkeepAdapter":
        return cls(base_url=config.store_url, timeout=config.request_timeout)

    def store(self, private_key: str, blob: str) -> str:
        """Store a blob at the address derived from private_key. Returns the public key."""
        public_key = derive_public_key(private_key)

        try:
            resp = self._session.put(
                f"{self.base_url}/store",
                params={"pk": public_key},
                json={"privateKey": private_key, "blob": blob},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Hashkeep store failed for {public_key}: {e}")
            raise NetworkError(f"Could not reach hashkeep: {e}") from e

        if not _is_success(resp):
            logger.error(f"Hashkeep store rejected for {public_key}: {resp.status_code}")
            raise StorageError(f"Hashkeep store failed: {resp.status_code} {resp.text}")

        logger.debug(f"Stored {len(blob)} chars at {public_key}")
        return public_key

    def fetch(self, public_key: str) -> str:
        """Fetch the blob stored at public_key, decoded from the raw UTF-8 bytes."""
        try:
            resp = self._session.get(f"{self.base_url}/{public_key}", timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"Hashkeep fetch failed for {public_key}: {e}")
            raise NetworkError(f"Could not reach hashkeep: {e}") from e

        if not _is_success(resp):
            raise NotFoundError(f"Hashkeep: {resp.status_code}")

        try:
            return resp.content.decode("utf-8")
        except UnicodeDecodeError as e:
            raise StorageError(f"Blob at {public_key} is not UTF-8 text: {e}") from e
