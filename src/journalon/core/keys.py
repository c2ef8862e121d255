"""Key derivation - private secrets and the public ids derived from them.

Access to a journal is possession-based: whoever holds the private key can
read and rewrite the blob stored at its public id. Nothing here encrypts
content.
"""

import hashlib
import uuid
from dataclasses import dataclass


def generate_private_key() -> str:
    """Generate a fresh random private key."""
    return str(uuid.uuid4())


def derive_public_key(private_key: str) -> str:
    """SHA-1 hex digest of a private key. Same input, same output."""
    if not isinstance(private_key, str) or not private_key:
        raise ValueError("Private key must be a non-empty string")
    return hashlib.sha1(private_key.encode("utf-8")).hexdigest()


def generate_entry_id() -> str:
    """Generate a unique id for a journal entry."""
    return str(uuid.uuid4())


@dataclass(frozen=True)
class KeyPair:
    """A private key and the public id derived from it."""

    private_key: str
    public_key: str

    @classmethod
    def generate(cls) -> "KeyPair":
        private_key = generate_private_key()
        return cls(private_key=private_key, public_key=derive_public_key(private_key))

    @classmethod
    def from_private_key(cls, private_key: str) -> "KeyPair":
        return cls(private_key=private_key, public_key=derive_public_key(private_key))
