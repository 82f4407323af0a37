"""Conversation key cache with TTL expiration."""

import hashlib
import threading
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional, Tuple

from ..keys import KeyInput, get_conversation_key, get_public_key, key_to_bytes
from ..types import PRIVATE_KEY_SIZE, PUBLIC_KEY_SIZE


@dataclass
class _CacheEntry:
    """Entry in the conversation key cache with expiration."""
    key: bytes
    expires_at: datetime


# Default TTL: 24 hours
DEFAULT_TTL = timedelta(hours=24)

PeerPair = Tuple[bytes, bytes]


def _peer_pair(own_public_key: KeyInput, peer_public_key: KeyInput) -> PeerPair:
    return (
        key_to_bytes(own_public_key, PUBLIC_KEY_SIZE, "Public key"),
        key_to_bytes(peer_public_key, PUBLIC_KEY_SIZE, "Public key"),
    )


class ConversationKeyCache:
    """
    In-memory cache of conversation keys, owned by the caller.

    Entries are keyed by (own public key, peer public key). Key agreement is
    deterministic, so a concurrent recomputation for the same pair yields the
    same value and is harmless.

    Raises InvalidKeyMaterialError for keys that are not 32 bytes or valid hex.
    """

    def __init__(self, ttl: timedelta = DEFAULT_TTL) -> None:
        """Creates a new conversation key cache with the given TTL (default: 24 hours)."""
        self._cache: dict[PeerPair, _CacheEntry] = {}
        # SHA-256 of a private key -> its public key, so hits skip scalar multiplication
        self._public_keys: dict[bytes, bytes] = {}
        self._ttl = ttl
        self._lock = threading.Lock()

    def store(self, own_public_key: KeyInput, peer_public_key: KeyInput, key: bytes) -> None:
        """Store the conversation key for a peer pair."""
        pair = _peer_pair(own_public_key, peer_public_key)
        with self._lock:
            self._cache[pair] = _CacheEntry(
                key=bytes(key),
                expires_at=datetime.now() + self._ttl,
            )

    def retrieve(self, own_public_key: KeyInput, peer_public_key: KeyInput) -> Optional[bytes]:
        """Retrieve the conversation key for a peer pair (returns None if expired)."""
        pair = _peer_pair(own_public_key, peer_public_key)
        with self._lock:
            entry = self._cache.get(pair)
            if entry is None:
                return None

            if entry.expires_at <= datetime.now():
                del self._cache[pair]
                return None

            return bytes(entry.key)

    def _own_public_key(self, private_key: KeyInput) -> bytes:
        digest = hashlib.sha256(key_to_bytes(private_key, PRIVATE_KEY_SIZE, "Private key")).digest()

        with self._lock:
            public_key = self._public_keys.get(digest)

        if public_key is None:
            public_key = get_public_key(private_key)
            with self._lock:
                self._public_keys[digest] = public_key

        return public_key

    def get_or_derive(
        self,
        private_key: KeyInput,
        peer_public_key: KeyInput,
        own_public_key: Optional[KeyInput] = None,
    ) -> bytes:
        """
        Return the cached conversation key, running key agreement on a miss.

        Args:
            private_key: Our private key
            peer_public_key: The peer's x-only public key
            own_public_key: Our public key, if the caller already has it

        Returns:
            32-byte conversation key
        """
        if own_public_key is None:
            own_public_key = self._own_public_key(private_key)

        key = self.retrieve(own_public_key, peer_public_key)
        if key is None:
            key = get_conversation_key(private_key, peer_public_key)
            self.store(own_public_key, peer_public_key, key)

        return key

    def invalidate(self, own_public_key: KeyInput, peer_public_key: KeyInput) -> None:
        """Invalidate the cached key for a peer pair."""
        pair = _peer_pair(own_public_key, peer_public_key)
        with self._lock:
            self._cache.pop(pair, None)

    def clear(self) -> None:
        """Clear all cached keys."""
        with self._lock:
            self._cache.clear()
            self._public_keys.clear()

    def prune_expired(self) -> None:
        """Remove all expired entries."""
        now = datetime.now()
        with self._lock:
            expired = [pair for pair, entry in self._cache.items() if entry.expires_at <= now]
            for pair in expired:
                del self._cache[pair]

    def __len__(self) -> int:
        """Number of unexpired entries."""
        self.prune_expired()
        with self._lock:
            return len(self._cache)
