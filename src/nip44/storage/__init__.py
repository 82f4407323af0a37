"""NIP-44 storage module."""

from .conversation_key_cache import ConversationKeyCache, DEFAULT_TTL

__all__ = [
    "ConversationKeyCache",
    "DEFAULT_TTL",
]
