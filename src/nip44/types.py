"""Type definitions for NIP-44."""

from dataclasses import dataclass
from enum import IntEnum


class Version(IntEnum):
    """Supported payload versions."""
    V2 = 0x02


# Protocol constants
CURRENT_VERSION = Version.V2
CONVERSATION_KEY_SALT = b"nip44-v2"
SALT_SIZE = 32
MAC_SIZE = 32
CONVERSATION_KEY_SIZE = 32
CHACHA_KEY_SIZE = 32
CHACHA_NONCE_SIZE = 12
HMAC_KEY_SIZE = 32
MESSAGE_KEYS_SIZE = CHACHA_KEY_SIZE + CHACHA_NONCE_SIZE + HMAC_KEY_SIZE  # 76

# Plaintext limits (UTF-8 bytes)
MIN_PLAINTEXT_SIZE = 1
MAX_PLAINTEXT_SIZE = 65536 - 128
LENGTH_PREFIX_SIZE = 2

# Padding
MIN_PADDED_SIZE = 32

# Envelope limits (decoded bytes)
MIN_PAYLOAD_SIZE = 1 + SALT_SIZE + LENGTH_PREFIX_SIZE + MIN_PADDED_SIZE + MAC_SIZE  # 99
MAX_PAYLOAD_SIZE = 1 + SALT_SIZE + LENGTH_PREFIX_SIZE + 65536 + MAC_SIZE  # 65603

# Key sizes
PRIVATE_KEY_SIZE = 32
PUBLIC_KEY_SIZE = 32

# Reserved first character of non-base64 payload encodings
NON_BASE64_SENTINEL = "#"


@dataclass(frozen=True)
class MessageKeys:
    """Per-message keys expanded from a conversation key and salt."""
    chacha_key: bytes  # 32 bytes
    chacha_nonce: bytes  # 12 bytes
    hmac_key: bytes  # 32 bytes


# Exception types
class NIP44Error(Exception):
    """Base exception for NIP-44 errors."""
    pass


class InvalidKeyMaterialError(NIP44Error):
    """Private scalar out of range or public key not on the curve."""
    pass


class PlaintextLengthInvalidError(NIP44Error):
    """Plaintext is empty or longer than the maximum."""
    pass


class UnsupportedVersionError(NIP44Error):
    """Unknown payload version or non-base64 encoding."""
    pass


class MalformedEnvelopeError(NIP44Error):
    """Payload cannot be decoded or has an invalid size."""
    pass


class AuthenticationFailedError(NIP44Error):
    """MAC verification failed."""
    pass


class PaddingInvalidError(NIP44Error):
    """Declared plaintext length does not match the padding."""
    pass


class InvalidUtf8Error(NIP44Error):
    """Decrypted plaintext is not valid UTF-8."""
    pass
