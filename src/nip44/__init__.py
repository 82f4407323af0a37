"""
NIP-44 - Versioned encrypted payloads

Python implementation of NIP-44 v2 using secp256k1 ECDH + HKDF + ChaCha20 + HMAC-SHA256.
"""

from .keys import (
    parse_private_key,
    parse_public_key,
    get_public_key,
    compute_shared_secret,
    get_conversation_key,
)
from .padding import calc_padded_len, pad, unpad
from .envelope import (
    Payload,
    encode_payload,
    decode_payload,
    payload_to_bytes,
    payload_from_bytes,
    is_nip44_payload,
)
from .crypto import (
    get_message_keys,
    calc_mac,
    encrypt,
    decrypt,
    encrypt_message,
    decrypt_message,
)
from .types import (
    Version,
    MessageKeys,
    CURRENT_VERSION,
    MAX_PLAINTEXT_SIZE,
    NIP44Error,
    InvalidKeyMaterialError,
    PlaintextLengthInvalidError,
    UnsupportedVersionError,
    MalformedEnvelopeError,
    AuthenticationFailedError,
    PaddingInvalidError,
    InvalidUtf8Error,
)
from .storage import ConversationKeyCache

__version__ = "0.1.0"

__all__ = [
    # Keys
    "parse_private_key",
    "parse_public_key",
    "get_public_key",
    "compute_shared_secret",
    "get_conversation_key",
    # Padding
    "calc_padded_len",
    "pad",
    "unpad",
    # Envelope
    "Payload",
    "encode_payload",
    "decode_payload",
    "payload_to_bytes",
    "payload_from_bytes",
    "is_nip44_payload",
    # Crypto
    "get_message_keys",
    "calc_mac",
    "encrypt",
    "decrypt",
    "encrypt_message",
    "decrypt_message",
    # Types
    "Version",
    "MessageKeys",
    "CURRENT_VERSION",
    "MAX_PLAINTEXT_SIZE",
    # Errors
    "NIP44Error",
    "InvalidKeyMaterialError",
    "PlaintextLengthInvalidError",
    "UnsupportedVersionError",
    "MalformedEnvelopeError",
    "AuthenticationFailedError",
    "PaddingInvalidError",
    "InvalidUtf8Error",
    # Storage
    "ConversationKeyCache",
]
