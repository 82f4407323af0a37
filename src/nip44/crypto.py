"""Encryption and decryption for NIP-44 payloads."""

import logging
import os
from typing import Callable, Dict, Optional

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hmac
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms
from cryptography.hazmat.primitives.hashes import SHA256
from cryptography.hazmat.primitives.kdf.hkdf import HKDFExpand

from .envelope import Payload, decode_payload, encode_payload
from .keys import KeyInput, get_conversation_key
from .padding import pad, unpad
from .types import (
    CHACHA_KEY_SIZE,
    CHACHA_NONCE_SIZE,
    CONVERSATION_KEY_SIZE,
    CURRENT_VERSION,
    MESSAGE_KEYS_SIZE,
    SALT_SIZE,
    AuthenticationFailedError,
    MessageKeys,
    Version,
)

logger = logging.getLogger(__name__)


def get_message_keys(conversation_key: bytes, salt: bytes) -> MessageKeys:
    """
    Expand a conversation key into the keys for one message.

    Args:
        conversation_key: 32-byte conversation key
        salt: 32-byte per-message salt

    Returns:
        MessageKeys with the ChaCha20 key, ChaCha20 nonce and HMAC key
    """
    if len(conversation_key) != CONVERSATION_KEY_SIZE:
        raise ValueError(
            f"Conversation key must be {CONVERSATION_KEY_SIZE} bytes, got {len(conversation_key)}"
        )
    if len(salt) != SALT_SIZE:
        raise ValueError(f"Salt must be {SALT_SIZE} bytes, got {len(salt)}")

    hkdf = HKDFExpand(algorithm=SHA256(), length=MESSAGE_KEYS_SIZE, info=salt)
    keys = hkdf.derive(conversation_key)

    nonce_end = CHACHA_KEY_SIZE + CHACHA_NONCE_SIZE
    return MessageKeys(
        chacha_key=keys[:CHACHA_KEY_SIZE],
        chacha_nonce=keys[CHACHA_KEY_SIZE:nonce_end],
        hmac_key=keys[nonce_end:],
    )


def _chacha20(key: bytes, nonce: bytes, data: bytes) -> bytes:
    """ChaCha20 keystream XOR, block counter starting at 0."""
    # cryptography takes a 16-byte nonce: 4-byte little-endian counter + 12-byte nonce
    cipher = Cipher(algorithms.ChaCha20(key, bytes(4) + nonce), mode=None)
    return cipher.encryptor().update(data)


def _mac(hmac_key: bytes, salt: bytes, ciphertext: bytes) -> hmac.HMAC:
    h = hmac.HMAC(hmac_key, SHA256())
    h.update(salt)
    h.update(ciphertext)
    return h


def calc_mac(hmac_key: bytes, salt: bytes, ciphertext: bytes) -> bytes:
    """HMAC-SHA256 over the ciphertext, with the salt as associated data."""
    return _mac(hmac_key, salt, ciphertext).finalize()


def encrypt(plaintext: str, conversation_key: bytes, salt: Optional[bytes] = None) -> str:
    """
    Encrypt a message with a conversation key.

    Args:
        plaintext: Message to encrypt (1-65408 UTF-8 bytes)
        conversation_key: 32-byte conversation key
        salt: Fixed 32-byte salt, for reproducible tests only

    Returns:
        Base64 payload text

    Raises:
        PlaintextLengthInvalidError: If the message is empty or too long
    """
    padded = pad(plaintext)

    if salt is None:
        salt = os.urandom(SALT_SIZE)

    keys = get_message_keys(conversation_key, salt)
    ciphertext = _chacha20(keys.chacha_key, keys.chacha_nonce, padded)

    return encode_payload(
        Payload(
            version=CURRENT_VERSION,
            salt=salt,
            ciphertext=ciphertext,
            mac=calc_mac(keys.hmac_key, salt, ciphertext),
        )
    )


def _decrypt_v2(payload: Payload, conversation_key: bytes) -> str:
    keys = get_message_keys(conversation_key, payload.salt)

    try:
        _mac(keys.hmac_key, payload.salt, payload.ciphertext).verify(payload.mac)
    except InvalidSignature:
        logger.debug("Rejected payload with invalid MAC")
        raise AuthenticationFailedError("Invalid MAC") from None

    padded = _chacha20(keys.chacha_key, keys.chacha_nonce, payload.ciphertext)
    return unpad(padded)


_DECRYPTORS: Dict[Version, Callable[[Payload, bytes], str]] = {
    Version.V2: _decrypt_v2,
}


def decrypt(payload: str, conversation_key: bytes) -> str:
    """
    Decrypt a payload with a conversation key.

    The MAC is verified before any plaintext is produced.

    Args:
        payload: Base64 payload text
        conversation_key: 32-byte conversation key

    Returns:
        The decrypted message

    Raises:
        UnsupportedVersionError: Unknown version or non-base64 encoding
        MalformedEnvelopeError: Invalid base64 or payload size
        AuthenticationFailedError: MAC mismatch
        PaddingInvalidError: Declared length inconsistent with padding
        InvalidUtf8Error: Plaintext is not valid UTF-8
    """
    decoded = decode_payload(payload)
    return _DECRYPTORS[decoded.version](decoded, conversation_key)


def encrypt_message(
    plaintext: str,
    sender_private_key: KeyInput,
    recipient_public_key: KeyInput,
    conversation_key: Optional[bytes] = None,
    salt: Optional[bytes] = None,
) -> str:
    """
    Encrypt a message for a recipient.

    Args:
        plaintext: Message to encrypt
        sender_private_key: Sender's secp256k1 private key
        recipient_public_key: Recipient's x-only public key
        conversation_key: Precomputed conversation key, skips key agreement
        salt: Fixed 32-byte salt, for reproducible tests only

    Returns:
        Base64 payload text
    """
    if conversation_key is None:
        conversation_key = get_conversation_key(sender_private_key, recipient_public_key)

    return encrypt(plaintext, conversation_key, salt=salt)


def decrypt_message(
    payload: str,
    recipient_private_key: KeyInput,
    sender_public_key: KeyInput,
    conversation_key: Optional[bytes] = None,
) -> str:
    """
    Decrypt a message from a sender.

    Args:
        payload: Base64 payload text
        recipient_private_key: Our secp256k1 private key
        sender_public_key: Sender's x-only public key
        conversation_key: Precomputed conversation key, skips key agreement

    Returns:
        The decrypted message
    """
    decoded = decode_payload(payload)

    if conversation_key is None:
        conversation_key = get_conversation_key(recipient_private_key, sender_public_key)

    return _DECRYPTORS[decoded.version](decoded, conversation_key)
