"""Payload encoding and decoding for NIP-44."""

import base64
from dataclasses import dataclass

from .types import (
    MAC_SIZE,
    MAX_PAYLOAD_SIZE,
    MIN_PAYLOAD_SIZE,
    NON_BASE64_SENTINEL,
    SALT_SIZE,
    MalformedEnvelopeError,
    UnsupportedVersionError,
    Version,
)

# Longest base64 text that can hold MAX_PAYLOAD_SIZE bytes
MAX_ENCODED_SIZE = (MAX_PAYLOAD_SIZE + 2) // 3 * 4


@dataclass(frozen=True)
class Payload:
    """NIP-44 encrypted payload."""
    version: Version
    salt: bytes  # 32 bytes
    ciphertext: bytes  # 2 + padded length
    mac: bytes  # 32 bytes


def payload_to_bytes(payload: Payload) -> bytes:
    """
    Serialize a payload to its binary layout.

    Format:
        [0]         version (0x02)
        [1-32]      salt (32 bytes)
        [33..-32]   ciphertext (variable)
        [-32:]      mac (32 bytes)
    """
    return bytes([payload.version]) + payload.salt + payload.ciphertext + payload.mac


def encode_payload(payload: Payload) -> str:
    """Encode a payload as base64 transport text."""
    return base64.b64encode(payload_to_bytes(payload)).decode("ascii")


def parse_version(value: int) -> Version:
    """
    Map a version byte to a supported version.

    Raises:
        UnsupportedVersionError: If the version is not supported
    """
    try:
        return Version(value)
    except ValueError:
        raise UnsupportedVersionError(f"Unknown encryption version: {value}") from None


def payload_from_bytes(data: bytes) -> Payload:
    """
    Parse the binary layout of a payload.

    Raises:
        MalformedEnvelopeError: If the data has an invalid size
        UnsupportedVersionError: If the version byte is unknown
    """
    if not data:
        raise MalformedEnvelopeError("Payload is empty")

    version = parse_version(data[0])

    if not MIN_PAYLOAD_SIZE <= len(data) <= MAX_PAYLOAD_SIZE:
        raise MalformedEnvelopeError(
            f"Invalid payload size: {len(data)} bytes "
            f"(expected {MIN_PAYLOAD_SIZE}-{MAX_PAYLOAD_SIZE})"
        )

    return Payload(
        version=version,
        salt=data[1 : 1 + SALT_SIZE],
        ciphertext=data[1 + SALT_SIZE : -MAC_SIZE],
        mac=data[-MAC_SIZE:],
    )


def decode_payload(text: str) -> Payload:
    """
    Decode base64 transport text into a payload.

    Args:
        text: Base64 payload text

    Returns:
        Decoded Payload

    Raises:
        UnsupportedVersionError: If the text is empty, uses the non-base64
            sentinel, or carries an unknown version byte
        MalformedEnvelopeError: If the text is not valid base64 or the
            decoded payload has an invalid size
    """
    if not text or text.startswith(NON_BASE64_SENTINEL):
        raise UnsupportedVersionError("Unknown encryption version")

    if len(text) > MAX_ENCODED_SIZE:
        raise MalformedEnvelopeError(f"Payload text too long: {len(text)} characters")

    try:
        data = base64.b64decode(text, validate=True)
    except ValueError as e:
        raise MalformedEnvelopeError(f"Invalid base64: {e}") from e

    return payload_from_bytes(data)


def is_nip44_payload(text: str) -> bool:
    """
    Check if text looks like a supported NIP-44 payload.

    Only the structure is checked; the MAC is not verified.
    """
    try:
        decode_payload(text)
    except (MalformedEnvelopeError, UnsupportedVersionError):
        return False

    return True
