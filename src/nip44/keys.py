"""Key parsing and key agreement for NIP-44."""

import logging
from typing import Union

from cryptography.hazmat.primitives import hmac
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.hashes import SHA256
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from .types import (
    CONVERSATION_KEY_SALT,
    PRIVATE_KEY_SIZE,
    PUBLIC_KEY_SIZE,
    InvalidKeyMaterialError,
)

logger = logging.getLogger(__name__)

# secp256k1 domain parameters
CURVE_ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
FIELD_PRIME = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F

KeyInput = Union[bytes, str]


def key_to_bytes(key: KeyInput, size: int, kind: str) -> bytes:
    """Normalize raw or hex-encoded key material to bytes."""
    if isinstance(key, str):
        try:
            key = bytes.fromhex(key)
        except ValueError as e:
            raise InvalidKeyMaterialError(f"{kind} is not valid hex: {e}") from e

    if len(key) != size:
        raise InvalidKeyMaterialError(f"{kind} must be {size} bytes, got {len(key)}")

    return bytes(key)


def parse_private_key(private_key: KeyInput) -> ec.EllipticCurvePrivateKey:
    """
    Load a secp256k1 private key from its 32-byte scalar.

    Args:
        private_key: Big-endian scalar as bytes or a 64-char hex string

    Returns:
        The private key object

    Raises:
        InvalidKeyMaterialError: If the scalar is not in [1, n - 1]
    """
    scalar = int.from_bytes(key_to_bytes(private_key, PRIVATE_KEY_SIZE, "Private key"), "big")

    if not 0 < scalar < CURVE_ORDER:
        raise InvalidKeyMaterialError("Private key scalar is out of range")

    return ec.derive_private_key(scalar, ec.SECP256K1())


def parse_public_key(public_key: KeyInput) -> ec.EllipticCurvePublicKey:
    """
    Load a secp256k1 public key from its 32-byte x-only encoding.

    The point with even y is used, as for BIP-340 keys.

    Raises:
        InvalidKeyMaterialError: If x does not belong to a point on the curve
    """
    x = key_to_bytes(public_key, PUBLIC_KEY_SIZE, "Public key")

    if int.from_bytes(x, "big") >= FIELD_PRIME:
        raise InvalidKeyMaterialError("Public key x-coordinate is out of range")

    try:
        return ec.EllipticCurvePublicKey.from_encoded_point(ec.SECP256K1(), b"\x02" + x)
    except ValueError as e:
        logger.debug("Rejected public key that is not on the curve")
        raise InvalidKeyMaterialError("Public key is not a valid curve point") from e


def get_public_key(private_key: KeyInput) -> bytes:
    """Return the 32-byte x-only public key for a private key."""
    key = parse_private_key(private_key)
    return key.public_key().public_bytes(Encoding.X962, PublicFormat.CompressedPoint)[1:]


def compute_shared_secret(private_key: KeyInput, public_key: KeyInput) -> bytes:
    """
    Perform secp256k1 ECDH.

    Args:
        private_key: Our private key
        public_key: Their x-only public key

    Returns:
        32-byte x-coordinate of the shared point (unhashed)
    """
    ours = parse_private_key(private_key)
    theirs = parse_public_key(public_key)
    return ours.exchange(ec.ECDH(), theirs)


def get_conversation_key(private_key: KeyInput, public_key: KeyInput) -> bytes:
    """
    Derive the conversation key shared by two parties.

    The ECDH x-coordinate is run through HKDF-Extract (SHA-256) with the
    salt ``nip44-v2``. The result is symmetric: A's private key with B's
    public key gives the same key as B's private key with A's public key.

    Returns:
        32-byte conversation key
    """
    shared_x = compute_shared_secret(private_key, public_key)

    extract = hmac.HMAC(CONVERSATION_KEY_SALT, SHA256())
    extract.update(shared_x)
    return extract.finalize()
