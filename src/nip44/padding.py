"""Plaintext padding for NIP-44.

Padded plaintext layout:
    [0-1]   unpadded length (big-endian u16)
    [2+]    UTF-8 plaintext, then zero bytes up to calc_padded_len(length)
"""

from .types import (
    LENGTH_PREFIX_SIZE,
    MAX_PLAINTEXT_SIZE,
    MIN_PADDED_SIZE,
    MIN_PLAINTEXT_SIZE,
    InvalidUtf8Error,
    PaddingInvalidError,
    PlaintextLengthInvalidError,
)


def calc_padded_len(unpadded_len: int) -> int:
    """
    Compute the padded length for an unpadded byte length.

    Lengths up to 32 pad to 32. Beyond that, lengths round up to a multiple
    of a chunk that is 32 bytes up to 256 and an eighth of the next power of
    two after that.

    Args:
        unpadded_len: Plaintext length in bytes (>= 1)

    Returns:
        Padded length in bytes
    """
    if unpadded_len < 1:
        raise ValueError(f"Unpadded length must be positive, got {unpadded_len}")

    if unpadded_len <= MIN_PADDED_SIZE:
        return MIN_PADDED_SIZE

    next_power = 1 << (unpadded_len - 1).bit_length()
    chunk = 32 if next_power <= 256 else next_power // 8

    return chunk * ((unpadded_len - 1) // chunk + 1)


def pad(plaintext: str) -> bytes:
    """
    Build the padded plaintext for a message.

    Raises:
        PlaintextLengthInvalidError: If the UTF-8 length is outside [1, 65408]
    """
    unpadded = plaintext.encode("utf-8")
    unpadded_len = len(unpadded)

    if not MIN_PLAINTEXT_SIZE <= unpadded_len <= MAX_PLAINTEXT_SIZE:
        raise PlaintextLengthInvalidError(
            f"Plaintext must be {MIN_PLAINTEXT_SIZE}-{MAX_PLAINTEXT_SIZE} bytes, got {unpadded_len}"
        )

    prefix = unpadded_len.to_bytes(LENGTH_PREFIX_SIZE, byteorder="big")
    suffix = bytes(calc_padded_len(unpadded_len) - unpadded_len)

    return prefix + unpadded + suffix


def unpad(padded: bytes) -> str:
    """
    Recover the plaintext from padded bytes.

    Raises:
        PaddingInvalidError: If the declared length is zero or inconsistent
        InvalidUtf8Error: If the plaintext is not valid UTF-8
    """
    if len(padded) < LENGTH_PREFIX_SIZE:
        raise PaddingInvalidError("Padded plaintext is missing its length prefix")

    unpadded_len = int.from_bytes(padded[:LENGTH_PREFIX_SIZE], byteorder="big")
    if unpadded_len == 0:
        raise PaddingInvalidError("Declared plaintext length is zero")

    unpadded = padded[LENGTH_PREFIX_SIZE : LENGTH_PREFIX_SIZE + unpadded_len]
    if len(unpadded) != unpadded_len:
        raise PaddingInvalidError("Declared plaintext length exceeds padded data")

    if len(padded) != LENGTH_PREFIX_SIZE + calc_padded_len(unpadded_len):
        raise PaddingInvalidError("Padded length does not match declared plaintext length")

    try:
        return unpadded.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidUtf8Error(f"Plaintext is not valid UTF-8: {e}") from e
