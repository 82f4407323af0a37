"""Tests for payload encoding and decoding."""

import base64

import pytest
from nip44.envelope import (
    Payload,
    decode_payload,
    encode_payload,
    is_nip44_payload,
    payload_from_bytes,
    payload_to_bytes,
)
from nip44.types import MalformedEnvelopeError, UnsupportedVersionError, Version
from .test_vectors import ENCRYPT_DECRYPT_VECTORS


@pytest.fixture
def payload() -> Payload:
    return Payload(
        version=Version.V2,
        salt=bytes(range(32)),
        ciphertext=b"\xaa" * 34,
        mac=b"\xbb" * 32,
    )


class TestEncoding:
    """Test payload serialization."""

    def test_layout(self, payload: Payload) -> None:
        data = payload_to_bytes(payload)
        assert len(data) == 1 + 32 + 34 + 32
        assert data[0] == 0x02
        assert data[1:33] == bytes(range(32))
        assert data[33:-32] == b"\xaa" * 34
        assert data[-32:] == b"\xbb" * 32

    def test_base64_text(self, payload: Payload) -> None:
        text = encode_payload(payload)
        assert base64.b64decode(text) == payload_to_bytes(payload)

    def test_decode_encoded(self, payload: Payload) -> None:
        assert decode_payload(encode_payload(payload)) == payload


class TestDecoding:
    """Test payload parsing and rejection."""

    def test_decode_known_payload(self) -> None:
        _, _, salt_hex, _, text = ENCRYPT_DECRYPT_VECTORS[0]
        payload = decode_payload(text)

        assert payload.version is Version.V2
        assert payload.salt.hex() == salt_hex
        assert len(payload.ciphertext) == 34
        assert len(payload.mac) == 32

    def test_sentinel_rejected(self) -> None:
        with pytest.raises(UnsupportedVersionError):
            decode_payload("#Agxyz")

    def test_empty_rejected(self) -> None:
        with pytest.raises(UnsupportedVersionError):
            decode_payload("")

    def test_unknown_version(self, payload: Payload) -> None:
        data = bytearray(payload_to_bytes(payload))
        data[0] = 0x01
        with pytest.raises(UnsupportedVersionError, match="1"):
            decode_payload(base64.b64encode(bytes(data)).decode())

    def test_unknown_version_short_payload(self) -> None:
        """Version is checked before the size."""
        with pytest.raises(UnsupportedVersionError):
            payload_from_bytes(b"\x03" + bytes(10))

    def test_invalid_base64(self) -> None:
        with pytest.raises(MalformedEnvelopeError, match="base64"):
            decode_payload("Ag!!" * 40)

    def test_missing_base64_padding(self, payload: Payload) -> None:
        text = encode_payload(Payload(Version.V2, payload.salt, b"\xaa" * 35, payload.mac))
        assert text.endswith("=")
        with pytest.raises(MalformedEnvelopeError):
            decode_payload(text.rstrip("="))

    def test_too_short(self, payload: Payload) -> None:
        short = Payload(Version.V2, payload.salt, b"\xaa" * 33, payload.mac)
        with pytest.raises(MalformedEnvelopeError, match="size"):
            decode_payload(encode_payload(short))

    def test_too_long(self, payload: Payload) -> None:
        long = Payload(Version.V2, payload.salt, b"\xaa" * 65539, payload.mac)
        with pytest.raises(MalformedEnvelopeError):
            decode_payload(encode_payload(long))

    def test_empty_decoded_data(self) -> None:
        with pytest.raises(MalformedEnvelopeError):
            payload_from_bytes(b"")


class TestIsNip44Payload:
    """Test the structural check."""

    def test_valid(self, payload: Payload) -> None:
        assert is_nip44_payload(encode_payload(payload))

    def test_invalid(self) -> None:
        assert not is_nip44_payload("")
        assert not is_nip44_payload("#abc")
        assert not is_nip44_payload("not base64!")
        assert not is_nip44_payload(base64.b64encode(bytes(100)).decode())
