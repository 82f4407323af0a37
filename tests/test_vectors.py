"""Test vectors for NIP-44 cross-implementation testing."""

# Secret keys (32-byte hex strings)
SEC1_HEX = "0000000000000000000000000000000000000000000000000000000000000001"
SEC2_HEX = "0000000000000000000000000000000000000000000000000000000000000002"

# x-only public keys (x-coordinates of G and 2G)
PUB1_HEX = "79be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
PUB2_HEX = "c6047f9441ed7d6d3045406e95c07cd85c778e4b8cef3ca7abac09b95c709ee5"

# ECDH x-coordinate and conversation key between SEC1 and SEC2
SHARED_X_HEX = "c6047f9441ed7d6d3045406e95c07cd85c778e4b8cef3ca7abac09b95c709ee5"
CONVERSATION_KEY_HEX = "c41c775356fd92eadc63ff5a0dc1da211b268cbea22316767095b2871ea1412d"

# Highest valid scalar (n - 1) and first invalid one (n)
CURVE_ORDER_MINUS_ONE_HEX = "fffffffffffffffffffffffffffffffebaaedce6af48a03bbfd25e8cd0364140"
CURVE_ORDER_HEX = "fffffffffffffffffffffffffffffffebaaedce6af48a03bbfd25e8cd0364141"
FIELD_PRIME_HEX = "fffffffffffffffffffffffffffffffffffffffffffffffffffffffefffffc2f"

# Message keys for CONVERSATION_KEY with the first salt below
MESSAGE_KEYS_SALT1 = {
    "chacha_key": "63e64ca552c6a0664d4f6402c033fd698f43d531520e177d7c5c84357feafd1a",
    "chacha_nonce": "1f58294fc1d270dc407146ca",
    "hmac_key": "b3bd1176db3c377f82fd03162d0f3a9a323cace39fb89970b9f32395476e1a08",
}

# Known payloads: (sender secret, recipient secret, salt, plaintext, payload)
ENCRYPT_DECRYPT_VECTORS = [
    (
        SEC1_HEX,
        SEC2_HEX,
        "0000000000000000000000000000000000000000000000000000000000000001",
        "a",
        "AgAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAABee0G5VSK0/9YypIObAtDKfYEAjD35uVkHyB0F4DwrcNaCXlCWZKaArsGrY6M9wnuTMxWfp1RTN9Xga8no+kF5Vsb",
    ),
    (
        SEC2_HEX,
        SEC1_HEX,
        "f00000000000000000000000000000f00000000000000000000000000000000f",
        "\U0001f355\U0001fac3",
        "AvAAAAAAAAAAAAAAAAAAAPAAAAAAAAAAAAAAAAAAAAAPSKSK6is9ngkX2+cSq85Th16oRTISAOfhStnixqZziKMDvB0QQzgFZdjLTPicCJaV8nDITO+QfaQ61+KbWQIOO2Yj",
    ),
    (
        SEC1_HEX,
        SEC2_HEX,
        "ffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffff",
        "Hello, Nostr! This message is longer than thirty-two bytes.",
        "Av//////////////////////////////////////////cPkVyZ0VelDp7Uv93FDoUQRBqC9KRgwWBk3E6fRHAalOftMmwc88el8CU6JeKmZAlnAKEs/MVf19jOunbfFplNLEDMzfGbfrldeVTy8rHRpDsL79TiXlmnwaXusBglT+ZWY=",
    ),
]

# [unpadded length, padded length]
PADDING_VECTORS = [
    (16, 32),
    (32, 32),
    (33, 64),
    (37, 64),
    (45, 64),
    (49, 64),
    (64, 64),
    (65, 96),
    (100, 128),
    (111, 128),
    (200, 224),
    (250, 256),
    (320, 320),
    (383, 384),
    (384, 384),
    (400, 448),
    (500, 512),
    (512, 512),
    (515, 640),
    (700, 768),
    (800, 896),
    (900, 1024),
    (1020, 1024),
    (65536, 65536),
    (74123, 81920),
]

# Messages covering edge cases
TEST_MESSAGES = {
    "single_char": "X",
    "whitespace": "   \t\n   ",
    "numbers": "1234567890",
    "punctuation": "!@#$%^&*()_+-=[]{}\\|;':\",./<>?",
    "newlines": "Line 1\nLine 2\nLine 3",
    "emoji_simple": "Hello \U0001f44b World \U0001f30d",
    "chinese": "你好世界 - Hello World",
    "accents": "Café résumé naïve",
    "json": '{"key": "value", "num": 42}',
    "exactly_32": "A" * 32,
    "exactly_33": "A" * 33,
    "long_text": "The quick brown fox jumps over the lazy dog. " * 100,
    "max_payload": "A" * 65408,
}
