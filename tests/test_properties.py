"""
Properties shared by both flavors, checked against CPython's hashlib
(an independent BLAKE2 implementation) as the reference.
"""

from __future__ import annotations

import hashlib
import random

import pytest

from picoblake2 import ALGORITHMS, Blake2b, Blake2s, new

FLAVORS = [
    (Blake2b, hashlib.blake2b),
    (Blake2s, hashlib.blake2s),
]

# around one and two block boundaries of both flavors
SIZES = [0, 1, 3, 63, 64, 65, 127, 128, 129, 255, 256, 257, 1000]


def _split(data: bytes, rng: random.Random) -> list[bytes]:
    parts = []
    i = 0
    while i < len(data):
        n = rng.randint(0, 150)
        parts.append(data[i : i + n])
        i += n
    return parts


@pytest.mark.parametrize("cls, reference", FLAVORS)
@pytest.mark.parametrize("size", SIZES)
def test_matches_hashlib_unkeyed(cls, reference, size: int) -> None:
    data = random.Random(size).randbytes(size)
    assert cls().digest(data) == reference(data).digest()


@pytest.mark.parametrize("cls, reference", FLAVORS)
@pytest.mark.parametrize("size", SIZES)
def test_matches_hashlib_keyed(cls, reference, size: int) -> None:
    rng = random.Random(1000 + size)
    key = rng.randbytes(rng.randint(1, cls.MAX_KEY_LENGTH))
    data = rng.randbytes(size)
    assert cls(key=key).digest(data) == reference(data, key=key).digest()


@pytest.mark.parametrize("cls, reference", FLAVORS)
def test_matches_hashlib_every_digest_length(cls, reference) -> None:
    data = b"The quick brown fox jumps over the lazy dog"
    key = bytes(range(cls.MAX_KEY_LENGTH))
    for n in range(1, cls.MAX_DIGEST_LENGTH + 1):
        assert cls(n).digest(data) == reference(data, digest_size=n).digest()
        assert cls(n, key).digest(data) == reference(
            data, digest_size=n, key=key
        ).digest()


@pytest.mark.parametrize("cls, reference", FLAVORS)
def test_deterministic(cls, reference) -> None:
    data = b"same input" * 50
    assert cls(24, b"k").digest(data) == cls(24, b"k").digest(data)


@pytest.mark.parametrize("cls, reference", FLAVORS)
def test_chunking_invariance(cls, reference) -> None:
    rng = random.Random(42)
    data = rng.randbytes(700)
    key = rng.randbytes(cls.MAX_KEY_LENGTH)
    expected = cls(key=key).digest(data)
    for _ in range(20):
        d = cls(key=key)
        for part in _split(data, rng):
            d.update(part)
        assert d.digest() == expected


@pytest.mark.parametrize("cls, reference", FLAVORS)
def test_auto_reset(cls, reference) -> None:
    data = random.Random(3).randbytes(300)
    d = cls(16, b"secret")
    d.update(b"discarded")
    d.digest()
    assert d.digest(data) == cls(16, b"secret").digest(data)


@pytest.mark.parametrize("cls, reference", FLAVORS)
def test_burn_equals_fresh_unkeyed(cls, reference) -> None:
    data = random.Random(5).randbytes(200)
    d = cls(cls.MAX_DIGEST_LENGTH, b"\x01" * cls.MAX_KEY_LENGTH)
    d.update(data)
    d.burn()
    assert d.digest(data) == cls(cls.MAX_DIGEST_LENGTH).digest(data)


def test_registry() -> None:
    assert set(ALGORITHMS) == {"BLAKE2b", "BLAKE2s"}
    d = new("blake2b", 16)
    assert isinstance(d, Blake2b)
    assert d.length == 16
    s = new("BLAKE2S", key=b"k")
    assert isinstance(s, Blake2s)
    assert s.length == 32
    assert s.digest(b"abc") == hashlib.blake2s(b"abc", key=b"k").digest()


def test_registry_unknown_algorithm() -> None:
    with pytest.raises(ValueError):
        new("sha256")
