"""Known-answer tests (RFC 7693 appendices and the BLAKE2 KAT files)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import NamedTuple

import pytest

from picoblake2 import Blake2b, Blake2s

VECTORS_DIR = Path(__file__).parent / "vectors"


class KnownAnswer(NamedTuple):
    key: bytes
    input: bytes
    output: bytes


def load_vectors(name: str) -> list[KnownAnswer]:
    """Read [{"key", "in", "out"}, ...] records (hex strings) from a JSON file."""
    with open(VECTORS_DIR / name, encoding="utf-8") as f:
        records = json.load(f)
    return [
        KnownAnswer(
            bytes.fromhex(r["key"]), bytes.fromhex(r["in"]), bytes.fromhex(r["out"])
        )
        for r in records
    ]


@pytest.mark.parametrize("vector", load_vectors("blake2b.json"))
def test_blake2b_vectors(vector: KnownAnswer) -> None:
    d = Blake2b(len(vector.output), vector.key)
    assert d.digest(vector.input) == vector.output


@pytest.mark.parametrize("vector", load_vectors("blake2s.json"))
def test_blake2s_vectors(vector: KnownAnswer) -> None:
    d = Blake2s(len(vector.output), vector.key)
    assert d.digest(vector.input) == vector.output


@pytest.mark.parametrize("vector", load_vectors("blake2b.json"))
def test_blake2b_vectors_byte_by_byte(vector: KnownAnswer) -> None:
    d = Blake2b(len(vector.output), vector.key)
    for b in vector.input:
        d.update_byte(b)
    assert d.digest() == vector.output


def test_blake2b_abc_rfc7693() -> None:
    """RFC 7693 Appendix A."""
    assert Blake2b(64).hexdigest(b"abc") == (
        "ba80a53f981c4d0d6a2797b69f12f6e94c212f14685ac4b74b12bb6fdbffa2d1"
        "7d87c5392aab792dc252d5de4533cc9518d38aa8dbf1925ab92386edd4009923"
    )


def test_blake2s_abc_rfc7693() -> None:
    """RFC 7693 Appendix B."""
    assert Blake2s(32).hexdigest(b"abc") == (
        "508c5e8c327c14e2e1a72ba34eeb452f37458b209ed63a294d999b4c86675982"
    )
