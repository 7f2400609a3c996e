"""
BLAKE2s (RFC 7693): 32-bit words, 64-byte blocks, 10 rounds, digests of
1-32 bytes, keys of up to 32 bytes. Pure Python.
"""

from __future__ import annotations

from ..serde import decode32_words, encode32
from ._blake2 import Blake2

_MASK32 = 0xFFFFFFFF

_IV = (
    0x6A09E667,
    0xBB67AE85,
    0x3C6EF372,
    0xA54FF53A,
    0x510E527F,
    0x9B05688C,
    0x1F83D9AB,
    0x5BE0CD19,
)

_SIGMA = (
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15),
    (14, 10, 4, 8, 9, 15, 13, 6, 1, 12, 0, 2, 11, 7, 5, 3),
    (11, 8, 12, 0, 5, 2, 15, 13, 10, 14, 3, 6, 7, 1, 9, 4),
    (7, 9, 3, 1, 13, 12, 11, 14, 2, 6, 5, 10, 4, 0, 15, 8),
    (9, 0, 5, 7, 2, 4, 10, 15, 14, 1, 11, 12, 6, 8, 3, 13),
    (2, 12, 6, 10, 0, 11, 8, 3, 4, 13, 7, 5, 15, 14, 1, 9),
    (12, 5, 1, 15, 14, 13, 4, 10, 0, 7, 6, 3, 9, 2, 8, 11),
    (13, 11, 7, 14, 12, 1, 3, 9, 5, 0, 15, 4, 8, 6, 2, 10),
    (6, 15, 14, 9, 11, 3, 0, 8, 12, 2, 13, 7, 1, 4, 10, 5),
    (10, 2, 8, 4, 7, 6, 1, 5, 15, 11, 9, 14, 3, 12, 13, 0),
)


def _rotr32(v: int, n: int) -> int:
    """Rotate 32-bit value v right by n bits (0 < n < 32)."""
    return ((v >> n) | (v << (32 - n))) & _MASK32


def _g(v: list[int], a: int, b: int, c: int, d: int, x: int, y: int) -> None:
    va, vb, vc, vd = v[a], v[b], v[c], v[d]
    va = (va + vb + x) & _MASK32
    vd = _rotr32(vd ^ va, 16)
    vc = (vc + vd) & _MASK32
    vb = _rotr32(vb ^ vc, 12)
    va = (va + vb + y) & _MASK32
    vd = _rotr32(vd ^ va, 8)
    vc = (vc + vd) & _MASK32
    vb = _rotr32(vb ^ vc, 7)
    v[a], v[b], v[c], v[d] = va, vb, vc, vd


def _f(h: list[int], block: bytearray, t0: int, t1: int, last: bool) -> None:
    v = h + list(_IV)
    v[12] ^= t0
    v[13] ^= t1
    if last:
        v[14] ^= _MASK32
    m = decode32_words(block, 16)
    for s in _SIGMA:
        _g(v, 0, 4, 8, 12, m[s[0]], m[s[1]])
        _g(v, 1, 5, 9, 13, m[s[2]], m[s[3]])
        _g(v, 2, 6, 10, 14, m[s[4]], m[s[5]])
        _g(v, 3, 7, 11, 15, m[s[6]], m[s[7]])
        _g(v, 0, 5, 10, 15, m[s[8]], m[s[9]])
        _g(v, 1, 6, 11, 12, m[s[10]], m[s[11]])
        _g(v, 2, 7, 8, 13, m[s[12]], m[s[13]])
        _g(v, 3, 4, 9, 14, m[s[14]], m[s[15]])
    for i in range(8):
        h[i] ^= v[i] ^ v[i + 8]


class Blake2s(Blake2):
    """The BLAKE2s digest, for 8- to 32-bit platforms."""

    ALGORITHM = "BLAKE2s"
    BLOCK_LENGTH = 64
    MAX_DIGEST_LENGTH = 32
    MAX_KEY_LENGTH = 32
    _WORD_MASK = _MASK32
    _IV = _IV

    def _compress(self, block: bytearray, last: bool) -> None:
        _f(self._h, block, self._t0, self._t1, last)

    def _encode_state(self) -> bytes:
        return b"".join(encode32(w) for w in self._h)


def blake2s(
    data: bytes, key: bytes = b"", digest_length: int = 32
) -> bytes:
    """
    One-shot BLAKE2s.

    Args:
        data: Input bytes (any length).
        key: Optional key (0-32 bytes).
        digest_length: Output length in bytes (1-32).

    Returns:
        digest_length-byte digest.
    """
    return Blake2s(digest_length, key).digest(data)


__all__: tuple[str, ...] = ("Blake2s", "blake2s")
