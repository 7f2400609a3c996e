"""
BLAKE2b (RFC 7693): 64-bit words, 128-byte blocks, 12 rounds, digests of
1-64 bytes, keys of up to 64 bytes. Pure Python.

Salting, personalization and tree hashing from the BLAKE2 paper are not
covered by the RFC and are not implemented.
"""

from __future__ import annotations

from ..serde import decode64_words, encode64
from ._blake2 import Blake2

_MASK64 = 0xFFFFFFFFFFFFFFFF

_IV = (
    0x6A09E667F3BCC908,
    0xBB67AE8584CAA73B,
    0x3C6EF372FE94F82B,
    0xA54FF53A5F1D36F1,
    0x510E527FADE682D1,
    0x9B05688C2B3E6C1F,
    0x1F83D9ABFB41BD6B,
    0x5BE0CD19137E2179,
)

# rows 10 and 11 repeat rows 0 and 1
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
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15),
    (14, 10, 4, 8, 9, 15, 13, 6, 1, 12, 0, 2, 11, 7, 5, 3),
)


def _rotr64(v: int, n: int) -> int:
    """Rotate 64-bit value v right by n bits (0 < n < 64)."""
    return ((v >> n) | (v << (64 - n))) & _MASK64


def _g(v: list[int], a: int, b: int, c: int, d: int, x: int, y: int) -> None:
    """Mixing function G; updates v[a], v[b], v[c], v[d] in place."""
    va, vb, vc, vd = v[a], v[b], v[c], v[d]
    va = (va + vb + x) & _MASK64
    vd = _rotr64(vd ^ va, 32)
    vc = (vc + vd) & _MASK64
    vb = _rotr64(vb ^ vc, 24)
    va = (va + vb + y) & _MASK64
    vd = _rotr64(vd ^ va, 16)
    vc = (vc + vd) & _MASK64
    vb = _rotr64(vb ^ vc, 63)
    v[a], v[b], v[c], v[d] = va, vb, vc, vd


def _f(h: list[int], block: bytearray, t0: int, t1: int, last: bool) -> None:
    """Compression function F; updates the chaining value h in place."""
    v = h + list(_IV)
    v[12] ^= t0
    v[13] ^= t1
    if last:
        v[14] ^= _MASK64
    m = decode64_words(block, 16)
    for s in _SIGMA:
        # columns
        _g(v, 0, 4, 8, 12, m[s[0]], m[s[1]])
        _g(v, 1, 5, 9, 13, m[s[2]], m[s[3]])
        _g(v, 2, 6, 10, 14, m[s[4]], m[s[5]])
        _g(v, 3, 7, 11, 15, m[s[6]], m[s[7]])
        # diagonals
        _g(v, 0, 5, 10, 15, m[s[8]], m[s[9]])
        _g(v, 1, 6, 11, 12, m[s[10]], m[s[11]])
        _g(v, 2, 7, 8, 13, m[s[12]], m[s[13]])
        _g(v, 3, 4, 9, 14, m[s[14]], m[s[15]])
    for i in range(8):
        h[i] ^= v[i] ^ v[i + 8]


class Blake2b(Blake2):
    """
    The BLAKE2b digest. A keyed instance is a MAC on its own; no HMAC
    construction is needed.

    >>> Blake2b(8).digest(bytes.fromhex("a55242b138855bc1")).hex()
    '5d24a4f6a40996d4'
    """

    ALGORITHM = "BLAKE2b"
    BLOCK_LENGTH = 128
    MAX_DIGEST_LENGTH = 64
    MAX_KEY_LENGTH = 64
    _WORD_MASK = _MASK64
    _IV = _IV

    def _compress(self, block: bytearray, last: bool) -> None:
        _f(self._h, block, self._t0, self._t1, last)

    def _encode_state(self) -> bytes:
        return b"".join(encode64(w) for w in self._h)


def blake2b(
    data: bytes, key: bytes = b"", digest_length: int = 64
) -> bytes:
    """
    One-shot BLAKE2b.

    Args:
        data: Input bytes (any length).
        key: Optional key (0-64 bytes).
        digest_length: Output length in bytes (1-64).

    Returns:
        digest_length-byte digest.
    """
    return Blake2b(digest_length, key).digest(data)


__all__: tuple[str, ...] = ("Blake2b", "blake2b")
