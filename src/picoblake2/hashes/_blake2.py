"""
Common engine for the BLAKE2 flavors (RFC 7693): key priming, block
buffering, byte counter, finalization and truncation. Subclasses supply the
word width, the constants and the compression function F.

Instances are not thread safe. Independent instances, copies included, share
no mutable storage.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from .._preconditions import (check_argument, check_bounds, check_bytes_like,
                              check_state)

# depth = 1, fanout = 1 in the first parameter word (sequential mode)
_PARAM_SEQUENTIAL = 0x01010000


class Blake2(ABC):
    """
    Incremental, optionally keyed BLAKE2 digest.

    Args:
        digest_length: Output length in bytes, 1 to MAX_DIGEST_LENGTH.
            Defaults to MAX_DIGEST_LENGTH.
        key: Optional key, at most MAX_KEY_LENGTH bytes. An empty key gives
            an unkeyed digest. The bytes are copied, so the caller may erase
            its own copy afterwards.

    Raises:
        TypeError: if key is None or not bytes-like.
        ValueError: if digest_length or the key length is out of range.
    """

    ALGORITHM: ClassVar[str]
    BLOCK_LENGTH: ClassVar[int]
    MAX_DIGEST_LENGTH: ClassVar[int]
    MAX_KEY_LENGTH: ClassVar[int]
    _WORD_MASK: ClassVar[int]
    _IV: ClassVar[tuple[int, ...]]

    def __init__(
        self,
        digest_length: int | None = None,
        key: bytes | bytearray | memoryview = b"",
    ) -> None:
        if digest_length is None:
            digest_length = self.MAX_DIGEST_LENGTH
        check_bytes_like(key, "key")
        key = bytearray(key)
        check_argument(
            len(key) <= self.MAX_KEY_LENGTH,
            f"{self.ALGORITHM} key must be at most {self.MAX_KEY_LENGTH} bytes",
        )
        check_argument(
            1 <= digest_length <= self.MAX_DIGEST_LENGTH,
            f"{self.ALGORITHM} digest length must be in [1, {self.MAX_DIGEST_LENGTH}]",
        )
        self._digest_length = digest_length
        self._key = key
        self._buffer = bytearray(self.BLOCK_LENGTH)
        self._h: list[int] = []
        self._t0 = 0  # counter, low word
        self._t1 = 0  # counter, high word
        self._c = 0  # bytes in buffer
        self.reset()

    @property
    def algorithm(self) -> str:
        """Canonical algorithm name, e.g. "BLAKE2b"."""
        return self.ALGORITHM

    @property
    def name(self) -> str:
        return self.ALGORITHM.lower()

    @property
    def length(self) -> int:
        """Digest length in bytes."""
        return self._digest_length

    @property
    def digest_size(self) -> int:
        return self._digest_length

    @property
    def block_size(self) -> int:
        return self.BLOCK_LENGTH

    def copy(self) -> Blake2:
        """Return an independent copy of this digest, key and pending input included."""
        dup = self.__class__.__new__(self.__class__)
        dup._digest_length = self._digest_length
        dup._key = bytearray(self._key)
        dup._buffer = bytearray(self._buffer)
        dup._h = list(self._h)
        dup._t0 = self._t0
        dup._t1 = self._t1
        dup._c = self._c
        return dup

    def reset(self) -> Blake2:
        """Reset the digest. The key is kept and primed as the first block."""
        klen = len(self._key)
        self._t0 = 0
        self._t1 = 0
        self._h = list(self._IV)
        self._h[0] ^= _PARAM_SEQUENTIAL | (klen << 8) | self._digest_length
        self._buffer[:klen] = self._key
        self._buffer[klen:] = bytes(self.BLOCK_LENGTH - klen)
        self._c = self.BLOCK_LENGTH if klen else 0
        return self

    def burn(self) -> Blake2:
        """
        Erase the key and reset, making this instance equivalent to a new
        unkeyed digest of the same length.

        Only the storage held by this instance is overwritten; copies the
        interpreter or the caller may have made are out of reach.
        """
        self._key[:] = bytes(len(self._key))
        self._buffer[:] = bytes(self.BLOCK_LENGTH)  # may hold the key block
        self._key = bytearray()
        return self.reset()

    def update_byte(self, value: int) -> Blake2:
        """Update the digest with a single byte (0-255)."""
        check_argument(0 <= value <= 0xFF, "byte must be in range(0, 256)")
        if self._c == self.BLOCK_LENGTH:
            self._process_buffer(False)
        self._buffer[self._c] = value
        self._c += 1
        return self

    def update(
        self,
        data: bytes | bytearray | memoryview,
        off: int = 0,
        length: int | None = None,
    ) -> Blake2:
        """
        Update the digest with data[off:off + length].

        Args:
            data: Input bytes.
            off: Offset of the first byte to use.
            length: Number of bytes to use; defaults to the rest of data.

        Returns:
            This object.

        Raises:
            TypeError: if data is None or not bytes-like.
            IndexError: if the window is not within data.
        """
        check_bytes_like(data, "data")
        view = memoryview(data).cast("B")
        if length is None:
            length = len(view) - off
        check_bounds(view, off, length)
        end = off + length
        while off < end:
            if self._c == self.BLOCK_LENGTH:
                self._process_buffer(False)
            n = min(self.BLOCK_LENGTH - self._c, end - off)
            self._buffer[self._c : self._c + n] = view[off : off + n]
            self._c += n
            off += n
        return self

    def digest(
        self,
        data: bytes | bytearray | memoryview | None = None,
        off: int = 0,
        length: int | None = None,
    ) -> bytes:
        """
        Optionally update with data, then complete the computation.

        The digest is reset afterwards, so the instance can be reused.

        Returns:
            digest_length bytes.
        """
        if data is not None:
            self.update(data, off, length)
        self._buffer[self._c :] = bytes(self.BLOCK_LENGTH - self._c)
        self._process_buffer(True)
        out = self._encode_state()[: self._digest_length]
        self.reset()
        return out

    def hexdigest(
        self,
        data: bytes | bytearray | memoryview | None = None,
        off: int = 0,
        length: int | None = None,
    ) -> str:
        return self.digest(data, off, length).hex()

    def _process_buffer(self, last: bool) -> None:
        mask = self._WORD_MASK
        self._t0 = (self._t0 + self._c) & mask
        if self._t0 < self._c:  # carry
            self._t1 = (self._t1 + 1) & mask
            check_state(self._t1 != 0, f"{self.ALGORITHM} byte counter overflow")
        self._c = 0
        self._compress(self._buffer, last)
        self._buffer[:] = bytes(self.BLOCK_LENGTH)

    @abstractmethod
    def _compress(self, block: bytearray, last: bool) -> None:
        """Compress one full block into the chaining value."""

    @abstractmethod
    def _encode_state(self) -> bytes:
        """Little-endian encoding of the whole chaining value."""


__all__: tuple[str, ...] = ("Blake2",)
