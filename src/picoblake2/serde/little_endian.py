"""
Little-endian packing of 32-bit and 64-bit words to and from bytes.
"""

from __future__ import annotations

from .._preconditions import check_bounds

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


def encode32(n: int) -> bytes:
    """Encode the low 32 bits of n as 4 little-endian bytes."""
    return (n & _MASK32).to_bytes(4, "little")


def encode64(n: int) -> bytes:
    """Encode the low 64 bits of n as 8 little-endian bytes."""
    return (n & _MASK64).to_bytes(8, "little")


def encode32_into(n: int, out: bytearray, off: int = 0) -> None:
    """
    Write the low 32 bits of n into out[off:off + 4], little-endian.

    Raises:
        IndexError: if out has fewer than 4 bytes starting at off.
    """
    check_bounds(out, off, 4)
    out[off : off + 4] = encode32(n)


def encode64_into(n: int, out: bytearray, off: int = 0) -> None:
    """
    Write the low 64 bits of n into out[off:off + 8], little-endian.

    Raises:
        IndexError: if out has fewer than 8 bytes starting at off.
    """
    check_bounds(out, off, 8)
    out[off : off + 8] = encode64(n)


def decode32(buf: bytes | bytearray | memoryview, off: int = 0) -> int:
    """
    Decode 4 little-endian bytes at off into an unsigned 32-bit integer.

    Raises:
        IndexError: if buf has fewer than 4 bytes starting at off.
    """
    check_bounds(buf, off, 4)
    return int.from_bytes(buf[off : off + 4], "little")


def decode64(buf: bytes | bytearray | memoryview, off: int = 0) -> int:
    """
    Decode 8 little-endian bytes at off into an unsigned 64-bit integer.

    Raises:
        IndexError: if buf has fewer than 8 bytes starting at off.
    """
    check_bounds(buf, off, 8)
    return int.from_bytes(buf[off : off + 8], "little")


def decode32_words(
    buf: bytes | bytearray | memoryview, count: int, off: int = 0
) -> list[int]:
    """Decode count consecutive 32-bit words starting at off."""
    check_bounds(buf, off, 4 * count)
    return [
        int.from_bytes(buf[i : i + 4], "little") for i in range(off, off + 4 * count, 4)
    ]


def decode64_words(
    buf: bytes | bytearray | memoryview, count: int, off: int = 0
) -> list[int]:
    """Decode count consecutive 64-bit words starting at off."""
    check_bounds(buf, off, 8 * count)
    return [
        int.from_bytes(buf[i : i + 8], "little") for i in range(off, off + 8 * count, 8)
    ]


__all__: tuple[str, ...] = (
    "decode32",
    "decode32_words",
    "decode64",
    "decode64_words",
    "encode32",
    "encode32_into",
    "encode64",
    "encode64_into",
)
