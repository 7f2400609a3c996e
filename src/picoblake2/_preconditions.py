"""
Argument, bounds and state checks shared by the codec and the hash engines.
"""

from __future__ import annotations

from typing import Any


def check_argument(condition: bool, message: str = "invalid argument") -> None:
    """Raise ValueError if condition is false."""
    if not condition:
        raise ValueError(message)


def check_bounds(buf: Any, off: int, length: int) -> None:
    """
    Check that buf[off:off + length] lies within buf.

    Args:
        buf: Any sized sequence (bytes, bytearray, memoryview, ...).
        off: Start offset, inclusive.
        length: Number of items starting at off.

    Raises:
        IndexError: if off or length is negative, or if the window ends
            past the end of buf.
    """
    if off < 0 or length < 0 or off + length > len(buf):
        raise IndexError(
            f"range [{off}, {off}+{length}) out of bounds for length {len(buf)}"
        )


def check_state(condition: bool, message: str = "illegal state") -> None:
    """Raise RuntimeError if condition is false."""
    if not condition:
        raise RuntimeError(message)


def check_not_none(value: Any, name: str) -> None:
    """Raise TypeError if value is None."""
    if value is None:
        raise TypeError(f"{name} must not be None")


def check_bytes_like(value: Any, name: str) -> None:
    """Raise TypeError unless value supports the buffer protocol."""
    check_not_none(value, name)
    # str and int are rejected even though bytes(int) would "work"
    if not isinstance(value, (bytes, bytearray, memoryview)):
        try:
            memoryview(value)
        except TypeError:
            raise TypeError(
                f"{name} must be bytes-like, not {type(value).__name__}"
            ) from None


__all__: tuple[str, ...] = (
    "check_argument",
    "check_bounds",
    "check_bytes_like",
    "check_not_none",
    "check_state",
)
