"""Hash functions: BLAKE2b, BLAKE2s, and lookup by algorithm name."""

from __future__ import annotations

from types import MappingProxyType

from .._preconditions import check_argument
from ._blake2 import Blake2
from .blake2b import Blake2b, blake2b
from .blake2s import Blake2s, blake2s

ALGORITHMS = MappingProxyType(
    {cls.ALGORITHM: cls for cls in (Blake2b, Blake2s)}
)


def new(
    algorithm: str,
    digest_length: int | None = None,
    key: bytes | bytearray | memoryview = b"",
) -> Blake2:
    """
    Create a digest by algorithm name ("BLAKE2b" or "BLAKE2s", any case).

    Args:
        algorithm: Algorithm name.
        digest_length: Output length in bytes; defaults to the maximum.
        key: Optional key.

    Raises:
        ValueError: for an unknown algorithm name.
    """
    by_name = {name.lower(): cls for name, cls in ALGORITHMS.items()}
    cls = by_name.get(str(algorithm).lower())
    check_argument(cls is not None, f"unsupported hash algorithm: {algorithm!r}")
    return cls(digest_length, key)


__all__: tuple[str, ...] = (
    "ALGORITHMS",
    "Blake2",
    "Blake2b",
    "Blake2s",
    "blake2b",
    "blake2s",
    "new",
)
