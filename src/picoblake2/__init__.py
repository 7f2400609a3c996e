"""
BLAKE2b and BLAKE2s (RFC 7693): incremental, optionally keyed hashing.
Pure Python; no dependencies beyond the standard library.
"""

from .__about__ import __version__
from .hashes import ALGORITHMS, Blake2, Blake2b, Blake2s, blake2b, blake2s, new

__all__: tuple[str, ...] = (
    # About
    "__version__",
    # Engines
    "Blake2",
    "Blake2b",
    "Blake2s",
    # One-shot helpers
    "blake2b",
    "blake2s",
    # Lookup by name
    "ALGORITHMS",
    "new",
)
