"""Serialization / deserialization (serde): little-endian word codec."""

from .little_endian import (decode32, decode32_words, decode64, decode64_words,
                            encode32, encode32_into, encode64, encode64_into)

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
