"""
BLAKE2 usage: one-shot, streaming, keyed (MAC) and lookup by name.

Run from repo root: PYTHONPATH=src python examples/blake2.py
"""

import os
import sys

if getattr(sys, "frozen", False) is False:
    _root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    _src = os.path.join(_root, "src")
    if _src not in sys.path:
        sys.path.insert(0, _src)

from picoblake2 import Blake2b, blake2b, blake2s, new

print("blake2b(b'abc')     =", blake2b(b"abc").hex())
print("blake2s(b'abc')     =", blake2s(b"abc").hex())

# Streaming: chunks give the same result as one call
h = Blake2b(32)
for chunk in (b"message ", b"to ", b"hash"):
    h.update(chunk)
print("streamed (32 bytes) =", h.hexdigest())

# Keyed: a MAC without HMAC
key = os.urandom(32)
mac = Blake2b(16, key)
tag = mac.digest(b"authenticated message")
print("tag                 =", tag.hex())
mac.burn()  # forget the key

# Selected at runtime by name
for name in ("BLAKE2b", "BLAKE2s"):
    d = new(name, 20)
    print(f"{d.algorithm:<8} (20 bytes)  =", d.hexdigest(b"abc"))
