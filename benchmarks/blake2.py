"""
Benchmark BLAKE2b / BLAKE2s: pure Python (picoblake2) vs hashlib (C).
Compares time per call and peak memory (tracemalloc) per run.

Run from repo root:

  PYTHONPATH=src python benchmarks/blake2.py

Or after pip install -e .:

  python benchmarks/blake2.py
"""

from __future__ import annotations

import hashlib
import os
import sys
import time
import tracemalloc

# Prefer repo src on path so we use local code
_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
_src = os.path.join(_root, "src")
if _src not in sys.path:
    sys.path.insert(0, _src)

from picoblake2 import blake2b, blake2s

# Sample payloads (bytes); kept small so benchmark stays fast
SAMPLES = [
    (b"", "empty"),
    (b"hello", "short"),
    (b"x" * 64, "64 B"),
    (b"x" * 256, "256 B"),
    (b"x" * 1024, "1 KiB"),
]

PAIRS = [
    ("BLAKE2b", blake2b, lambda data: hashlib.blake2b(data).digest()),
    ("BLAKE2s", blake2s, lambda data: hashlib.blake2s(data).digest()),
]


# Fewer iterations for larger payloads so run stays quick
def _n_time(data_len: int) -> int:
    if data_len <= 256:
        return 500
    return max(50, 500 // (1 + data_len // 256))


def _n_mem(data_len: int) -> int:
    if data_len <= 256:
        return 200
    return max(20, 200 // (1 + data_len // 256))


def _time_per_call(fn, data: bytes, n: int, warmup: int = 10) -> float:
    for _ in range(warmup):
        fn(data)
    start = time.perf_counter()
    for _ in range(n):
        fn(data)
    return (time.perf_counter() - start) / n


def _peak_memory_kb(fn, data: bytes, n: int) -> float:
    """Peak traced memory (KiB) during n calls. Resets peak before run if available."""
    tracemalloc.start()
    if hasattr(tracemalloc, "reset_peak"):
        tracemalloc.reset_peak()
    for _ in range(n):
        fn(data)
    current, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()
    return peak / 1024.0


def _run(label: str, fn_py, fn_c) -> None:
    print(f"Benchmark: {label}  pure Python vs hashlib")
    print()

    # Sanity: same digest
    msg = b"test"
    a = fn_py(msg)
    b = fn_c(msg)
    assert a == b, f"digest mismatch: {a.hex()} vs {b.hex()}"
    print(f"  Sanity check: both give {a.hex()[:32]}...")
    print()

    print("  --- Time per call (ms) ---")
    print(
        f"  {'size':<10} {'n':<8} {'Python (ms)':<14} {'hashlib (ms)':<14} {'slowdown':<10}"
    )
    print("  " + "-" * 58)
    for data, size in SAMPLES:
        n = _n_time(len(data))
        t_py = _time_per_call(fn_py, data, n=n) * 1000
        t_c = _time_per_call(fn_c, data, n=n) * 1000
        slowdown = t_py / t_c if t_c > 0 else 0
        print(f"  {size:<10} {n:<8} {t_py:<14.4f} {t_c:<14.4f} {slowdown:.1f}x")
    print()

    print("  --- Peak memory (KiB) during run ---")
    print(f"  {'size':<10} {'n':<8} {'Python (KiB)':<14} {'hashlib (KiB)':<14}")
    print("  " + "-" * 48)
    for data, size in SAMPLES:
        n = _n_mem(len(data))
        mem_py = _peak_memory_kb(fn_py, data, n=n)
        mem_c = _peak_memory_kb(fn_c, data, n=n)
        print(f"  {size:<10} {n:<8} {mem_py:<14.2f} {mem_c:<14.2f}")
    print()


def main() -> None:
    for label, fn_py, fn_c in PAIRS:
        _run(label, fn_py, fn_c)


if __name__ == "__main__":
    main()
