#!/usr/bin/env python3
"""Quick I2P Base64 benchmark - standard library vs NumPy path"""
import os
import sys
import time
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


DATA = os.urandom(64 * 1024)
ITERATIONS = 200


def bench(threshold):
    from i2pkeys.main import i2pkeys

    previous = i2pkeys.FAST_CODEC_THRESHOLD
    i2pkeys.FAST_CODEC_THRESHOLD = threshold
    try:
        start = time.perf_counter()
        for _ in range(ITERATIONS):
            encoded = i2pkeys.i2p_b64encode(DATA)
            i2pkeys.i2p_b64decode(encoded)
        elapsed = time.perf_counter() - start
    finally:
        i2pkeys.FAST_CODEC_THRESHOLD = previous
    return elapsed, encoded


def main():
    from i2pkeys.main import i2pkeys

    print(f"Benchmarking I2P Base64 encode+decode ({ITERATIONS} iterations)...")
    print(f"Input size: {len(DATA)} bytes\n")

    print("stdlib ...")
    std_time, std_result = bench(sys.maxsize)
    print(f"  Time: {std_time:.3f}s ({std_time / ITERATIONS * 1000:.2f} ms/op)")

    if i2pkeys.np is None:
        print("\nNumPy not installed; skipping vectorised path")
        return 0

    print("numpy ...")
    np_time, np_result = bench(1)
    print(f"  Time: {np_time:.3f}s ({np_time / ITERATIONS * 1000:.2f} ms/op)")
    print(f"  Output sample: {np_result[:60]}...")

    if np_result != std_result:
        print("\n❌ Outputs differ", file=sys.stderr)
        return 1
    print(f"\n✅ Outputs match (speedup x{std_time / np_time:.1f})")
    return 0


if __name__ == '__main__':
    sys.exit(main())
