#!/usr/bin/env python3
"""
Generate sample I2P key files for trying out the converter CLI.
The key material is random bytes, not real I2P keys.
"""
import os
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from i2pkeys.main import i2pkeys

# 387 destination bytes encode to exactly 516 characters
DESTINATION_BYTES = 387
PRIVATE_BYTES = 276


def sample_files():
    """Return {file name: content bytes} for every supported input shape."""
    destination = os.urandom(DESTINATION_BYTES)
    full = destination + os.urandom(PRIVATE_BYTES)
    complete_key = i2pkeys.i2p_b64encode(full)
    canonical = f"{i2pkeys.i2p_b64encode(destination)}\n{complete_key}\n"
    noisy = f"# exported key\n\n{complete_key[:300]} \t{complete_key[300:]}\n"
    return {
        "binary.dat": full,
        "single_line.txt": complete_key.encode("ascii"),
        "two_line.txt": canonical.encode("ascii"),
        "noisy.txt": noisy.encode("ascii"),
        "too_short.dat": os.urandom(100),
    }


def main():
    out_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else REPO_ROOT / "sample_keys"
    out_dir.mkdir(parents=True, exist_ok=True)

    print(f"Writing sample key files to {out_dir}")
    for name, content in sample_files().items():
        path = out_dir / name
        path.write_bytes(content)
        state = "two-line" if i2pkeys.is_correct_format(content) else "needs conversion"
        print(f"  ✓ {name}: {len(content)} bytes ({state})")

    print("\nTry:")
    print(f"  python -m i2pkeys convert {out_dir / 'binary.dat'} -v")
    print(f"  python -m i2pkeys clean {out_dir / 'noisy.txt'}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
