import os
import sys
from pathlib import Path

# Ensure the 'src' directory is on sys.path for imports in tests
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

# Pin the default hash so expected digests below are stable
os.environ.setdefault("MERKLE_HASH_ALGORITHM", "sha3_256")
os.environ.setdefault("MERKLE_MAX_PROOF_DEPTH", "64")
