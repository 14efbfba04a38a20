"""SHA-256 content hashing for asset collision detection"""

import hashlib
from pathlib import Path


def sha256_file(path: Path) -> str:
    """Return hex-encoded SHA-256 hash of a file's bytes."""
    return hashlib.sha256(path.read_bytes()).hexdigest()
