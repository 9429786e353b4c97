from __future__ import annotations

import hashlib
from pathlib import Path

DEFAULT_CHUNK_BYTES = 1024 * 1024


def md5_file(path: Path, chunk_bytes: int = DEFAULT_CHUNK_BYTES) -> str:
    h = hashlib.md5()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(chunk_bytes), b""):
            h.update(chunk)
    return h.hexdigest()
