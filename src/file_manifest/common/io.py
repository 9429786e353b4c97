from __future__ import annotations

import os
from pathlib import Path


def safe_replace(src_tmp: Path, dst: Path) -> None:
    """Atomic replace on the same volume. Caller ensures src_tmp is complete."""
    dst.parent.mkdir(parents=True, exist_ok=True)
    os.replace(str(src_tmp), str(dst))
