# src/file_manifest/pipeline/cleanup.py
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, Optional

from file_manifest.manifest.io import iter_records, write_manifest
from file_manifest.manifest.record import ManifestRecord
from file_manifest.settings import Cfg


def compact_records(
    records: Iterable[ManifestRecord],
    exists: Callable[[str], bool] = os.path.exists,
    stats: Optional[Dict[str, int]] = None,
) -> Dict[str, ManifestRecord]:
    """
    Fold records in file order into one live record per path.

    - path gone from disk  -> dropped
    - path seen before     -> later record wins, keeps first position
    """
    latest: Dict[str, ManifestRecord] = {}
    counts = stats if stats is not None else {}
    counts.setdefault("read", 0)
    counts.setdefault("removed", 0)
    counts.setdefault("duplicates", 0)

    for rec in records:
        counts["read"] += 1
        if not exists(rec.file):
            print(f"Entry removed for deleted file {rec.file}")
            counts["removed"] += 1
            continue
        if rec.file in latest:
            print(f"Duplicate entry resolved for {rec.file}")
            counts["duplicates"] += 1
        latest[rec.file] = rec

    return latest


def run_cleanup(output: str | Path, cfg: Optional[Cfg] = None) -> Dict[str, Any]:
    cfg = cfg or Cfg()
    out_path = Path(output)

    if not out_path.exists():
        raise FileNotFoundError(f"manifest not found: {out_path}")

    stats: Dict[str, int] = {}
    # fully read before rewriting the same file
    latest = compact_records((rec for _, rec in iter_records(out_path)), stats=stats)
    kept = write_manifest(out_path, latest.values(), atomic=cfg.atomic_rewrite)

    return {
        "mode": "cleanup",
        "output": str(out_path),
        "read": stats["read"],
        "kept": kept,
        "removed": stats["removed"],
        "duplicates": stats["duplicates"],
    }
