# src/file_manifest/pipeline/hashing.py
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

from file_manifest.common.hashing import md5_file
from file_manifest.manifest.io import append_record, load_manifest
from file_manifest.manifest.record import ManifestRecord
from file_manifest.scan.walker import iter_files
from file_manifest.settings import Cfg


def run_hashing(directory: str | Path, output: str | Path, cfg: Optional[Cfg] = None) -> Dict[str, Any]:
    """
    Scan `directory` and append a record for every new or resized file.

    Files whose size matches the latest manifest record are skipped without
    hashing, so a same-size content change goes unnoticed. Records are
    appended one at a time; a failure part-way keeps what was written.
    """
    cfg = cfg or Cfg()
    root = Path(directory)
    out_path = Path(output)

    existing = load_manifest(out_path)

    scanned = 0
    hashed = 0

    # the manifest may live inside the scanned tree
    for p in iter_files(root, skip_hidden=cfg.skip_hidden, exclude=[out_path]):
        scanned += 1
        key = str(p)
        size = p.stat().st_size

        prev = existing.get(key)
        if prev is not None and prev.size == size:
            continue

        print(f"Processing {key}...")
        rec = ManifestRecord(file=key, md5=md5_file(p, cfg.chunk_bytes), size=size)
        append_record(out_path, rec)
        existing[key] = rec
        hashed += 1

    return {
        "mode": "hashing",
        "directory": str(root),
        "output": str(out_path),
        "scanned": scanned,
        "hashed": hashed,
        "skipped": scanned - hashed,
    }
