# src/file_manifest/pipeline/run.py
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

from file_manifest.pipeline.cleanup import run_cleanup
from file_manifest.pipeline.hashing import run_hashing
from file_manifest.settings import Cfg

MODES = ("hashing", "cleanup")


def run_pipeline(
    mode: str,
    output: str | Path,
    directory: Optional[str | Path] = None,
    cfg: Optional[Cfg] = None,
) -> Dict[str, Any]:
    """
    Dispatch one pipeline run. Returns the pipeline's summary dict.
    """
    mode = (mode or "").lower()
    cfg = cfg or Cfg()

    if mode == "hashing":
        if directory is None:
            raise ValueError("hashing mode requires a directory")
        res = run_hashing(directory, output, cfg)
        print(
            f"[HASHING DONE] directory={res['directory']} output={res['output']} "
            f"scanned={res['scanned']} hashed={res['hashed']} skipped={res['skipped']}"
        )
        return res

    if mode == "cleanup":
        res = run_cleanup(output, cfg)
        print(
            f"[CLEANUP DONE] output={res['output']} read={res['read']} kept={res['kept']} "
            f"removed={res['removed']} duplicates={res['duplicates']}"
        )
        return res

    raise ValueError(f"unknown mode: {mode!r} (expected one of {', '.join(MODES)})")
