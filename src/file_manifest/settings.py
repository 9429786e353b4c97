# src/file_manifest/settings.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from file_manifest.common.hashing import DEFAULT_CHUNK_BYTES


@dataclass
class Cfg:
    # hashing
    chunk_bytes: int = DEFAULT_CHUNK_BYTES
    skip_hidden: bool = False

    # cleanup
    atomic_rewrite: bool = True


def _section(obj: Dict[str, Any], name: str) -> Dict[str, Any]:
    sec = obj.get(name, {})
    if sec is None:
        return {}
    if not isinstance(sec, dict):
        raise ValueError(f"config section '{name}' must be a mapping")
    return sec


def _as_bool(v: Any, key: str) -> bool:
    if isinstance(v, bool):
        return v
    raise ValueError(f"config key '{key}' must be true/false, got {v!r}")


def load_cfg(path: Optional[str | Path] = None) -> Cfg:
    """
    Load settings YAML into Cfg. path=None -> all defaults.

    Unknown sections/keys are ignored.
    """
    if path is None:
        return Cfg()

    obj = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(obj, dict):
        raise ValueError("config root must be a mapping (YAML dict)")

    hashing = _section(obj, "hashing")
    cleanup = _section(obj, "cleanup")
    defaults = Cfg()

    chunk_bytes = hashing.get("chunk_bytes", defaults.chunk_bytes)
    if isinstance(chunk_bytes, bool) or not isinstance(chunk_bytes, int) or chunk_bytes <= 0:
        raise ValueError(f"config key 'hashing.chunk_bytes' must be a positive integer, got {chunk_bytes!r}")

    return Cfg(
        chunk_bytes=chunk_bytes,
        skip_hidden=_as_bool(hashing.get("skip_hidden", defaults.skip_hidden), "hashing.skip_hidden"),
        atomic_rewrite=_as_bool(cleanup.get("atomic_rewrite", defaults.atomic_rewrite), "cleanup.atomic_rewrite"),
    )
