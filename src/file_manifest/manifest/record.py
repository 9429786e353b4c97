# src/file_manifest/manifest/record.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

import orjson


@dataclass(frozen=True)
class ManifestRecord:
    file: str
    md5: str
    size: int

    def to_dict(self) -> Dict[str, Any]:
        # key order is part of the on-disk format
        return {"file": self.file, "md5": self.md5, "size": self.size}


def to_json_line(record: ManifestRecord) -> bytes:
    return orjson.dumps(record.to_dict()) + b"\n"


def from_json_obj(obj: Any) -> ManifestRecord:
    """
    Build a record from one decoded JSON line.

    Raises ValueError naming the first bad field. Extra keys are ignored.
    """
    if not isinstance(obj, dict):
        raise ValueError(f"manifest row must be an object, got {type(obj).__name__}")

    file = obj.get("file")
    if not isinstance(file, str) or not file:
        raise ValueError("manifest row field 'file' must be a non-empty string")

    md5 = obj.get("md5")
    if not isinstance(md5, str):
        raise ValueError(f"manifest row field 'md5' must be a string (file={file})")

    size = obj.get("size")
    # bool is an int subclass
    if isinstance(size, bool) or not isinstance(size, int) or size < 0:
        raise ValueError(f"manifest row field 'size' must be a non-negative integer (file={file})")

    return ManifestRecord(file=file, md5=md5, size=size)
