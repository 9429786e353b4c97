# src/file_manifest/manifest/io.py
from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path
from typing import Dict, Iterable, Iterator, Tuple

import orjson

from file_manifest.common.io import safe_replace
from file_manifest.manifest.record import ManifestRecord, from_json_obj, to_json_line


class ManifestFormatError(ValueError):
    """A manifest line could not be decoded into a record."""

    def __init__(self, path: Path, line_no: int, reason: str) -> None:
        self.path = path
        self.line_no = line_no
        self.reason = reason
        super().__init__(f"{path}:{line_no}: {reason}")


def iter_records(path: Path) -> Iterator[Tuple[int, ManifestRecord]]:
    """
    Yield (line_no, record) for every non-blank line, in file order.

    Fail-fast: the first malformed line raises ManifestFormatError.
    Line numbers are 1-based.
    """
    with path.open("rb") as f:
        for line_no, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                obj = orjson.loads(line)
            except orjson.JSONDecodeError as e:
                raise ManifestFormatError(path, line_no, f"invalid JSON: {e}") from e
            try:
                rec = from_json_obj(obj)
            except ValueError as e:
                raise ManifestFormatError(path, line_no, str(e)) from e
            yield line_no, rec


def load_manifest(path: Path) -> Dict[str, ManifestRecord]:
    """Latest record per path. A missing manifest is an empty one."""
    if not path.exists():
        return {}
    out: Dict[str, ManifestRecord] = {}
    for _, rec in iter_records(path):
        out[rec.file] = rec
    return out


def append_record(path: Path, record: ManifestRecord) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("ab") as f:
        f.write(to_json_line(record))


def write_manifest(path: Path, records: Iterable[ManifestRecord], *, atomic: bool = True) -> int:
    """
    Rewrite the whole manifest, one line per record in iteration order.

    atomic=True writes a sibling temp file and renames it over `path`;
    atomic=False truncates `path` in place. Returns the number of lines written.
    """
    if path.is_symlink():
        # replace the link target, not the link
        path = path.resolve()
    path.parent.mkdir(parents=True, exist_ok=True)

    if not atomic:
        n = 0
        with path.open("wb") as f:
            for rec in records:
                f.write(to_json_line(rec))
                n += 1
        return n

    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent))
    tmp = Path(tmp_name)
    try:
        n = 0
        with os.fdopen(fd, "wb") as f:
            for rec in records:
                f.write(to_json_line(rec))
                n += 1
            f.flush()
            os.fsync(f.fileno())
        if path.exists():
            os.chmod(tmp, stat.S_IMODE(path.stat().st_mode))
        safe_replace(tmp, path)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise
    return n
