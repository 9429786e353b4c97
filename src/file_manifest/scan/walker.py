from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator


def _is_hidden(rel: Path) -> bool:
    return any(part.startswith(".") for part in rel.parts)


def iter_files(root: Path, *, skip_hidden: bool = False, exclude: Iterable[Path] = ()) -> Iterator[Path]:
    """
    Yield every regular file under root (recursively), sorted.

    Yielded paths are `root / <relative path>`, so they stay relative when
    root is relative. Symlinks to regular files count as files.
    """
    if not root.exists():
        raise FileNotFoundError(f"directory not found: {root}")
    if not root.is_dir():
        raise NotADirectoryError(f"not a directory: {root}")

    excluded = {Path(p).resolve() for p in exclude}

    for p in sorted(root.rglob("*")):
        if not p.is_file():
            continue
        if skip_hidden and _is_hidden(p.relative_to(root)):
            continue
        if excluded and p.resolve() in excluded:
            continue
        yield p
