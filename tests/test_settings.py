from __future__ import annotations

from pathlib import Path

import pytest

from file_manifest.settings import Cfg, load_cfg


def test_load_cfg_none_gives_defaults():
    cfg = load_cfg(None)
    assert cfg == Cfg()
    assert cfg.chunk_bytes == 1024 * 1024
    assert cfg.skip_hidden is False
    assert cfg.atomic_rewrite is True


def test_load_cfg_empty_file_gives_defaults(tmp_path: Path):
    p = tmp_path / "manifest.yaml"
    p.write_text("", encoding="utf-8")
    assert load_cfg(p) == Cfg()


def test_load_cfg_custom_values(tmp_path: Path):
    p = tmp_path / "manifest.yaml"
    p.write_text(
        """
hashing:
  chunk_bytes: 4096
  skip_hidden: true
cleanup:
  atomic_rewrite: false
unrelated:
  ignored: 1
""".strip(),
        encoding="utf-8",
    )

    cfg = load_cfg(str(p))
    assert cfg.chunk_bytes == 4096
    assert cfg.skip_hidden is True
    assert cfg.atomic_rewrite is False


def test_load_cfg_shipped_example_parses():
    p = Path(__file__).resolve().parents[1] / "configs" / "manifest.yaml"
    assert load_cfg(p) == Cfg()


@pytest.mark.parametrize(
    "text, match",
    [
        ("- a\n- b\n", "root"),
        ("hashing: 3\n", "hashing"),
        ("hashing:\n  chunk_bytes: 0\n", "chunk_bytes"),
        ("hashing:\n  chunk_bytes: big\n", "chunk_bytes"),
        ("hashing:\n  skip_hidden: 'yes'\n", "skip_hidden"),
        ("cleanup:\n  atomic_rewrite: 1\n", "atomic_rewrite"),
    ],
)
def test_load_cfg_rejects_bad_values(tmp_path: Path, text: str, match: str):
    p = tmp_path / "bad.yaml"
    p.write_text(text, encoding="utf-8")
    with pytest.raises(ValueError, match=match):
        load_cfg(p)
