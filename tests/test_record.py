from __future__ import annotations

import orjson
import pytest

from file_manifest.manifest.record import ManifestRecord, from_json_obj, to_json_line


def test_record_line_roundtrip():
    rec = ManifestRecord(file="data/a b/ü.txt", md5="5d41402abc4b2a76b9719d911017c592", size=5)
    line = to_json_line(rec)

    assert line.endswith(b"\n")
    assert from_json_obj(orjson.loads(line)) == rec


def test_record_line_layout_is_compact_and_ordered():
    rec = ManifestRecord(file="x", md5="abc", size=0)
    assert to_json_line(rec) == b'{"file":"x","md5":"abc","size":0}\n'


def test_from_json_obj_ignores_extra_keys():
    rec = from_json_obj({"file": "x", "md5": "abc", "size": 3, "extra": True})
    assert rec == ManifestRecord(file="x", md5="abc", size=3)


@pytest.mark.parametrize(
    "obj, field",
    [
        ([1, 2], "object"),
        ({"md5": "abc", "size": 1}, "file"),
        ({"file": "", "md5": "abc", "size": 1}, "file"),
        ({"file": "x", "md5": 5, "size": 1}, "md5"),
        ({"file": "x", "md5": "abc", "size": -1}, "size"),
        ({"file": "x", "md5": "abc", "size": "1"}, "size"),
        ({"file": "x", "md5": "abc", "size": True}, "size"),
    ],
)
def test_from_json_obj_rejects_bad_rows(obj, field):
    with pytest.raises(ValueError, match=field):
        from_json_obj(obj)
