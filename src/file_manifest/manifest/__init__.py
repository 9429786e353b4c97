from file_manifest.manifest.io import (
    ManifestFormatError,
    append_record,
    iter_records,
    load_manifest,
    write_manifest,
)
from file_manifest.manifest.record import ManifestRecord

__all__ = [
    "ManifestFormatError",
    "ManifestRecord",
    "append_record",
    "iter_records",
    "load_manifest",
    "write_manifest",
]
