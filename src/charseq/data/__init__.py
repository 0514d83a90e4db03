"""Dataset manifests for bracket and run-length examples."""

from .make_bracket_manifest import build_bracket_manifest
from .make_rle_manifest import build_rle_manifest
from .manifest import ManifestEntry, iter_manifest, read_manifest, write_manifest

__all__ = [
    "ManifestEntry",
    "build_bracket_manifest",
    "build_rle_manifest",
    "iter_manifest",
    "read_manifest",
    "write_manifest",
]
