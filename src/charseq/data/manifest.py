"""JSON Lines manifests of labelled character-sequence examples."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional


@dataclass
class ManifestEntry:
    """One labelled example: input symbols plus the expected output symbols."""

    split: str
    symbols: List[str]
    length: int
    difficulty_tag: str
    example_id: str
    seed: int
    sequence_seed: int
    target_symbols: Optional[List[str]] = None
    # "brackets" or "rle"; selects the oracle in charseq.scorer.
    task: Optional[str] = None

    def to_record(self) -> Dict[str, Any]:
        """Plain dict for one manifest line; unset optional fields are left out."""
        return {name: value for name, value in asdict(self).items() if value is not None}

    @classmethod
    def from_record(cls, record: Any) -> "ManifestEntry":
        if not isinstance(record, dict):
            raise ValueError(f"expected a JSON object, got {type(record).__name__}")
        extra = sorted(set(record) - {f.name for f in fields(cls)})
        if extra:
            raise ValueError(f"unexpected fields {extra}")
        try:
            return cls(**record)
        except TypeError as exc:
            raise ValueError(str(exc)) from exc


def iter_manifest(path: str | Path) -> Iterator[ManifestEntry]:
    """Yield entries line by line; blank lines are skipped."""
    with Path(path).open("r", encoding="utf-8") as f:
        for line_no, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                yield ManifestEntry.from_record(json.loads(line))
            except ValueError as exc:
                raise ValueError(f"Invalid manifest entry at {path}:{line_no}: {exc}") from exc


def read_manifest(path: str | Path, split: Optional[str] = None) -> List[ManifestEntry]:
    """Load a manifest, keeping only ``split`` when one is given."""
    return [entry for entry in iter_manifest(path) if split is None or entry.split == split]


def write_manifest(entries: Iterable[ManifestEntry], path: str | Path) -> int:
    """Write entries as JSON Lines, creating parent directories. Returns the count."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    written = 0
    with target.open("w", encoding="utf-8") as f:
        for entry in entries:
            print(json.dumps(entry.to_record(), ensure_ascii=False), file=f)
            written += 1
    return written


__all__ = ["ManifestEntry", "iter_manifest", "read_manifest", "write_manifest"]
