"""Score a manifest: audit its stored targets, or grade a prediction file against it.

Prediction files are JSON Lines with one ``{"example_id": ..., "pred_symbols": [...]}``
object per manifest entry. Predictions are graded against the task oracle,
not against the stored targets.
"""

from __future__ import annotations

import argparse
import json
from collections import Counter
from pathlib import Path
from typing import Dict, List, Sequence, Tuple

from charseq.data import ManifestEntry, read_manifest
from charseq.data.make_bracket_manifest import DEFAULT_SPLIT_SIZES
from charseq.scorer import score_entries, score_predictions

SPLIT_ORDER: list[str] = list(DEFAULT_SPLIT_SIZES)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Score a charseq manifest or predictions for it.")
    parser.add_argument("--manifest", type=Path, required=True, help="Manifest JSONL")
    parser.add_argument(
        "--preds",
        type=Path,
        default=None,
        help="Prediction JSONL keyed by example_id. Without it the manifest's own targets are audited.",
    )
    parser.add_argument("--split", type=str, default=None, help="Only score this split")
    parser.add_argument("--limit", type=int, default=None, help="Score at most N entries per split")
    return parser


def load_entries(manifest: Path, split: str | None, limit: int | None) -> List[ManifestEntry]:
    if not manifest.is_file():
        raise SystemExit(f"Manifest not found: {manifest}")
    try:
        entries = read_manifest(manifest, split=split)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc
    if not entries:
        raise SystemExit(f"No entries for {split or 'any split'} in {manifest}")
    if limit is None:
        return entries

    taken: Counter = Counter()
    kept: List[ManifestEntry] = []
    for entry in entries:
        if taken[entry.split] < limit:
            kept.append(entry)
            taken[entry.split] += 1
    return kept


def load_predictions(path: Path) -> Dict[str, List[str]]:
    """Map example_id to predicted symbols; malformed or repeated lines exit."""
    if not path.is_file():
        raise SystemExit(f"Predictions file not found: {path}")
    predictions: Dict[str, List[str]] = {}
    with path.open("r", encoding="utf-8") as f:
        for line_no, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                record = json.loads(line)
                example_id, symbols = record["example_id"], list(record["pred_symbols"])
            except (ValueError, KeyError, TypeError) as exc:
                raise SystemExit(f"Invalid prediction at {path}:{line_no}: {exc!r}") from exc
            if example_id in predictions:
                raise SystemExit(f"Duplicate prediction for {example_id} at {path}:{line_no}")
            predictions[example_id] = symbols
    return predictions


def format_report(totals: Dict[str, Tuple[float, int]]) -> Tuple[List[str], float]:
    """Per-split lines in canonical split order, then the overall line."""
    rank = {split: idx for idx, split in enumerate(SPLIT_ORDER)}
    lines = []
    for split in sorted(totals, key=lambda s: (rank.get(s, len(rank)), s)):
        matches, count = totals[split]
        lines.append(f"[{split}] Exact Match: {matches / count:.4f} ({count} samples)")

    total_matches = sum(m for m, _ in totals.values())
    total_count = sum(c for _, c in totals.values())
    overall = total_matches / total_count if total_count else 0.0
    lines.append(f"[overall] Exact Match: {overall:.4f} ({total_count} samples)")
    return lines, overall


def main(argv: Sequence[str] | None = None) -> float:
    args = build_parser().parse_args(argv)
    entries = load_entries(args.manifest, args.split, args.limit)

    try:
        if args.preds is None:
            totals = score_entries(entries)
        else:
            repeated = sorted(k for k, n in Counter(e.example_id for e in entries).items() if n > 1)
            if repeated:
                raise SystemExit(f"Manifest example_ids are not unique: {repeated[:5]}")
            predictions = load_predictions(args.preds)
            missing = sum(1 for e in entries if e.example_id not in predictions)
            if missing:
                print(f"{missing} entries had no prediction and count as misses")
            totals = score_predictions(entries, predictions)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    lines, overall = format_report(totals)
    for line in lines:
        print(line)
    return overall


if __name__ == "__main__":
    main()
