"""Scoring utilities for manifest targets."""

from __future__ import annotations

from collections import defaultdict
from typing import Callable, Dict, Iterable, List, Mapping, Sequence, Tuple

from .brackets import target_symbol_for_brackets
from .data.manifest import ManifestEntry
from .rle import encode


def _bracket_targets(symbols: Sequence[str]) -> List[str]:
    return [target_symbol_for_brackets(symbols)]


def _rle_targets(symbols: Sequence[str]) -> List[str]:
    return list(encode(symbols))


ORACLES: Dict[str, Callable[[Sequence[str]], List[str]]] = {
    "brackets": _bracket_targets,
    "rle": _rle_targets,
}


def predict_target_symbols(entry: ManifestEntry) -> List[str]:
    """Return the oracle output symbols for ``entry`` based on its task."""
    oracle = ORACLES.get(entry.task or "")
    if oracle is None:
        raise ValueError(
            f"Unsupported task {entry.task!r} for {entry.example_id}; available: {sorted(ORACLES)}"
        )
    return oracle(entry.symbols)


def exact_match(pred_symbols: Iterable[str], gold_symbols: Iterable[str]) -> float:
    """Return ``1.0`` when predictions exactly match the gold sequence, else ``0.0``."""
    return 1.0 if list(pred_symbols) == list(gold_symbols) else 0.0


def score_entries(entries: Iterable[ManifestEntry]) -> Dict[str, Tuple[float, int]]:
    """Audit stored labels: recompute each target with the oracle, grouped by split.

    This is a consistency check on the manifest, not a model metric. Manifests
    built by ``charseq.data`` derive their targets from the same oracles, so
    they score 1.0 unless edited or corrupted. Score model output with
    :func:`score_predictions`. Entries without ``target_symbols`` count as misses.
    """
    totals: Dict[str, Tuple[float, int]] = defaultdict(lambda: (0.0, 0))
    for entry in entries:
        pred = predict_target_symbols(entry)
        matches, count = totals[entry.split]
        totals[entry.split] = (matches + exact_match(pred, entry.target_symbols or []), count + 1)
    return dict(totals)


def score_predictions(
    entries: Iterable[ManifestEntry],
    predictions: Mapping[str, Sequence[str]],
) -> Dict[str, Tuple[float, int]]:
    """Exact match of predicted symbols against the oracle, grouped by split.

    ``predictions`` maps ``example_id`` to predicted symbols. An entry with no
    prediction counts as a miss.
    """
    totals: Dict[str, Tuple[float, int]] = defaultdict(lambda: (0.0, 0))
    for entry in entries:
        pred = predictions.get(entry.example_id)
        hit = 0.0 if pred is None else exact_match(pred, predict_target_symbols(entry))
        matches, count = totals[entry.split]
        totals[entry.split] = (matches + hit, count + 1)
    return dict(totals)


__all__ = ["ORACLES", "exact_match", "predict_target_symbols", "score_entries", "score_predictions"]
