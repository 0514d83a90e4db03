from __future__ import annotations

import pytest

from charseq.data import ManifestEntry, build_bracket_manifest, build_rle_manifest
from charseq.scorer import exact_match, predict_target_symbols, score_entries, score_predictions


def _entry(symbols, task, target=None, example_id="val-000000"):
    return ManifestEntry(
        split="val",
        symbols=list(symbols),
        length=len(symbols),
        difficulty_tag="iid",
        example_id=example_id,
        seed=0,
        sequence_seed=0,
        target_symbols=target,
        task=task,
    )


def test_exact_match():
    assert exact_match(["a", "1"], ("a", "1")) == 1.0
    assert exact_match(["a"], ["a", "1"]) == 0.0


def test_predict_brackets():
    assert predict_target_symbols(_entry("([])", "brackets")) == ["V"]
    assert predict_target_symbols(_entry("([)]", "brackets")) == ["X"]


def test_predict_rle():
    assert predict_target_symbols(_entry("aaab", "rle")) == ["a", "3", "b", "1"]


def test_unknown_task_raises():
    with pytest.raises(ValueError):
        predict_target_symbols(_entry("ab", None))


def test_generated_manifests_score_perfectly():
    entries = build_bracket_manifest(seed=5, split_sizes={"train": 20, "ood_length": 6})
    entries += build_rle_manifest(seed=5, split_sizes={"train": 20})
    totals = score_entries(entries)
    assert totals == {"train": (40.0, 40), "ood_length": (6.0, 6)}


def test_wrong_or_missing_target_is_a_miss():
    entries = [_entry("()", "brackets", ["X"]), _entry("aa", "rle")]
    assert score_entries(entries) == {"val": (0.0, 2)}


def test_score_predictions_uses_oracle_not_stored_target():
    entries = [
        _entry("()", "brackets", ["X"], example_id="val-000000"),
        _entry("aab", "rle", ["a", "2", "b", "1"], example_id="val-000001"),
        _entry("{", "brackets", ["X"], example_id="val-000002"),
    ]
    predictions = {"val-000000": ["V"], "val-000001": ["a", "2", "b"]}
    # val-000000 is right despite its stale target; val-000002 has no prediction.
    assert score_predictions(entries, predictions) == {"val": (1.0, 3)}


def test_score_predictions_ignores_unknown_ids():
    entries = [_entry("aa", "rle")]
    assert score_predictions(entries, {"val-000000": ["a", "2"], "other": ["x"]}) == {"val": (1.0, 1)}
