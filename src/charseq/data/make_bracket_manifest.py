"""Manifest generator for bracket validity examples."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Sequence, Tuple

from .manifest import ManifestEntry, write_manifest
from ..brackets import (
    OPENERS,
    generate_balanced_brackets,
    generate_unbalanced_brackets,
    target_symbol_for_brackets,
)

DEFAULT_SPLIT_SIZES: Dict[str, int] = {
    "train": 800,
    "val": 200,
    "iid_test": 200,
    "ood_length": 200,
}


@dataclass(frozen=True)
class LengthPreset:
    """In-distribution and out-of-distribution length ranges (inclusive)."""

    name: str
    iid_length_range: Tuple[int, int]
    ood_length_range: Tuple[int, int]


PRESETS: Dict[str, LengthPreset] = {
    "full": LengthPreset(name="full", iid_length_range=(2, 12), ood_length_range=(14, 20)),
    "easy": LengthPreset(name="easy", iid_length_range=(2, 8), ood_length_range=(10, 14)),
    "tiny": LengthPreset(name="tiny", iid_length_range=(2, 6), ood_length_range=(8, 10)),
}


def resolve_preset(preset: str) -> LengthPreset:
    if preset not in PRESETS:
        raise ValueError(f"Unknown preset '{preset}'; available: {sorted(PRESETS.keys())}")
    return PRESETS[preset]


def _generate_sample(rng: random.Random, length: int, valid: bool, kinds: str) -> List[str]:
    if valid:
        # Well-formed sequences need an even length >= 2.
        length = max(2, length + (length % 2))
        return generate_balanced_brackets(length, rng, kinds=kinds)
    return generate_unbalanced_brackets(length, rng, kinds=kinds)


def build_bracket_manifest(
    seed: int,
    split_sizes: Dict[str, int] | None = None,
    preset: str = "full",
    balance_valid: bool = True,
    kinds: str = OPENERS,
) -> List[ManifestEntry]:
    """Build bracket validity manifest entries.

    Parameters
    ----------
    seed:
        Random seed for reproducibility.
    split_sizes:
        Dict mapping split names to counts. Splits starting with ``ood`` draw
        lengths from the preset's OOD range.
    preset:
        One of 'full', 'easy', 'tiny'.
    balance_valid:
        If True, alternate valid and invalid samples for a 50/50 split.
    kinds:
        Opening brackets to draw from.
    """
    if split_sizes is None:
        split_sizes = DEFAULT_SPLIT_SIZES.copy()
    config = resolve_preset(preset)

    rng = random.Random(seed)
    entries: List[ManifestEntry] = []

    for split, count in split_sizes.items():
        if count <= 0:
            continue

        is_ood = split.startswith("ood")
        length_range = config.ood_length_range if is_ood else config.iid_length_range
        difficulty_tag = "ood" if is_ood else "iid"

        for idx in range(count):
            if balance_valid:
                valid = idx % 2 == 0
            else:
                valid = rng.random() < 0.5

            length = rng.randint(length_range[0], length_range[1])
            seq_seed = rng.randint(0, 2**62)
            symbols = _generate_sample(random.Random(seq_seed), length, valid, kinds)

            entries.append(
                ManifestEntry(
                    split=split,
                    symbols=symbols,
                    length=len(symbols),
                    difficulty_tag=difficulty_tag,
                    example_id=f"{split}-{idx:06d}",
                    seed=seed,
                    sequence_seed=seq_seed,
                    target_symbols=[target_symbol_for_brackets(symbols)],
                    task="brackets",
                )
            )

    return entries


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    """Output path, seed, preset and one ``--<split>`` size flag per default split."""
    parser.add_argument("--out", type=Path, required=True, help="Output JSONL path")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--preset", choices=sorted(PRESETS.keys()), default="full")
    for split, size in DEFAULT_SPLIT_SIZES.items():
        parser.add_argument(
            f"--{split.replace('_', '-')}", type=int, default=size, help=f"{split} split size"
        )


def split_sizes_from_args(args: argparse.Namespace) -> Dict[str, int]:
    return {split: getattr(args, split) for split in DEFAULT_SPLIT_SIZES}


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Generate a bracket validity manifest")
    add_common_arguments(parser)
    parser.add_argument("--kinds", type=str, default=OPENERS, help="Opening brackets to use")
    parser.add_argument(
        "--balance-valid",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Alternate valid and invalid samples",
    )
    args = parser.parse_args(argv)

    try:
        entries = build_bracket_manifest(
            seed=args.seed,
            split_sizes=split_sizes_from_args(args),
            preset=args.preset,
            balance_valid=args.balance_valid,
            kinds=args.kinds,
        )
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    count = write_manifest(entries, args.out)
    print(f"Wrote {count} bracket entries to {args.out}")


if __name__ == "__main__":
    main()
