"""Manifest generator for run-length encoding examples."""

from __future__ import annotations

import argparse
import random
from typing import Dict, List, Sequence

from .make_bracket_manifest import (
    DEFAULT_SPLIT_SIZES,
    add_common_arguments,
    resolve_preset,
    split_sizes_from_args,
)
from .manifest import ManifestEntry, write_manifest
from ..rle import encode, generate_run_sequence


def build_rle_manifest(
    seed: int,
    split_sizes: Dict[str, int] | None = None,
    preset: str = "full",
    alphabet: str = "abcd",
    max_run: int = 4,
) -> List[ManifestEntry]:
    """Build run-length encoding manifest entries.

    Targets are the characters of ``encode(symbols)``, so a count of 12
    becomes the two target symbols ``"1"`` and ``"2"``.
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
        low, high = config.ood_length_range if is_ood else config.iid_length_range

        for idx in range(count):
            length = rng.randint(low, high)
            seq_seed = rng.randint(0, 2**62)
            symbols = generate_run_sequence(
                length, random.Random(seq_seed), alphabet=alphabet, max_run=max_run
            )
            entries.append(
                ManifestEntry(
                    split=split,
                    symbols=symbols,
                    length=len(symbols),
                    difficulty_tag="ood" if is_ood else "iid",
                    example_id=f"{split}-{idx:06d}",
                    seed=seed,
                    sequence_seed=seq_seed,
                    target_symbols=list(encode(symbols)),
                    task="rle",
                )
            )

    return entries


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Generate a run-length encoding manifest")
    add_common_arguments(parser)
    parser.add_argument("--alphabet", type=str, default="abcd", help="Digit-free data characters")
    parser.add_argument("--max-run", type=int, default=4, help="Longest run drawn at once")
    args = parser.parse_args(argv)

    try:
        entries = build_rle_manifest(
            seed=args.seed,
            split_sizes=split_sizes_from_args(args),
            preset=args.preset,
            alphabet=args.alphabet,
            max_run=args.max_run,
        )
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    count = write_manifest(entries, args.out)
    print(f"Wrote {count} RLE entries to {args.out}")


if __name__ == "__main__":
    main()
