"""Run-length encoding utilities for character sequences."""

from __future__ import annotations

import random
import sys
from dataclasses import dataclass
from typing import Dict, Iterator, List, Sequence

DIGITS = "0123456789"
# A run count must fit in a sequence index.
MAX_RUN_COUNT = sys.maxsize


class RLEDecodeError(ValueError):
    """Raised when an encoded string cannot be parsed into runs."""


@dataclass(frozen=True)
class Run:
    """A maximal repetition of one character."""

    char: str
    count: int

    def __str__(self) -> str:
        return f"{self.char}{self.count}"


def iter_runs(sequence: Sequence[str]) -> Iterator[Run]:
    """Yield the maximal runs of ``sequence`` in scan order."""
    tokens = iter(sequence)
    try:
        current = next(tokens)
    except StopIteration:
        return
    count = 1
    for token in tokens:
        if token == current:
            count += 1
        else:
            yield Run(current, count)
            current = token
            count = 1
    # The final run is never closed by a mismatch.
    yield Run(current, count)


def encode(sequence: Sequence[str]) -> str:
    """Encode ``sequence`` as ``<char><count>`` pairs, one per run.

    Empty input encodes to the empty string.

    >>> encode("aaabbcaaddb")
    'a3b2c1a2d2b1'
    """
    return "".join(str(run) for run in iter_runs(sequence))


def parse_runs(encoded: str) -> List[Run]:
    """Parse alternating (character, decimal count) pairs.

    Raises
    ------
    RLEDecodeError
        If a digit appears where a data character is expected, a character
        has no count, or a count is zero or larger than ``MAX_RUN_COUNT``.
    """
    runs: list[Run] = []
    i = 0
    n = len(encoded)
    while i < n:
        char = encoded[i]
        if char in DIGITS:
            raise RLEDecodeError(f"Expected a data character at position {i}, got digit {char!r}")
        j = i + 1
        while j < n and encoded[j] in DIGITS:
            j += 1
        if j == i + 1:
            raise RLEDecodeError(f"Missing run count for {char!r} at position {i}")
        digits = encoded[i + 1 : j].lstrip("0")
        if len(digits) > len(str(MAX_RUN_COUNT)) or (digits and int(digits) > MAX_RUN_COUNT):
            raise RLEDecodeError(f"Run count for {char!r} at position {i} is too large")
        count = int(digits) if digits else 0
        if count == 0:
            raise RLEDecodeError(f"Zero run count for {char!r} at position {i}")
        runs.append(Run(char, count))
        i = j
    return runs


def decode(encoded: str) -> str:
    """Expand an encoded string back into the original characters."""
    return "".join(run.char * run.count for run in parse_runs(encoded))


def frequency_encode(sequence: Sequence[str]) -> str:
    """Total count per distinct character, ordered by first occurrence.

    Unlike :func:`encode`, separate runs of the same character are merged:
    ``"aaabbcaaddb"`` gives ``"a5b3c1d2"``.
    """
    counts: Dict[str, int] = {}
    for token in sequence:
        counts[token] = counts.get(token, 0) + 1
    return "".join(f"{char}{count}" for char, count in counts.items())


def generate_run_sequence(
    length: int,
    rng: random.Random | None = None,
    alphabet: str = "abcd",
    max_run: int = 4,
) -> list[str]:
    """Generate a random digit-free character sequence built from runs.

    Parameters
    ----------
    length:
        Number of characters. Must be >= 1.
    rng:
        Optional random generator for reproducibility.
    alphabet:
        Characters to draw runs from. Must be non-empty and contain no digits.
    max_run:
        Upper bound (inclusive) on the length of each drawn run.
    """
    if length < 1:
        raise ValueError(f"Length must be >= 1, got {length}")
    if not alphabet or any(ch in DIGITS for ch in alphabet):
        raise ValueError(f"Alphabet must be non-empty and digit-free, got {alphabet!r}")
    if max_run < 1:
        raise ValueError(f"max_run must be >= 1, got {max_run}")

    if rng is None:
        rng = random.Random()

    symbols: list[str] = []
    while len(symbols) < length:
        run = min(rng.randint(1, max_run), length - len(symbols))
        symbols.extend([rng.choice(alphabet)] * run)
    return symbols
