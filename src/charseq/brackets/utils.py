"""Bracket validity utilities."""

from __future__ import annotations

import random
from dataclasses import asdict, dataclass
from typing import Dict, List, Literal, Optional, Sequence

# Opener -> expected closer.
BRACKET_PAIRS: Dict[str, str] = {
    "(": ")",
    "[": "]",
    "{": "}",
}
OPENERS: str = "".join(BRACKET_PAIRS.keys())
CLOSERS: str = "".join(BRACKET_PAIRS.values())
_CLOSER_SET = frozenset(CLOSERS)

VALID_SYMBOL = "V"
INVALID_SYMBOL = "X"

BracketPolicy = Literal["reject", "ignore"]
BracketStatus = Literal["valid", "unbalanced", "mismatched", "invalid_character"]

POLICIES: tuple[str, ...] = ("reject", "ignore")


@dataclass(frozen=True)
class BracketReport:
    """Outcome of a single validation scan."""

    ok: bool
    status: BracketStatus
    # Index of the offending character; None when the scan ran to the end.
    position: Optional[int] = None
    depth: int = 0

    def to_dict(self) -> dict:
        return asdict(self)


def _check_policy(policy: str) -> None:
    if policy not in POLICIES:
        raise ValueError(f"Unknown bracket policy '{policy}'; available: {list(POLICIES)}")


def check_brackets(sequence: Sequence[str], policy: BracketPolicy = "reject") -> BracketReport:
    """Scan ``sequence`` with a pending-close stack and report the outcome.

    Parameters
    ----------
    sequence:
        A string or a sequence of single-character tokens.
    policy:
        How to treat characters outside ``()[]{}``. ``"reject"`` fails the
        scan with ``invalid_character``; ``"ignore"`` skips them.

    Returns
    -------
    BracketReport
        ``ok`` is True only when every opener is closed in nesting order.
    """
    _check_policy(policy)

    pending: List[str] = []
    for idx, token in enumerate(sequence):
        closer = BRACKET_PAIRS.get(token)
        if closer is not None:
            pending.append(closer)
            continue
        if token not in _CLOSER_SET:
            if policy == "ignore":
                continue
            return BracketReport(False, "invalid_character", idx, len(pending))
        if not pending:
            return BracketReport(False, "unbalanced", idx, 0)
        expected = pending.pop()
        if token != expected:
            return BracketReport(False, "mismatched", idx, len(pending) + 1)

    if pending:
        return BracketReport(False, "unbalanced", None, len(pending))
    return BracketReport(True, "valid", None, 0)


def is_valid(sequence: Sequence[str], policy: BracketPolicy = "reject") -> bool:
    """Return True if ``sequence`` is a well-formed bracket sequence."""
    return check_brackets(sequence, policy).ok


def target_symbol_for_brackets(sequence: Sequence[str], policy: BracketPolicy = "reject") -> str:
    """Return 'V' for a well-formed sequence and 'X' otherwise."""
    return VALID_SYMBOL if is_valid(sequence, policy) else INVALID_SYMBOL


def _check_kinds(kinds: str) -> str:
    if not kinds or any(k not in BRACKET_PAIRS for k in kinds):
        raise ValueError(f"kinds must be a non-empty subset of '{OPENERS}', got {kinds!r}")
    return kinds


def generate_balanced_brackets(
    length: int,
    rng: random.Random | None = None,
    kinds: str = OPENERS,
) -> list[str]:
    """Generate a random well-formed bracket sequence of given length.

    Parameters
    ----------
    length:
        Total number of brackets. Must be even and >= 2.
    rng:
        Optional random generator for reproducibility.
    kinds:
        Opening brackets to draw from.

    Raises
    ------
    ValueError
        If length is odd or < 2, or ``kinds`` is not a subset of ``([{``.
    """
    if length < 2 or length % 2 != 0:
        raise ValueError(f"Length must be even and >= 2, got {length}")
    _check_kinds(kinds)

    if rng is None:
        rng = random.Random()

    # Shuffle n opens and n closes, then rotate to the balanced cyclic shift.
    n = length // 2
    shape: list[bool] = [True] * n + [False] * n
    rng.shuffle(shape)
    shape = _rotate_to_balanced(shape)

    result: list[str] = []
    pending: list[str] = []
    for is_open in shape:
        if is_open:
            opener = rng.choice(kinds)
            pending.append(BRACKET_PAIRS[opener])
            result.append(opener)
        else:
            result.append(pending.pop())
    return result


def _rotate_to_balanced(shape: list[bool]) -> list[bool]:
    """Rotate an open/close shape so no prefix has more closes than opens."""
    best_start = 0
    min_depth = 0
    depth = 0

    for i, is_open in enumerate(shape):
        depth += 1 if is_open else -1
        if depth < min_depth:
            min_depth = depth
            best_start = i + 1

    return shape[best_start:] + shape[:best_start]


def generate_unbalanced_brackets(
    length: int,
    rng: random.Random | None = None,
    kinds: str = OPENERS,
) -> list[str]:
    """Generate a random bracket sequence of given length that is not well-formed.

    Parameters
    ----------
    length:
        Total number of brackets. Must be >= 1.
    rng:
        Optional random generator for reproducibility.
    kinds:
        Opening brackets (and their closers) to draw from.
    """
    if length < 1:
        raise ValueError(f"Length must be >= 1, got {length}")
    _check_kinds(kinds)

    if rng is None:
        rng = random.Random()

    alphabet = [k for k in kinds] + [BRACKET_PAIRS[k] for k in kinds]
    max_attempts = 100
    for _ in range(max_attempts):
        brackets = [rng.choice(alphabet) for _ in range(length)]
        if not is_valid(brackets):
            return brackets

    # More opens than closes can never balance.
    opener = kinds[0]
    opens = length // 2 + 1
    return [opener] * opens + [BRACKET_PAIRS[opener]] * (length - opens)
