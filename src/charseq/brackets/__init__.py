"""Bracket validity detection."""

from .utils import (
    BRACKET_PAIRS,
    CLOSERS,
    INVALID_SYMBOL,
    OPENERS,
    POLICIES,
    VALID_SYMBOL,
    BracketReport,
    check_brackets,
    generate_balanced_brackets,
    generate_unbalanced_brackets,
    is_valid,
    target_symbol_for_brackets,
)

__all__ = [
    "BRACKET_PAIRS",
    "CLOSERS",
    "INVALID_SYMBOL",
    "OPENERS",
    "POLICIES",
    "VALID_SYMBOL",
    "BracketReport",
    "check_brackets",
    "generate_balanced_brackets",
    "generate_unbalanced_brackets",
    "is_valid",
    "target_symbol_for_brackets",
]
