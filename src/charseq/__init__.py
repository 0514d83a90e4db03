"""Character-sequence primitives: bracket validation and run-length coding."""

from .brackets import BracketReport, check_brackets, is_valid
from .rle import RLEDecodeError, Run, decode, encode, frequency_encode, iter_runs
from .scorer import exact_match

__all__ = [
    "BracketReport",
    "RLEDecodeError",
    "Run",
    "check_brackets",
    "decode",
    "encode",
    "exact_match",
    "frequency_encode",
    "is_valid",
    "iter_runs",
]
