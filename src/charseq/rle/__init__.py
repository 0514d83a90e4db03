"""Run-length encoding of character sequences."""

from .arrays import run_length_decode_array, run_length_encode_array, runs_from_arrays
from .utils import (
    DIGITS,
    MAX_RUN_COUNT,
    RLEDecodeError,
    Run,
    decode,
    encode,
    frequency_encode,
    generate_run_sequence,
    iter_runs,
    parse_runs,
)

__all__ = [
    "DIGITS",
    "MAX_RUN_COUNT",
    "RLEDecodeError",
    "Run",
    "decode",
    "encode",
    "frequency_encode",
    "generate_run_sequence",
    "iter_runs",
    "parse_runs",
    "run_length_decode_array",
    "run_length_encode_array",
    "runs_from_arrays",
]
