"""Vectorised run-length coding for one-dimensional numpy arrays."""

from __future__ import annotations

from typing import List, Tuple

import numpy as np

from .utils import Run


def run_length_encode_array(values: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Encode a 1D array as (run values, run lengths).

    Parameters
    ----------
    values:
        One-dimensional array of any dtype that supports ``!=``.

    Returns
    -------
    tuple[np.ndarray, np.ndarray]
        Values at the start of each run, and the int64 length of each run.

    Examples
    --------
    >>> run_length_encode_array(np.array([1, 1, 1, 2, 2, 3]))
    (array([1, 2, 3]), array([3, 2, 1]))
    """
    if not isinstance(values, np.ndarray):
        raise TypeError(f"values must be a numpy array, got {type(values).__name__}")
    if values.ndim != 1:
        raise ValueError(f"values must be 1-dimensional, got {values.ndim}D")

    if values.size == 0:
        return values[:0].copy(), np.zeros(0, dtype=np.int64)

    changes = values[:-1] != values[1:]
    run_starts = np.concatenate(([0], np.flatnonzero(changes) + 1))
    run_ends = np.concatenate((run_starts[1:], [values.size]))
    return values[run_starts], (run_ends - run_starts).astype(np.int64)


def run_length_decode_array(run_values: np.ndarray, run_lengths: np.ndarray) -> np.ndarray:
    """Expand (run values, run lengths) back into the original array."""
    run_values = np.asarray(run_values)
    run_lengths = np.asarray(run_lengths)
    if run_values.shape != run_lengths.shape or run_values.ndim != 1:
        raise ValueError(
            f"run_values and run_lengths must be 1D with equal shapes, "
            f"got {run_values.shape} and {run_lengths.shape}"
        )
    if np.any(run_lengths < 0):
        raise ValueError("run_lengths must be non-negative")
    return np.repeat(run_values, run_lengths)


def runs_from_arrays(run_values: np.ndarray, run_lengths: np.ndarray) -> List[Run]:
    """Convert array runs into :class:`Run` objects for string rendering."""
    return [Run(str(v), int(n)) for v, n in zip(run_values.tolist(), run_lengths.tolist())]


__all__ = ["run_length_encode_array", "run_length_decode_array", "runs_from_arrays"]
