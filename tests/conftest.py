"""Pytest configuration.

Pytest's importlib import mode does not add the repository root (where
`evaluate.py` lives) to `sys.path`, so prepend it here.
"""

from __future__ import annotations

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]


def _ensure_project_root_on_syspath() -> None:
    root_str = str(PROJECT_ROOT)
    if root_str not in sys.path:
        sys.path.insert(0, root_str)


_ensure_project_root_on_syspath()
