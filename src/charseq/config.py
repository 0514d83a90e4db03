"""Config files supplying defaults for the charseq command line.

A config file is a JSON object or flat ``key: value`` lines (``#`` starts a
comment). Keys name command-line options; explicit CLI flags still win.
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any, Dict, Sequence

_BOOLEANS: Dict[str, bool] = {
    "true": True,
    "yes": True,
    "on": True,
    "false": False,
    "no": False,
    "off": False,
}
_NOT_CONFIGURABLE = {"help", "config"}


def _unquote(text: str) -> str:
    if len(text) >= 2 and text[0] == text[-1] and text[0] in "'\"":
        return text[1:-1]
    return text


def read_config(path: Path) -> Dict[str, Any]:
    """Read raw option values from ``path`` (.json, .yaml or .yml)."""
    if not path.is_file():
        raise FileNotFoundError(path)
    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")
    if suffix == ".json":
        payload = json.loads(text)
        if not isinstance(payload, dict):
            raise ValueError("JSON config must be an object at top-level")
        return payload
    if suffix not in {".yaml", ".yml"}:
        raise ValueError(f"Unsupported config format: {path.suffix} (expected .yaml/.yml/.json)")

    values: Dict[str, Any] = {}
    for line_no, line in enumerate(text.splitlines(), start=1):
        body = line.split("#", 1)[0].strip()
        if not body:
            continue
        key, sep, value = body.partition(":")
        if not sep or not key.strip():
            raise ValueError(f"Invalid config line {path}:{line_no}: expected 'key: value'")
        values[key.strip()] = _unquote(value.strip())
    return values


def _coerce(action: argparse.Action, value: Any) -> Any:
    dest = action.dest
    if isinstance(action, argparse.BooleanOptionalAction):
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.lower() in _BOOLEANS:
            return _BOOLEANS[value.lower()]
        raise ValueError(f"Config key '{dest}' must be boolean, got {value!r}")

    # Options here are plain scalars; null, lists and mappings never fit.
    if value is None or isinstance(value, (bool, list, dict)):
        raise ValueError(f"Invalid value for config key '{dest}': {value!r}")
    converted = action.type(value) if callable(action.type) else value
    if action.choices is not None and converted not in action.choices:
        raise ValueError(
            f"Invalid value for config key '{dest}': {converted!r} "
            f"(choices={list(action.choices)!r})"
        )
    return converted


def config_defaults(parser: argparse.ArgumentParser, config: Dict[str, Any]) -> Dict[str, Any]:
    """Map raw config values onto ``parser`` option destinations.

    Only optional flags are configurable. Kebab-case keys are accepted.
    Unknown keys and values an option would not accept raise ``ValueError``.
    """
    options = {
        action.dest: action
        for action in parser._actions  # noqa: SLF001
        if action.option_strings and action.dest not in _NOT_CONFIGURABLE
    }
    unknown = sorted(str(k) for k in config if str(k).replace("-", "_") not in options)
    if unknown:
        raise ValueError(f"Unknown config keys: {unknown}")
    return {
        str(key).replace("-", "_"): _coerce(options[str(key).replace("-", "_")], value)
        for key, value in config.items()
    }


def locate_config(argv: Sequence[str] | None) -> Path | None:
    """Find ``--config`` in ``argv`` before the full parser runs."""
    pre = argparse.ArgumentParser(add_help=False)
    pre.add_argument("--config", type=Path, default=None)
    known, _ = pre.parse_known_args(argv)
    return known.config


def apply_config_file(parser: argparse.ArgumentParser, path: Path) -> None:
    try:
        parser.set_defaults(**config_defaults(parser, read_config(path)))
    except (OSError, TypeError, ValueError) as exc:
        raise SystemExit(f"Failed to load config '{path}': {exc}") from exc


__all__ = ["apply_config_file", "config_defaults", "locate_config", "read_config"]
