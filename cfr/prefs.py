import json
from pathlib import Path
from typing import Any, Dict, Optional

from .types import RunnerConfig

PREFS_FILE = "cfr.json"


def _load(path):
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _merge(base, override):
    if not isinstance(base, dict) or not isinstance(override, dict):
        return override or base
    out = dict(base)
    for k, v in override.items():
        if k in out and isinstance(out[k], dict) and isinstance(v, dict):
            out[k] = _merge(out[k], v)
        else:
            out[k] = v
    return out


def load_config(
    prefs_path: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> RunnerConfig:
    """
    Builds the run configuration:
      - model defaults,
      - then the prefs file (`prefs_path`, or cfr.json in the working dir),
      - then `overrides` (CLI flags; None values are ignored).
    """
    path = Path(prefs_path) if prefs_path else Path.cwd() / PREFS_FILE
    data = _merge(RunnerConfig().model_dump(), _load(path))
    flags = {k: v for k, v in (overrides or {}).items() if v is not None}
    data = _merge(data, flags)
    return RunnerConfig(**data)
