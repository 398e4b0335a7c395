"""
Persistent preferences stored in ``~/.config/morse/config.toml``.

Only a flat ``key = value`` subset of TOML is read or written. Unknown keys
and values that fail validation are skipped, so a hand-edited file can
never break a run.
"""

from __future__ import annotations

import argparse
import os
from pathlib import Path

from .errors import OutputWriteError

_CONFIG_DIR = Path.home() / ".config" / "morse"
_CONFIG_FILE = _CONFIG_DIR / "config.toml"

_TRUE = {"true", "yes", "on", "1"}
_FALSE = {"false", "no", "off", "0"}

# key -> argparse default; every known key is a boolean flag
_DEFAULTS = {
    "slash_wordspacer": False,
    "color": True,
}


def _parse_bool(raw: str) -> bool | None:
    value = raw.strip().strip('"').lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    return None


def load_config() -> dict:
    """Read the config file. A missing or unreadable file yields ``{}``."""
    try:
        text = _CONFIG_FILE.read_text(encoding="utf-8")
    except OSError:
        return {}

    config: dict = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, _, raw = line.partition("=")
        key = key.strip()
        if key not in _DEFAULTS:
            continue
        value = _parse_bool(raw)
        if value is not None:
            config[key] = value
    return config


def save_config(settings: dict) -> Path:
    """Write known keys from *settings* and return the file path (mode 0600).

    Raises OutputWriteError if the directory or file cannot be written.
    """
    lines = ["# morse preferences"]
    for key in _DEFAULTS:
        if key in settings:
            lines.append(f"{key} = {'true' if settings[key] else 'false'}")

    try:
        _CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        fd = os.open(_CONFIG_FILE, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write("\n".join(lines) + "\n")
        os.chmod(_CONFIG_FILE, 0o600)
    except OSError as exc:
        raise OutputWriteError(
            f"Could not write config '{_CONFIG_FILE}': {exc.strerror or exc}"
        ) from exc
    return _CONFIG_FILE


def apply_config_defaults(args: argparse.Namespace, config: dict) -> None:
    """Fill values the user left at their argparse default from *config*.

    Anything set explicitly on the command line wins.
    """
    for key, default in _DEFAULTS.items():
        if key not in config or not hasattr(args, key):
            continue
        if getattr(args, key) == default:
            setattr(args, key, config[key])
