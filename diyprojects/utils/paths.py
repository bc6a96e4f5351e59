# Rev 0.2.0

"""Paths and XDG helpers (Rev 0.2.0)
- Uses XDG Base Directory spec
- settings.json lives under the XDG config dir, logs under the XDG state dir
"""
from __future__ import annotations
import os
from pathlib import Path


APP_NAME = "diyprojects"


def xdg_config_home() -> Path:
    return Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))


def xdg_state_home() -> Path:
    return Path(os.environ.get("XDG_STATE_HOME", Path.home() / ".local" / "state"))


def config_dir() -> Path:
    return xdg_config_home() / APP_NAME


def logs_dir() -> Path:
    return xdg_state_home() / APP_NAME / "logs"


def ensure_dirs() -> None:
    for p in (config_dir(), logs_dir()):
        p.mkdir(parents=True, exist_ok=True)
