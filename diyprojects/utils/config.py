# diyprojects/utils/config.py
# Rev 0.2.0
import copy
import json
from pathlib import Path
from typing import Any, Dict, Optional

from .paths import config_dir
from .logging_setup import get_logger
from ..models.db import DbSettings

SETTINGS_FILE = config_dir() / "settings.json"

_DEFAULTS: Dict[str, Any] = {
    "database": {
        "drivername": "mysql+pymysql",
        "host": "localhost",
        "port": 3306,
        "schema": "projects",
        "user": "projects",
        "password": "projects",
    },
    "logging": {
        # "level" unset: DIYPROJECTS_LOG_LEVEL or INFO
        "console": False,
    },
}

_log = get_logger("config")


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    out = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(out.get(key), dict):
            out[key] = _merge(out[key], value)
        else:
            out[key] = value
    return out


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    path = Path(path) if path is not None else SETTINGS_FILE
    if path.exists():
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            _log.warning("Ignoring unreadable settings file %s: %s", path, e)
            return copy.deepcopy(_DEFAULTS)
        if not isinstance(data, dict):
            _log.warning("Ignoring settings file %s: top level is not an object", path)
            return copy.deepcopy(_DEFAULTS)
        return _merge(_DEFAULTS, data)
    return copy.deepcopy(_DEFAULTS)


def db_settings_from(settings: Dict[str, Any]) -> DbSettings:
    db = settings.get("database", {})
    port = db.get("port")
    return DbSettings(
        drivername=db.get("drivername", "mysql+pymysql"),
        host=db.get("host"),
        port=int(port) if port is not None else None,
        schema=db.get("schema"),
        user=db.get("user"),
        password=db.get("password"),
        query=dict(db.get("query", {})),
    )
