# Rev 0.2.0

# diyprojects/__main__.py  (Rev 0.2.0)
# Usage:
#   python -m diyprojects
#   python -m diyprojects --settings ./settings.json --log-level DEBUG --debug
from __future__ import annotations
import argparse
import sys
from pathlib import Path

from .app_context import AppContext
from .cli.console import Console
from .cli.session import run_session
from .utils.config import db_settings_from, load_settings
from .utils.logging_setup import setup_logging
from .utils.paths import ensure_dirs


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="diyprojects", description="Manage DIY projects from the terminal.")
    p.add_argument("--settings", type=Path, default=None, help="settings.json to read (default: XDG config dir)")
    p.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING or ERROR")
    p.add_argument("--debug", action="store_true", help="also log to stderr")
    return p.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    ensure_dirs()
    settings = load_settings(args.settings)
    log_cfg = settings.get("logging", {})
    setup_logging(args.log_level or log_cfg.get("level"), console=args.debug or bool(log_cfg.get("console")))

    # --- DI wiring ---
    ctx = AppContext.create(db_settings_from(settings))
    try:
        run_session(Console(), ctx.project_service)
    finally:
        ctx.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
