"""CLI entry point for xunscout."""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from pathlib import Path
from typing import Any


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="xunscout",
        description="xunscout — Xunsearch driver for searchable models",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["debug", "info", "warning", "error"],
        default=None,
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"xunscout {_get_version()}",
    )

    commands = parser.add_subparsers(dest="command", required=True)
    ini_parser = commands.add_parser("ini", help="Print the Xunsearch project INI for a model")
    ini_parser.add_argument("model", help="Searchable model as 'package.module:Class'")

    args = parser.parse_args(argv)

    from xunscout.config.settings import Settings
    from xunscout.observability.logging import setup_logging

    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Error: Config file not found: {config_path}", file=sys.stderr)
            return 1
        settings = Settings.from_yaml(config_path)
    else:
        settings = Settings()

    if args.log_level:
        settings.observability.log_level = args.log_level
    setup_logging(settings.observability)

    if args.command == "ini":
        return _print_ini(settings, args.model)
    return 1


def _print_ini(settings: Any, target: str) -> int:
    from xunscout.engines.xunsearch.ini import build_model_ini

    try:
        model = _load_object(target)
    except (ImportError, AttributeError, ValueError) as e:
        print(f"Error: Cannot load model '{target}': {e}", file=sys.stderr)
        return 1

    logging.getLogger(__name__).debug("Building project INI for %s", target)
    sys.stdout.write(build_model_ini(settings.xunsearch, model))
    return 0


def _load_object(target: str) -> Any:
    module_name, sep, attr = target.partition(":")
    if not sep or not attr:
        raise ValueError("expected 'package.module:Class'")
    return getattr(importlib.import_module(module_name), attr)


def _get_version() -> str:
    """Get the package version."""
    try:
        from xunscout import __version__

        return __version__
    except ImportError:
        return "unknown"


if __name__ == "__main__":
    sys.exit(main())
