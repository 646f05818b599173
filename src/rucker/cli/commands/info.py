"""Informational CLI command: configuration overview."""

from __future__ import annotations

import argparse
from pathlib import Path

from ..._util.ansi import gray, supports_color, yes_no
from ...core.config import (
    global_config_path,
    global_config_search_paths,
    is_verbose,
    runtime_command,
    state_dir,
)
from ...core.paths import config_root


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    """Register the config subcommand."""
    subparsers.add_parser("config", help="Show configuration paths and resolved settings")


def dispatch(args: argparse.Namespace) -> bool:
    """Handle config.  Returns True if handled."""
    if args.cmd == "config":
        _print_config()
        return True
    return False


def _print_config() -> None:
    """Display configuration files, resolved settings and the log path."""
    color_enabled = supports_color()
    print("Configuration (read):")
    gcfg = global_config_path()
    print(
        f"- Global config file: {gray(str(gcfg), color_enabled)} "
        f"(exists: {yes_no(Path(gcfg).is_file(), color_enabled)})"
    )
    print(f"- Config dir: {gray(str(config_root()), color_enabled)}")
    print("- Global config search order:")
    for p in global_config_search_paths():
        print(f"  • {gray(str(p), color_enabled)} (exists: {yes_no(p.is_file(), color_enabled)})")
    print(f"- Runtime command: {runtime_command()}")
    print(f"- Verbose: {yes_no(is_verbose(), color_enabled)}")

    print()
    print("State (write):")
    sdir = state_dir()
    print(f"- State dir: {gray(str(sdir), color_enabled)}")
    print(f"- Debug log: {gray(str(sdir / 'rucker.log'), color_enabled)}")
