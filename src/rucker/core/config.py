import os
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import yaml  # pip install pyyaml

from .paths import config_root as _config_root, state_root as _state_root_base

DEFAULT_RUNTIME = "podman"

# ---------- Global config file ----------


def global_config_search_paths() -> list[Path]:
    """Return the ordered list of paths that will be checked for global config.

    - If RUCKER_CONFIG_FILE is set, only that single path is considered.
    - Otherwise, check in order (duplicates dropped):
        1) config_root()/config.yml (RUCKER_CONFIG_DIR, or the platform default)
        2) ${XDG_CONFIG_HOME:-~/.config}/rucker/config.yml
        3) sys.prefix/etc/rucker/config.yml
        4) /etc/rucker/config.yml
    """
    env_file = os.environ.get("RUCKER_CONFIG_FILE")
    if env_file:
        return [Path(env_file).expanduser().resolve()]

    xdg_home = os.environ.get("XDG_CONFIG_HOME")
    user_cfg = (Path(xdg_home) if xdg_home else Path.home() / ".config") / "rucker" / "config.yml"
    sp_cfg = Path(sys.prefix) / "etc" / "rucker" / "config.yml"
    etc_cfg = Path("/etc/rucker/config.yml")
    dir_cfg = _config_root() / "config.yml"

    paths: list[Path] = []
    for p in (dir_cfg, user_cfg, sp_cfg, etc_cfg):
        if p not in paths:
            paths.append(p)
    return paths


def global_config_path() -> Path:
    """Global config file path.

    The first existing candidate wins. An explicit RUCKER_CONFIG_FILE is
    returned even if missing so the user sees where rucker looked. If nothing
    exists, the last candidate (/etc/rucker/config.yml) is returned.
    """
    candidates = global_config_search_paths()
    if os.environ.get("RUCKER_CONFIG_FILE"):
        return candidates[0]

    for c in candidates:
        if c.is_file():
            return c.resolve()
    return candidates[-1]


def load_global_config() -> dict[str, Any]:
    cfg_path = global_config_path()
    if not cfg_path.is_file():
        return {}
    data = yaml.safe_load(cfg_path.read_text()) or {}
    return data if isinstance(data, dict) else {}


def get_global_section(key: str) -> dict[str, Any]:
    """Return a top-level section from the global config, defaulting to ``{}``.

    If the value under *key* is not a dict (e.g. ``runtime: "oops"``),
    returns ``{}`` so callers can use ``.get()`` safely.
    """
    value = load_global_config().get(key, {})
    if not isinstance(value, dict):
        return {}
    return value or {}


# ---------- Resolved settings ----------


def _resolve_path(
    env_var: str | None,
    config_key: tuple[str, str] | None,
    default: Callable[[], Path],
) -> Path:
    """Resolve a path: env var → global config → computed default."""
    if env_var:
        env = os.environ.get(env_var)
        if env:
            return Path(env).expanduser().resolve()

    if config_key:
        try:
            val = get_global_section(config_key[0]).get(config_key[1])
            if val:
                return Path(val).expanduser().resolve()
        except (OSError, yaml.YAMLError):
            pass

    return default().resolve()


def state_dir() -> Path:
    """Writable state directory.

    Precedence: RUCKER_STATE_DIR, then ``paths.state_root`` in the global
    config, then the platform default.
    """
    return _resolve_path("RUCKER_STATE_DIR", ("paths", "state_root"), _state_root_base)


def runtime_command() -> str:
    """Container CLI used to list local images (``podman`` unless configured)."""
    env = os.environ.get("RUCKER_RUNTIME")
    if env:
        return env
    try:
        cmd = get_global_section("runtime").get("command")
    except (OSError, yaml.YAMLError):
        cmd = None
    return str(cmd) if cmd else DEFAULT_RUNTIME


_verbose: bool | None = None


def set_verbose(value: bool | None) -> None:
    """Force verbosity on or off; ``None`` restores env/config lookup."""
    global _verbose
    _verbose = value


def is_verbose() -> bool:
    """Return True when tracebacks and debug detail should be shown.

    An explicit :func:`set_verbose` wins; otherwise ``VERBOSE`` in the
    environment (any value but ``false``), then ``verbose:`` in the global
    config.
    """
    if _verbose is not None:
        return _verbose
    env = os.environ.get("VERBOSE")
    if env:
        return env != "false"
    try:
        return bool(load_global_config().get("verbose", False))
    except (OSError, yaml.YAMLError):
        return False
