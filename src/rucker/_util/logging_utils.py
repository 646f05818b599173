"""Utility functions for logging."""

import time


def _log_debug(message: str) -> None:
    """Append a timestamped debug line to ``state_dir()/rucker.log``.

    Any IO error is ignored so this never raises or affects callers.
    """
    try:
        from ..core.config import state_dir

        log_path = state_dir() / "rucker.log"
        log_path.parent.mkdir(parents=True, exist_ok=True)
        timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
        with open(log_path, "a", encoding="utf-8") as f:
            f.write(f"[{timestamp}] {message}\n")
    except Exception:
        pass
