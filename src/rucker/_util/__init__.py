"""Internal helpers (ANSI colors, debug logging)."""
