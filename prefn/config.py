from __future__ import annotations
import os

from prefn.errors import PrefnConfigError

ENGINES = ("stream", "tree")

# Defaults
_DEFAULT_ENGINE = "stream"
_TRUTHY = {"1", "true", "yes", "on"}


def get_default_engine() -> str:
    raw = os.environ.get("PREFN_ENGINE", "").strip().lower()
    if not raw:
        return _DEFAULT_ENGINE
    if raw not in ENGINES:
        raise PrefnConfigError(f"PREFN_ENGINE must be one of {', '.join(ENGINES)}, got {raw!r}")
    return raw


def get_int_width() -> int | None:
    """Bit width for wrapping integer results, or None for unbounded ints."""
    raw = os.environ.get("PREFN_INT_WIDTH", "").strip()
    if not raw:
        return None
    try:
        width = int(raw)
    except ValueError:
        raise PrefnConfigError(f"PREFN_INT_WIDTH must be an integer, got {raw!r}") from None
    if width < 0:
        raise PrefnConfigError(f"PREFN_INT_WIDTH must not be negative, got {width}")
    return width or None


def trace_enabled() -> bool:
    return os.environ.get("PREFN_TRACE", "").strip().lower() in _TRUTHY
