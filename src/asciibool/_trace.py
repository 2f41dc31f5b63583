import os

_enabled: bool = False


def enable_trace() -> None:
    """Log every rejected token at debug level."""
    global _enabled
    _enabled = True


def disable_trace() -> None:
    """Stop logging rejected tokens."""
    global _enabled
    _enabled = False


def _is_enabled() -> bool:
    """Check if tracing is enabled (respects env var override)."""
    if os.environ.get("ASCIIBOOL_TRACE", "").strip() == "1":
        return True
    return _enabled
