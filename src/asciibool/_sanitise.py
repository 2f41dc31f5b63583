"""
Utilities for rendering rejected tokens as displayable strings.
"""

import unicodedata

from .types import Byte


def _escape_ctrl_chars(s: str) -> str:
    """Replace all Unicode control characters with their escape sequences."""
    cleaned = []
    for c in s:
        # control category codes vary: Cc, Cf, Cn etc.
        # so check via first character
        if unicodedata.category(c)[0] != "C":
            cleaned.append(c)
        else:
            cleaned.append(f"\\u{ord(c):04x}")
    return "".join(cleaned)


def render_bytes(b: bytes) -> str:
    """
    Decode bytes as ASCII and escape control characters.

    Bytes outside the ASCII range are replaced with the Unicode replacement character.
    """
    return _escape_ctrl_chars(bytes(b).decode("ascii", errors="replace"))


def render_byte(b: Byte) -> str:
    """Render a single byte, falling back to ``repr`` for values outside 0..255."""
    if not 0 <= b <= 0xFF:
        return repr(b)
    return render_bytes(bytes([b]))


def render_value(value: object) -> str:
    """Render any rejected input (byte, bytes-like or str) for log output."""
    if isinstance(value, int):
        return render_byte(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return render_bytes(bytes(value))
    return _escape_ctrl_chars(str(value))
