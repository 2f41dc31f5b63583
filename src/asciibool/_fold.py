"""ASCII case folding shared by both matchers."""

from .types import Byte, ByteSeq

_UPPER_A = ord("A")
_UPPER_Z = ord("Z")
_LOWER_A = ord("a")
_LOWER_Z = ord("z")
# distance between 'A' and 'a'
_CASE_BIT = 0x20


def ascii_lower(b: Byte) -> Byte:
    """Lowercase ``b`` if it is an ASCII capital letter, otherwise return it unchanged."""
    if _UPPER_A <= b <= _UPPER_Z:
        return b | _CASE_BIT
    return b


def ascii_upper(b: Byte) -> Byte:
    """Uppercase ``b`` if it is an ASCII small letter, otherwise return it unchanged."""
    if _LOWER_A <= b <= _LOWER_Z:
        return b & ~_CASE_BIT
    return b


def ascii_lower_seq(seq: ByteSeq) -> ByteSeq:
    """Lowercase every ASCII letter in ``seq``; other bytes pass through."""
    # bytes.lower() only touches A-Z, non-ASCII bytes are left alone
    return bytes(seq).lower()


def ascii_upper_seq(seq: ByteSeq) -> ByteSeq:
    """Uppercase every ASCII letter in ``seq``; other bytes pass through."""
    return bytes(seq).upper()
